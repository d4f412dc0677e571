from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from app.analysis.prompt import build_analysis_prompts
from app.analysis.schemas import AnalysisRequest, AnalysisResult
from app.core.metrics import mood_analysis_total
from app.core.settings import Settings
from app.domain.exceptions import BusinessValidationError, ConfigurationError, UpstreamError

logger = logging.getLogger("app.mood_analysis")


class LLMClient(Protocol):
    async def generate_text(self, *, system_prompt: str, user_prompt: str) -> str: ...


LLMClientFactory = Callable[..., LLMClient]


def _validate_field_lengths(*, request: AnalysisRequest, max_chars: int) -> None:
    fields = {
        "moodHistory": request.mood_history,
        "sleepHistory": request.sleep_history,
        "habits": request.habits,
        "observations": request.observations,
    }
    for name, value in fields.items():
        if len(value) > max_chars:
            raise BusinessValidationError(
                f"Field '{name}' exceeds the maximum length of {max_chars} characters."
            )


class AnalysisProxy:
    """
    Stateless request handler: render the prompt, call the LLM once, relay its text.

    The credential is read from the injected settings at each call (the HTTP
    dependency builds fresh settings per request) and is never logged. A missing credential fails before any client is created.
    """

    def __init__(self, *, settings: Settings, client_factory: LLMClientFactory):
        self._settings = settings
        self._client_factory = client_factory

    async def analyze(
        self, request: AnalysisRequest, *, request_id: str | None = None
    ) -> AnalysisResult:
        _validate_field_lengths(
            request=request, max_chars=self._settings.analysis_max_field_chars
        )

        api_key = self._settings.openai_api_key
        if not api_key or not api_key.strip():
            mood_analysis_total.labels(outcome="configuration_error").inc()
            logger.error(
                "Mood analysis failed (LLM not configured)",
                extra={"request_id": request_id, "error": "configuration"},
            )
            raise ConfigurationError("Analysis service is not configured")

        system_prompt, user_prompt = build_analysis_prompts(request)

        try:
            client = self._client_factory(settings=self._settings)
            text = await client.generate_text(system_prompt=system_prompt, user_prompt=user_prompt)
        except Exception as exc:  # noqa: BLE001 - any upstream failure maps to UpstreamError
            mood_analysis_total.labels(outcome="upstream_error").inc()
            logger.error(
                "Mood analysis failed",
                exc_info=exc,
                extra={"request_id": request_id, "error": "upstream"},
            )
            raise UpstreamError("Failed to analyze data") from exc

        mood_analysis_total.labels(outcome="success").inc()
        return AnalysisResult(result=text)
