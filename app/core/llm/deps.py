from __future__ import annotations

from app.core.llm.openai_client import OpenAIClient, OpenAIConfig
from app.core.settings import Settings


def build_openai_client(*, settings: Settings) -> OpenAIClient:
    """
    Create an OpenAIClient from settings.

    Raises OpenAIUnavailableError when no API key is configured.
    """

    config = OpenAIConfig(
        api_key=settings.openai_api_key or "",
        base_url=settings.openai_base_url,
        model=settings.openai_model,
        timeout_seconds=float(settings.openai_timeout_seconds),
        temperature=float(settings.openai_temperature),
    )
    return OpenAIClient(config=config)
