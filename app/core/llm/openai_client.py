from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class OpenAIError(Exception):
    """Base error for OpenAI client failures (safe to map to 502)."""


class OpenAIUnavailableError(OpenAIError):
    """Raised when OpenAI is not configured (e.g., missing API key)."""


class OpenAIUpstreamError(OpenAIError):
    """Raised when OpenAI API fails or returns an unexpected response."""


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float
    temperature: float = 0.7


class OpenAIClient:
    """
    Minimal OpenAI chat-completions client returning free text.

    Design notes:
    - No logging in this module (prompts/outputs contain wellness data).
    - One request per call, no retries.
    - Only `choices[0].message.content` is read from the response.
    """

    def __init__(self, *, config: OpenAIConfig, transport: httpx.AsyncBaseTransport | None = None):
        if not config.api_key:
            raise OpenAIUnavailableError("LLM API key is not configured")
        self._config = config
        self._transport = transport

    async def generate_text(self, *, system_prompt: str, user_prompt: str) -> str:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise OpenAIUpstreamError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise OpenAIUpstreamError("LLM request failed") from exc

        if resp.status_code != 200:
            # Keep the status for server-side logs; the body is never surfaced.
            raise OpenAIUpstreamError(f"LLM service returned HTTP {resp.status_code}")

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except Exception as exc:  # noqa: BLE001
            raise OpenAIUpstreamError("LLM response was malformed") from exc

        if not isinstance(content, str):
            raise OpenAIUpstreamError("LLM response has no text content")

        return content
