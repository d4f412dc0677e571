from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.core.llm.deps import build_openai_client
from app.core.llm.openai_client import (
    OpenAIClient,
    OpenAIConfig,
    OpenAIUnavailableError,
    OpenAIUpstreamError,
)
from app.core.settings import Settings


def _config(**overrides) -> OpenAIConfig:
    values = {
        "api_key": "sk-test",
        "base_url": "https://llm.example.test/v1/",
        "model": "gpt-5.2",
        "timeout_seconds": 5.0,
        "temperature": 0.7,
    }
    values.update(overrides)
    return OpenAIConfig(**values)


def _completion(content) -> dict:
    return {
        "id": "chatcmpl-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


def _generate(handler, **config_overrides) -> str:
    client = OpenAIClient(config=_config(**config_overrides), transport=httpx.MockTransport(handler))
    return asyncio.run(client.generate_text(system_prompt="sys", user_prompt="user"))


def test_generate_text_posts_chat_completion_and_returns_first_choice() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = _completion("First choice.")
        body["choices"].append({"index": 1, "message": {"role": "assistant", "content": "Second."}})
        return httpx.Response(200, json=body)

    assert _generate(handler) == "First choice."

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://llm.example.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert json.loads(request.content) == {
        "model": "gpt-5.2",
        "temperature": 0.7,
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ],
    }


def test_non_200_response_raises_without_upstream_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided: sk-te***"}})

    with pytest.raises(OpenAIUpstreamError) as exc_info:
        _generate(handler)

    assert "401" in str(exc_info.value)
    assert "Incorrect API key" not in str(exc_info.value)


@pytest.mark.parametrize(
    "body",
    [
        {"choices": []},
        {"error": "nope"},
        {"choices": [{"index": 0}]},
        _completion(None),
        _completion(["not", "text"]),
    ],
)
def test_malformed_response_raises(body: dict) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(OpenAIUpstreamError):
        _generate(handler)


def test_non_json_response_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>bad gateway</html>")

    with pytest.raises(OpenAIUpstreamError):
        _generate(handler)


def test_transport_error_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(OpenAIUpstreamError) as exc_info:
        _generate(handler)

    assert str(exc_info.value) == "LLM request failed"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_timeout_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(OpenAIUpstreamError) as exc_info:
        _generate(handler)

    assert str(exc_info.value) == "LLM request timed out"


def test_client_requires_api_key() -> None:
    with pytest.raises(OpenAIUnavailableError):
        OpenAIClient(config=_config(api_key=""))


def test_build_openai_client_requires_configured_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(OpenAIUnavailableError):
        build_openai_client(settings=Settings())


def test_build_openai_client_from_settings() -> None:
    client = build_openai_client(settings=Settings())
    assert isinstance(client, OpenAIClient)
