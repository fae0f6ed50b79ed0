import json

import httpx
import pytest

from greetgen.core.errors import ConfigurationError, ProviderError
from greetgen.llms.base import extract_text
from greetgen.llms.gemini_client import GeminiClient
from greetgen.llms.openai_client import OpenAIClient
from greetgen.llms.router import ProviderRegistry, resolve_provider


def test_gemini_requires_key(no_keys):
    with pytest.raises(ConfigurationError):
        GeminiClient(no_keys)


def test_openai_requires_key(no_keys):
    with pytest.raises(ConfigurationError):
        OpenAIClient(no_keys)


@pytest.mark.asyncio
async def test_gemini_request_shape(gemini_settings, recorder):
    rec = recorder(json={"candidates": [{"output": "  Hi {name}!  "}]})
    client = GeminiClient(gemini_settings, transport=rec.transport)
    out = await client.generate("diwali for clients")
    await client.close()

    assert out == "Hi {name}!"
    assert len(rec.requests) == 1
    sent = rec.requests[0]
    assert sent.method == "POST"
    assert sent.url.path == "/v1beta2/models/gemini-test:generateText"
    assert sent.url.params["key"] == "g-key"
    body = json.loads(sent.content)
    assert body["temperature"] == 0.7
    assert body["maxOutputTokens"] == 120
    assert "under 40 words" in body["prompt"]["text"]
    assert body["prompt"]["text"].endswith("diwali for clients")


@pytest.mark.asyncio
async def test_openai_request_shape(openai_settings, recorder):
    rec = recorder(json={"choices": [{"message": {"content": "Hi {name}!\n"}}]})
    client = OpenAIClient(openai_settings, transport=rec.transport)
    out = await client.generate("birthday")
    await client.close()

    assert out == "Hi {name}!"
    sent = rec.requests[0]
    assert str(sent.url) == "https://api.openai.com/v1/chat/completions"
    assert sent.headers["authorization"] == "Bearer sk-test"
    body = json.loads(sent.content)
    assert body["model"] == "gpt-test"
    assert body["max_tokens"] == 120
    assert body["temperature"] == 0.7
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert body["messages"][1]["content"] == "Create a short customer message for: birthday"


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"candidates": [{"output": "a"}]}, "a"),
        ({"candidates": [{"content": {"parts": [{"text": "b"}]}}]}, "b"),
        ({"candidates": [{"content": "c"}]}, "c"),
        ({"candidates": [{"text": "d"}]}, "d"),
        ({"output": [{"content": "e"}]}, "e"),
        ({"output": [{"text": "f"}]}, "f"),
        ({"result": "g"}, "g"),
        ({"candidates": [{"output": "", "text": "h"}]}, "h"),
        ({"candidates": []}, ""),
        ({}, ""),
    ],
)
def test_gemini_response_paths(payload, expected):
    assert extract_text(payload, GeminiClient.response_paths) == expected


def test_openai_response_paths():
    assert extract_text({"choices": [{"text": "legacy"}]}, OpenAIClient.response_paths) == "legacy"
    assert extract_text({"choices": [{"message": {}}]}, OpenAIClient.response_paths) == ""
    assert extract_text([1, 2], OpenAIClient.response_paths) == ""


@pytest.mark.asyncio
async def test_non_success_status_raises(openai_settings, recorder):
    rec = recorder(status_code=500, text="upstream exploded")
    client = OpenAIClient(openai_settings, transport=rec.transport)
    with pytest.raises(ProviderError) as info:
        await client.generate("hi")
    assert info.value.status_code == 500
    assert info.value.body == "upstream exploded"
    assert info.value.kind == "http_status"


@pytest.mark.asyncio
async def test_transport_error_is_failure(gemini_settings, recorder):
    rec = recorder(exc=httpx.ConnectError("no route"))
    client = GeminiClient(gemini_settings, transport=rec.transport)
    result = await client.try_generate("hi")
    assert not result.ok
    assert result.kind == "transport"


@pytest.mark.asyncio
async def test_invalid_json_is_failure(gemini_settings, recorder):
    rec = recorder(text="<html>oops</html>")
    client = GeminiClient(gemini_settings, transport=rec.transport)
    result = await client.try_generate("hi")
    assert not result.ok
    assert result.kind == "malformed_response"


@pytest.mark.asyncio
async def test_empty_shape_returns_empty_string(openai_settings, recorder):
    rec = recorder(json={"unexpected": True})
    client = OpenAIClient(openai_settings, transport=rec.transport)
    result = await client.try_generate("hi")
    assert result.ok
    assert result.text == ""


def test_resolve_explicit_provider_wins(both_keys):
    assert resolve_provider("OpenAI", both_keys) == "openai"


def test_resolve_only_gemini_key(gemini_settings):
    assert resolve_provider(None, gemini_settings) == "gemini"


def test_resolve_only_openai_key(openai_settings):
    assert resolve_provider(None, openai_settings) == "openai"


def test_resolve_tie_uses_default(both_keys, no_keys):
    assert resolve_provider(None, both_keys) == "gemini"
    assert resolve_provider(None, no_keys) == "gemini"
    assert resolve_provider(None, no_keys.model_copy(update={"default_provider": "openai"})) == "openai"


@pytest.mark.asyncio
async def test_registry_unknown_provider(both_keys):
    registry = ProviderRegistry(both_keys)
    result = await registry.try_generate("claude", "hi")
    assert not result.ok
    assert result.kind == "unknown_provider"


@pytest.mark.asyncio
async def test_registry_missing_key_makes_no_call(no_keys, recorder):
    rec = recorder(json={})
    registry = ProviderRegistry(no_keys, transport=rec.transport)
    result = await registry.try_generate("openai", "hi")
    assert not result.ok
    assert result.kind == "configuration"
    assert rec.requests == []
