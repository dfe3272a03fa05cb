"""Tests for the text-generation providers and registry."""

import pytest
import requests

from civic_connect.core.settings import settings
from civic_connect.services.ai_plugin import (
    AIProviderError,
    AIProviderRegistry,
    GeminiTextGenerator,
    OpenAITextGenerator,
    get_text_generator,
)

from tests.helpers import DisabledGenerator, FakeGenerator


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON")
        return self._payload


@pytest.fixture
def captured_post(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def fake_post(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if error is not None:
                raise error
            return response
        monkeypatch.setattr(requests, "post", fake_post)
        return calls

    return install


def test_openai_without_key_is_disabled():
    provider = OpenAITextGenerator(api_key="")
    assert not provider.is_enabled()
    with pytest.raises(AIProviderError):
        provider.generate_text("hi")


def test_openai_success(captured_post):
    calls = captured_post(FakeResponse(200, {"choices": [{"message": {"content": "Electricity"}}]}))
    provider = OpenAITextGenerator(api_key="sk-test", model="gpt-4o", timeout_seconds=3.0)

    assert provider.generate_text("classify this") == "Electricity"
    call = calls[0]
    assert call["url"] == OpenAITextGenerator.API_URL
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["json"]["model"] == "gpt-4o"
    assert call["json"]["messages"][-1] == {"role": "user", "content": "classify this"}
    assert call["timeout"] == 3.0


@pytest.mark.parametrize("response", [
    FakeResponse(500, text="server error"),
    FakeResponse(200, payload=None),
    FakeResponse(200, {"choices": []}),
    FakeResponse(200, {"choices": [{"message": {"content": "   "}}]}),
])
def test_openai_bad_responses_raise(captured_post, response):
    captured_post(response)
    with pytest.raises(AIProviderError):
        OpenAITextGenerator(api_key="sk-test").generate_text("x")


def test_openai_transport_error_raises(captured_post):
    captured_post(error=requests.ConnectionError("down"))
    with pytest.raises(AIProviderError):
        OpenAITextGenerator(api_key="sk-test").generate_text("x")


def test_gemini_success(captured_post):
    payload = {"candidates": [{"content": {"parts": [{"text": "Water Supply"}]}}]}
    calls = captured_post(FakeResponse(200, payload))
    provider = GeminiTextGenerator(api_key="g-test", model="gemini-pro")

    assert provider.generate_text("classify this") == "Water Supply"
    assert calls[0]["url"].endswith("/gemini-pro:generateContent?key=g-test")
    assert calls[0]["json"]["contents"][0]["parts"][0]["text"] == "classify this"


def test_gemini_transport_error_hides_key(captured_post):
    captured_post(error=requests.ConnectionError("https://x?key=g-secret"))
    with pytest.raises(AIProviderError) as excinfo:
        GeminiTextGenerator(api_key="g-secret").generate_text("x")
    assert "g-secret" not in str(excinfo.value)


def test_gemini_status_error_raises(captured_post):
    captured_post(FakeResponse(403, text="forbidden"))
    with pytest.raises(AIProviderError):
        GeminiTextGenerator(api_key="g-test").generate_text("x")


def test_registry_falls_back_to_next_provider():
    failing = FakeGenerator(error=AIProviderError("quota"), name="first")
    working = FakeGenerator(reply="ok", name="second")
    registry = AIProviderRegistry(providers=[failing, working])

    assert registry.generate_text("prompt") == "ok"
    assert failing.prompts == ["prompt"]
    assert working.prompts == ["prompt"]


def test_registry_skips_disabled_providers():
    registry = AIProviderRegistry(providers=[DisabledGenerator(name="off"), FakeGenerator(reply="ok", name="on")])
    assert [p.get_model_info()["name"] for p in registry.providers] == ["on"]


def test_registry_raises_when_all_fail():
    registry = AIProviderRegistry(providers=[
        FakeGenerator(error=AIProviderError("a"), name="first"),
        FakeGenerator(error=AIProviderError("b"), name="second"),
    ])
    with pytest.raises(AIProviderError) as excinfo:
        registry.generate_text("prompt")
    assert "first: a" in str(excinfo.value)
    assert "second: b" in str(excinfo.value)


def test_empty_registry_raises():
    registry = AIProviderRegistry(providers=[])
    assert not registry.is_enabled()
    assert registry.get_model_info()["name"] == "none"
    with pytest.raises(AIProviderError):
        registry.generate_text("prompt")


def test_registry_respects_ai_disabled(monkeypatch):
    monkeypatch.setattr(settings, "AI_ENABLED", False)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    assert AIProviderRegistry().providers == []


def test_registry_puts_preferred_provider_first(monkeypatch):
    monkeypatch.setattr(settings, "AI_ENABLED", True)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "g-test")
    monkeypatch.setattr(settings, "AI_PROVIDER", "gemini")

    providers = AIProviderRegistry().providers
    assert isinstance(providers[0], GeminiTextGenerator)
    assert isinstance(providers[1], OpenAITextGenerator)


def test_registry_only_keeps_providers_with_keys(monkeypatch):
    monkeypatch.setattr(settings, "AI_ENABLED", True)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "g-test")
    monkeypatch.setattr(settings, "AI_PROVIDER", "openai")

    providers = AIProviderRegistry().providers
    assert len(providers) == 1
    assert isinstance(providers[0], GeminiTextGenerator)


def test_get_text_generator_is_shared():
    assert get_text_generator() is get_text_generator()
