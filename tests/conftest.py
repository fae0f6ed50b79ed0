import httpx
import pytest

from greetgen.core.config import Settings


class Recorder:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, json=None, text: str | None = None, exc: Exception | None = None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def no_keys() -> Settings:
    return Settings()


@pytest.fixture
def gemini_settings() -> Settings:
    return Settings(gemini_api_key="g-key", gemini_model="gemini-test")


@pytest.fixture
def openai_settings() -> Settings:
    return Settings(openai_api_key="sk-test", openai_model="gpt-test")


@pytest.fixture
def both_keys() -> Settings:
    return Settings(gemini_api_key="g-key", openai_api_key="sk-test")


@pytest.fixture
def recorder():
    return Recorder
