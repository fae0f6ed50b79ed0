# =============================================================================
# greetgen/llms/router.py — Provider resolution and adapter registry
# =============================================================================
# Explicit provider wins. Otherwise the only provider with a key wins; with
# both keys or none, Settings.default_provider is used.
# =============================================================================

import httpx

from greetgen.core.config import Settings
from greetgen.core.errors import ConfigurationError
from greetgen.core.providers import PROVIDERS
from greetgen.llms.base import BaseLLM
from greetgen.llms.gemini_client import GeminiClient
from greetgen.llms.openai_client import OpenAIClient
from greetgen.llms.types import ProviderResult

CLIENTS: dict[str, type[BaseLLM]] = {
    "gemini": GeminiClient,
    "openai": OpenAIClient,
}


def resolve_provider(requested: str | None, settings: Settings) -> str:
    if requested and requested.strip():
        return requested.strip().lower()
    gemini_ok = settings.has_key("gemini")
    openai_ok = settings.has_key("openai")
    if gemini_ok and not openai_ok:
        return "gemini"
    if openai_ok and not gemini_ok:
        return "openai"
    return settings.default_provider


class ProviderRegistry:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._clients: dict[str, BaseLLM] = {}

    def get(self, provider: str) -> BaseLLM:
        if provider not in PROVIDERS:
            raise KeyError(f"Unknown provider: {provider}")
        client = self._clients.get(provider)
        if client is None:
            # Raises ConfigurationError when the key is missing
            client = CLIENTS[provider](self._settings, transport=self._transport)
            self._clients[provider] = client
        return client

    async def try_generate(self, provider: str, prompt: str) -> ProviderResult:
        try:
            client = self.get(provider)
        except KeyError as e:
            return ProviderResult.failure("unknown_provider", str(e.args[0]))
        except ConfigurationError as e:
            return ProviderResult.failure("configuration", str(e))
        return await client.try_generate(prompt)

    async def close(self) -> None:
        for client in self._clients.values():
            await client.close()
        self._clients.clear()
