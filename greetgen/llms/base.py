# =============================================================================
# greetgen/llms/base.py — Shared provider adapter
# =============================================================================
# A concrete adapter only supplies its credential lookup, its request builder
# and the ordered response paths to probe. One POST per call, no retry.
# =============================================================================

from typing import Any

import httpx

from greetgen.core.config import Settings
from greetgen.core.errors import ProviderError
from greetgen.llms.types import ProviderResult


def extract_text(data: Any, paths) -> str:
    """Return the first non-empty string found along ``paths``, else ""."""
    for path in paths:
        node = data
        for step in path:
            if isinstance(step, int):
                node = node[step] if isinstance(node, list) and len(node) > step else None
            else:
                node = node.get(step) if isinstance(node, dict) else None
            if node is None:
                break
        if isinstance(node, str) and node:
            return node
    return ""


class BaseLLM:
    name = ""
    label = ""
    response_paths: tuple = ()

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._api_key = self.require_key(settings)

    def require_key(self, settings: Settings) -> str:
        raise NotImplementedError

    def build_request(self, prompt: str) -> tuple[str, dict[str, Any], dict[str, Any]]:
        """Return (url, headers, json payload) for one generation call."""
        raise NotImplementedError

    def build_params(self) -> dict[str, str]:
        return {}

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._settings.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def generate(self, prompt: str) -> str:
        url, headers, payload = self.build_request(prompt)
        client = await self._get_client()
        try:
            r = await client.post(url, params=self.build_params(), headers=headers, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            # Bad keys or model names can fail while the request is being built
            raise ProviderError(f"{self.label} API unreachable: {e!s}", kind="transport") from e
        if not r.is_success:
            body = r.text or ""
            raise ProviderError(
                f"{self.label} API error: {r.status_code} {body[:500]}",
                status_code=r.status_code,
                body=body,
            )
        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError(f"{self.label} API returned invalid JSON", kind="malformed_response") from e
        return extract_text(data, self.response_paths).strip()

    async def try_generate(self, prompt: str) -> ProviderResult:
        try:
            text = await self.generate(prompt)
        except ProviderError as e:
            return ProviderResult.failure(e.kind, str(e), status_code=e.status_code)
        except Exception as e:
            return ProviderResult.failure("unexpected", f"{self.label} call failed: {e!s}")
        return ProviderResult.success(text)
