from typing import Any

import httpx
from pydantic import ValidationError as SchemaError

from greetgen.core.config import Settings
from greetgen.core.errors import ValidationError
from greetgen.llms.router import ProviderRegistry, resolve_provider
from greetgen.rules.occasions import classify_occasion, template_for
from greetgen.schemas.request import GenerateRequest
from greetgen.schemas.response import GenerateResponse
from greetgen.utils.logger import logger

PROMPT_REQUIRED = "prompt string required"


def parse_request(payload: Any) -> GenerateRequest:
    if not isinstance(payload, dict):
        payload = {}
    try:
        return GenerateRequest.model_validate(payload)
    except SchemaError as e:
        raise ValidationError(PROMPT_REQUIRED) from e


class MessageService:
    """Turns a validated request into a message.

    A provider is tried only when the request asks for it. Any provider
    failure is logged and answered with the keyword template instead.
    """

    def __init__(
        self,
        settings: Settings,
        registry: ProviderRegistry | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.registry = registry or ProviderRegistry(settings, transport=transport)

    async def generate(self, request: GenerateRequest) -> GenerateResponse:
        if request.use_llm:
            provider = resolve_provider(request.provider, self.settings)
            result = await self.registry.try_generate(provider, request.prompt)
            if result.ok:
                logger.info("llm_used", extra={"provider": provider, "chars": len(result.text)})
                return GenerateResponse(message=result.text)
            logger.warning(
                "provider_failed",
                extra={
                    "provider": provider,
                    "kind": result.kind,
                    "status_code": result.status_code,
                    "error": result.error,
                },
            )
        occasion = classify_occasion(request.prompt)
        logger.info("rule_used", extra={"occasion": occasion})
        return GenerateResponse(message=template_for(occasion))

    async def close(self) -> None:
        await self.registry.close()
