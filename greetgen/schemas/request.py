from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator


class GenerateRequest(BaseModel):
    prompt: StrictStr
    use_llm: bool = Field(False, alias="useLLM")
    provider: str | None = None  # None = server picks from configured keys

    @field_validator("use_llm", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, v: Any) -> str | None:
        if not isinstance(v, str) or not v.strip():
            return None
        return v.strip().lower()
