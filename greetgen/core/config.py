import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.3"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    # Used when both keys or neither key is configured and the request names no provider
    default_provider: str = "gemini"
    request_timeout: float = 30
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.3"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            default_provider=os.getenv("DEFAULT_PROVIDER", "gemini").strip().lower(),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def has_key(self, provider: str) -> bool:
        key = getattr(self, f"{provider}_api_key", "")
        return bool(key and key.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
