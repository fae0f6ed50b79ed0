from greetgen.core.config import Settings
from greetgen.core.errors import ConfigurationError


def require_openai_key(settings: Settings) -> str:
    key = settings.openai_api_key
    if not key or not key.strip():
        raise ConfigurationError("OPENAI_API_KEY is not set")
    return key.strip()


def require_gemini_key(settings: Settings) -> str:
    key = settings.gemini_api_key
    if not key or not key.strip():
        raise ConfigurationError("GEMINI_API_KEY or GOOGLE_API_KEY is not set")
    return key.strip()


def key_status(settings: Settings) -> dict[str, str]:
    return {
        name: "configured" if settings.has_key(name) else "missing_key"
        for name in ("gemini", "openai")
    }
