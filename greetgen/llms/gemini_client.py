# =============================================================================
# greetgen/llms/gemini_client.py — Google Gemini text generation client
# =============================================================================
# Uses GEMINI_API_KEY (or GOOGLE_API_KEY) and GEMINI_MODEL. The key goes in
# the query string. Several response shapes are probed since the field that
# carries the text has moved between API versions.
# =============================================================================

from greetgen.core.config import Settings
from greetgen.core.providers import MAX_OUTPUT_TOKENS, PROVIDERS, STYLE_INSTRUCTION, TEMPERATURE
from greetgen.core.security import require_gemini_key
from greetgen.llms.base import BaseLLM


class GeminiClient(BaseLLM):
    name = "gemini"
    label = "Gemini"
    response_paths = PROVIDERS["gemini"]["response_paths"]

    def require_key(self, settings: Settings) -> str:
        return require_gemini_key(settings)

    def build_params(self) -> dict[str, str]:
        return {"key": self._api_key}

    def build_request(self, prompt: str):
        model = (self._settings.gemini_model or "").strip() or "gemini-1.3"
        url = PROVIDERS["gemini"]["endpoint"].format(model=model)
        instruction = f"{STYLE_INSTRUCTION} Create a single short message for this prompt: {prompt}"
        payload = {
            "prompt": {"text": instruction},
            "temperature": TEMPERATURE,
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
        }
        return url, {"Content-Type": "application/json"}, payload
