from greetgen.core.config import Settings
from greetgen.core.providers import MAX_OUTPUT_TOKENS, PROVIDERS, STYLE_INSTRUCTION, TEMPERATURE
from greetgen.core.security import require_openai_key
from greetgen.llms.base import BaseLLM


class OpenAIClient(BaseLLM):
    name = "openai"
    label = "OpenAI"
    response_paths = PROVIDERS["openai"]["response_paths"]

    def require_key(self, settings: Settings) -> str:
        return require_openai_key(settings)

    def build_request(self, prompt: str):
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": (self._settings.openai_model or "").strip() or "gpt-4o-mini",
            "messages": [
                {"role": "system", "content": STYLE_INSTRUCTION},
                {"role": "user", "content": f"Create a short customer message for: {prompt}"},
            ],
            "max_tokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE,
        }
        return PROVIDERS["openai"]["endpoint"], headers, payload
