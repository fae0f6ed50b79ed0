PROVIDERS = {
    "gemini": {
        "endpoint": "https://generativelanguage.googleapis.com/v1beta2/models/{model}:generateText",
        "response_paths": (
            ("candidates", 0, "output"),
            ("candidates", 0, "content", "parts", 0, "text"),
            ("candidates", 0, "content"),
            ("candidates", 0, "text"),
            ("output", 0, "content"),
            ("output", 0, "text"),
            ("result",),
        ),
    },
    "openai": {
        "endpoint": "https://api.openai.com/v1/chat/completions",
        "response_paths": (
            ("choices", 0, "message", "content"),
            ("choices", 0, "text"),
        ),
    },
}

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 120

STYLE_INSTRUCTION = (
    "You are a helpful assistant that writes short, friendly customer messages. "
    "Keep it under 40 words and include a {name} placeholder where appropriate."
)
