# -----------------------------------------------------------------------------
# greetgen/core/errors.py — Error taxonomy
# -----------------------------------------------------------------------------
# ValidationError is the only one that reaches the client (400).
# ConfigurationError and ProviderError are turned into fallback messages.
# -----------------------------------------------------------------------------


class GreetgenError(Exception):
    pass


class ValidationError(GreetgenError):
    pass


class ConfigurationError(GreetgenError):
    pass


class ProviderError(GreetgenError):
    def __init__(
        self,
        message: str,
        kind: str = "http_status",
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body
