from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

FailureKind = Literal[
    "configuration",
    "unknown_provider",
    "http_status",
    "transport",
    "malformed_response",
    "unexpected",
]


@dataclass
class ProviderResult:
    ok: bool
    text: str = ""
    kind: Optional[FailureKind] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, text: str) -> ProviderResult:
        return cls(True, text)

    @classmethod
    def failure(cls, kind: FailureKind, error: str, status_code: int | None = None) -> ProviderResult:
        return cls(False, "", kind=kind, error=error, status_code=status_code)
