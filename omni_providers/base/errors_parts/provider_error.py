"""
Structured provider error exception type.

Every failure surfaced by an adapter operation is a `ProviderError` carrying a
normalized `ErrorCode`, so callers branch on ``err.code`` rather than on
exception subclasses or message text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        retryable: Hint for callers that run their own retry loop (not
            authoritative; the adapter itself never retries).
        raw: Optional original exception for diagnostics.
        status_code: HTTP status when the failure came from the transport.
        details: Extra structured context, e.g. the ``type``/``param``/``code``
            fields of an in-band provider error.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None
    status_code: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
