"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction and exception-type mapping so that failures
raised by ``httpx``, the filesystem, JSON and pydantic all land in the same
taxonomy before they leave an adapter.
"""
from __future__ import annotations

import json
from typing import FrozenSet, Optional

import httpx
from pydantic import ValidationError

from .error_code import ErrorCode
from .provider_error import ProviderError


_RETRYABLE_STATUSES: FrozenSet[int] = frozenset({408, 409, 429, 500, 502, 503, 504})


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    # httpx raises RuntimeError when .response is read on a request-phase error
    try:
        resp = getattr(exc, "response", None)
    except RuntimeError:
        resp = None
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def is_retryable_status(status: Optional[int]) -> bool:
    """Return True when ``status`` usually indicates a transient condition."""
    return status in _RETRYABLE_STATUSES


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Network/timeout failures (``httpx.HTTPError``, ``TimeoutError``,
           ``ConnectionError``) and anything carrying an HTTP status.
        3. Filesystem failures (``OSError``).
        4. Decoding failures (JSON, pydantic validation, unicode).
        5. Serialization/argument failures (``TypeError``, ``ValueError``).
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (httpx.HTTPError, TimeoutError, ConnectionError)):
        return ErrorCode.TRANSPORT
    if _extract_status(exc) is not None:
        return ErrorCode.TRANSPORT
    if isinstance(exc, OSError):
        return ErrorCode.IO
    if isinstance(exc, (json.JSONDecodeError, ValidationError, UnicodeDecodeError)):
        return ErrorCode.DECODE
    if isinstance(exc, (TypeError, ValueError)):
        return ErrorCode.INVALID_ARGUMENT
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "is_retryable_status",
    "_extract_status",
]
