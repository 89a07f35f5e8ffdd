"""
Normalized adapter error codes (taxonomy).

Defines the `ErrorCode` enumeration raised by every public adapter operation.
Values are lowercase snake_case and are considered a stable public contract
for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories.

    Members:
        MISSING_ARGUMENT: A required field or argument is absent.
        INVALID_ARGUMENT: A value is outside its enumerated set, or two
            mutually exclusive options were both selected.
        OUT_OF_RANGE: A numeric bound was violated.
        AUTH: The credential needed for the request is missing.
        IO: A local file could not be opened or read.
        TRANSPORT: Non-2xx HTTP status, network failure or timeout.
        DECODE: The response body could not be decoded into the result shape.
        PROVIDER: A well-formed response that itself reports a failure.
        UNKNOWN: Fallback for exceptions that fit no other category.
    """

    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    AUTH = "auth"
    IO = "io"
    TRANSPORT = "transport"
    DECODE = "decode"
    PROVIDER = "provider"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
