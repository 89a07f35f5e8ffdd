"""Unified timeout configuration for adapter HTTP exchanges.

The adapter never enforces deadlines itself: the configured HTTP client
(``httpx.Client``) owns them, and an expired deadline surfaces as a
``TRANSPORT`` error. This module is the single place that decides the
numeric value handed to that client.

Supported environment variables (all optional):
    PT_TIMEOUT_HTTP_SECONDS     whole-request timeout (default 60)
    PT_TIMEOUT_CONNECT_SECONDS  connect-phase timeout (default 10)
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for a single exchange.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from ``name``; return ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`.

    The cache is refreshed when the relevant environment variables change so
    tests can adjust values with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [os.getenv("PT_TIMEOUT_HTTP_SECONDS", ""), os.getenv("PT_TIMEOUT_CONNECT_SECONDS", "")]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", 60.0),
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
