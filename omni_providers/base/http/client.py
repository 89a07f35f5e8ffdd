"""Shared HTTP client pool for adapters.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so that concurrent operations reuse pooled connections instead
    of allocating a client per call. Timeouts derive from
    :func:`get_timeout_config` unless the caller passes an explicit value.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose, timeout)``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.

Thread-safety:
    ``httpx.Client`` is safe for concurrent use; creation of a pooled entry is
    guarded by a re-entrant lock. No call observes another call's request.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_ClientKey = Tuple[Optional[str], str, float]

_CLIENTS: Dict[_ClientKey, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(
    base_url: Optional[str],
    purpose: str,
    timeout_seconds: Optional[float] = None,
) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so relative request
            paths can be used. ``None`` groups clients under a shared key.
        purpose: A short string discriminating separate pools (e.g.,
            ``"openai"``). Keep stable to maximize reuse.
        timeout_seconds: Explicit whole-request timeout. When omitted the
            value comes from :func:`get_timeout_config`.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    cfg = get_timeout_config()
    seconds = float(timeout_seconds) if timeout_seconds else cfg.http_timeout_seconds
    key = (base_url, purpose, seconds)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = httpx.Timeout(seconds, connect=min(seconds, cfg.connect_timeout_seconds))
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - shutdown path, close errors are not actionable
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
