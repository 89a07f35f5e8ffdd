"""Authenticated HTTP exchange shared by every adapter operation.

Purpose:
    Perform exactly one request against the provider and hand back the raw
    response bytes, or raise a :class:`ProviderError` describing why that was
    not possible. Decoding is deliberately left to the caller.

Behavior:
    - An empty bearer token fails with ``AUTH`` before any network activity.
    - ``Authorization: Bearer <token>`` and the caller's ``Content-Type`` are
      always set; extra headers (organization, project) are merged first and
      any spelling of those two names among them is replaced.
    - A non-2xx response is drained and closed so the pooled connection can be
      reused, then reported as ``TRANSPORT`` carrying the status line.
    - Network failures and client-side timeouts are ``TRANSPORT`` as well.
    - Nothing is retried.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from ..errors import ErrorCode, ProviderError, is_retryable_status


@dataclass(frozen=True)
class HttpExchange:
    """Outcome of a successful exchange.

    Attributes:
        status_code: HTTP status (always 2xx).
        content: The complete response body.
    """

    status_code: int
    content: bytes


def _error_body_details(body: bytes) -> Dict[str, Any]:
    """Extract the provider's ``error`` object from a drained failure body, if any."""
    try:
        parsed = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return {}
    err = parsed.get("error") if isinstance(parsed, dict) else None
    if not isinstance(err, dict):
        return {}
    return {k: err[k] for k in ("message", "type", "param", "code") if err.get(k) is not None}


def exchange(
    client: httpx.Client,
    method: str,
    url: str,
    body: bytes,
    content_type: str,
    token: Optional[str],
    *,
    extra_headers: Optional[Mapping[str, str]] = None,
    provider: str = "openai",
    model: Optional[str] = None,
) -> HttpExchange:
    """Send one request and return the full body of a successful response.

    Parameters:
        client: HTTP client owning connection reuse and the timeout.
        method: HTTP method, e.g. ``"POST"``.
        url: Absolute URL, or a path relative to ``client.base_url``.
        body: Encoded request body.
        content_type: Value for the ``Content-Type`` header.
        token: Bearer credential; must be non-empty.
        extra_headers: Additional static headers.
        provider: Provider key used when attributing errors.
        model: Model name used when attributing errors.

    Returns:
        :class:`HttpExchange` with the unconsumed response body.

    Raises:
        ProviderError: ``AUTH`` for a missing token, ``TRANSPORT`` for a
            non-2xx status or a network/timeout failure.
    """
    if not token:
        raise ProviderError(
            code=ErrorCode.AUTH,
            message="API key is empty",
            provider=provider,
            model=model,
        )

    # Case-insensitive: a lowercase "authorization" extra is replaced, not duplicated.
    headers = httpx.Headers(extra_headers or {})
    headers["Content-Type"] = content_type
    headers["Authorization"] = f"Bearer {token}"

    try:
        with client.stream(method, url, content=body, headers=headers) as response:
            payload = response.read()
            if not response.is_success:
                raise ProviderError(
                    code=ErrorCode.TRANSPORT,
                    message=f"HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                    provider=provider,
                    model=model,
                    retryable=is_retryable_status(response.status_code),
                    status_code=response.status_code,
                    details=_error_body_details(payload),
                )
            return HttpExchange(
                status_code=response.status_code,
                content=payload,
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProviderError(
            code=ErrorCode.TRANSPORT,
            message=f"request failed: {exc}",
            provider=provider,
            model=model,
            retryable=isinstance(exc, (httpx.TimeoutException, httpx.NetworkError)),
            raw=exc,
        ) from exc


__all__ = ["HttpExchange", "exchange"]
