"""Tests for the bearer-authenticated HTTP exchange.

Covers:
- Empty token fails with AUTH and performs no request.
- Headers: bearer token, content type, extra headers that cannot override them.
- Non-2xx responses become TRANSPORT with status and provider error details.
- Network failures become TRANSPORT with the original exception attached.
"""
from __future__ import annotations

import httpx
import pytest

from omni_providers.base.errors import ErrorCode, ProviderError
from omni_providers.base.http import exchange

URL = "https://api.example.com/v1/chat/completions"


def test_empty_token_fails_before_any_request(recorder, http_client):
    with pytest.raises(ProviderError) as exc:
        exchange(http_client, "POST", URL, b"{}", "application/json", "")
    assert exc.value.code is ErrorCode.AUTH  # nosec B101
    assert recorder.calls == 0  # nosec B101


def test_success_returns_full_body_and_sets_headers(recorder, http_client):
    recorder.respond(200, content=b"\x00\x01binary", headers={"x-request-id": "abc"})
    out = exchange(
        http_client,
        "POST",
        URL,
        b'{"a":1}',
        "application/json",
        "sk-1",
        extra_headers={"OpenAI-Project": "proj", "Authorization": "Bearer other"},
    )
    assert out.status_code == 200  # nosec B101
    assert out.content == b"\x00\x01binary"  # nosec B101
    sent = recorder.last
    assert sent.headers["Authorization"] == "Bearer sk-1"  # nosec B101
    assert sent.headers["Content-Type"] == "application/json"  # nosec B101
    assert sent.headers["OpenAI-Project"] == "proj"  # nosec B101
    assert sent.content == b'{"a":1}'  # nosec B101


def test_non_success_status_raises_transport_with_details(recorder, http_client):
    recorder.respond(
        429,
        json_body={"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}},
    )
    with pytest.raises(ProviderError) as exc:
        exchange(http_client, "POST", URL, b"{}", "application/json", "sk-1", model="gpt-4o-mini")
    err = exc.value
    assert err.code is ErrorCode.TRANSPORT  # nosec B101
    assert err.status_code == 429  # nosec B101
    assert err.message == "HTTP 429 Too Many Requests"  # nosec B101
    assert err.retryable is True  # nosec B101
    assert err.details["message"] == "Rate limit reached"  # nosec B101
    assert err.model == "gpt-4o-mini"  # nosec B101


def test_non_json_error_body_has_no_details(recorder, http_client):
    recorder.respond(400, content=b"<html>bad request</html>")
    with pytest.raises(ProviderError) as exc:
        exchange(http_client, "POST", URL, b"{}", "application/json", "sk-1")
    assert exc.value.status_code == 400  # nosec B101
    assert exc.value.retryable is False  # nosec B101
    assert exc.value.details == {}  # nosec B101


def test_network_failure_is_transport(recorder, http_client):
    recorder.fail_with(httpx.ConnectError("connection refused"))
    with pytest.raises(ProviderError) as exc:
        exchange(http_client, "POST", URL, b"{}", "application/json", "sk-1")
    assert exc.value.code is ErrorCode.TRANSPORT  # nosec B101
    assert isinstance(exc.value.raw, httpx.ConnectError)  # nosec B101
    assert exc.value.status_code is None  # nosec B101


def test_timeout_is_transport(recorder, http_client):
    recorder.fail_with(httpx.ReadTimeout("deadline exceeded"))
    with pytest.raises(ProviderError) as exc:
        exchange(http_client, "POST", URL, b"{}", "application/json", "sk-1")
    assert exc.value.code is ErrorCode.TRANSPORT  # nosec B101
    assert exc.value.retryable is True  # nosec B101


def test_lowercase_extra_headers_are_replaced_not_duplicated(recorder, http_client):
    recorder.respond(200, content=b"{}")
    exchange(
        http_client,
        "POST",
        URL,
        b"{}",
        "application/json",
        "sk-1",
        extra_headers={"authorization": "Bearer other", "content-type": "text/plain", "x-trace": "t"},
    )
    sent = recorder.last
    assert sent.headers.get_list("authorization") == ["Bearer sk-1"]  # nosec B101
    assert sent.headers.get_list("content-type") == ["application/json"]  # nosec B101
    assert sent.headers["x-trace"] == "t"  # nosec B101
