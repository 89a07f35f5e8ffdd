"""Pytest configuration for the providers test suite.

Every test runs offline: HTTP traffic goes through ``httpx.MockTransport``
via the ``recorder`` fixture, and provider-related environment variables are
cleared so a developer's real credentials never leak into assertions.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx
import pytest

from omni_providers.base.dto import AdapterParams
from omni_providers.base.http import close_all_clients
from omni_providers.config import reset_config_cache
from omni_providers.openai import OpenAIProvider

_PROVIDER_ENV = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_ORGANIZATION",
    "OPENAI_PROJECT",
    "PROVIDERS_CONFIG_FILE",
    "PT_TIMEOUT_HTTP_SECONDS",
    "PT_TIMEOUT_CONNECT_SECONDS",
)


class RecordingTransport:
    """Mock transport that records requests and replays a queued response.

    ``respond`` sets the response for subsequent requests; ``requests`` keeps
    every request seen, so tests can assert on headers, bodies, and call
    counts (including zero calls).
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._status = 200
        self._content = b"{}"
        self._headers: Dict[str, str] = {"content-type": "application/json"}
        self._error: Optional[Exception] = None
        self.transport = httpx.MockTransport(self._handle)

    def respond(
        self,
        status: int = 200,
        *,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._status = status
        if json_body is not None:
            self._content = json.dumps(json_body).encode("utf-8")
            self._headers = {"content-type": "application/json"}
        else:
            self._content = content or b""
            self._headers = dict(headers or {})
        self._error = None

    def fail_with(self, exc: Exception) -> None:
        self._error = exc

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content.decode("utf-8"))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status, content=self._content, headers=self._headers)


@pytest.fixture(autouse=True)
def _isolate_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear provider env vars and the config file cache around each test."""
    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def http_client(recorder: RecordingTransport) -> Iterator[httpx.Client]:
    client = httpx.Client(transport=recorder.transport)
    yield client
    client.close()


@pytest.fixture()
def make_provider(http_client: httpx.Client) -> Callable[..., OpenAIProvider]:
    """Return a factory building an ``OpenAIProvider`` bound to the recorder."""

    def _make(api_key: Optional[str] = "sk-unit", **params: Any) -> OpenAIProvider:
        return OpenAIProvider(AdapterParams(api_key=api_key, **params), http_client=http_client)

    return _make


@pytest.fixture(scope="session", autouse=True)
def _close_pooled_clients() -> Iterator[None]:
    yield
    close_all_clients()
