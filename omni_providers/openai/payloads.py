"""Request body assembly for the JSON endpoints.

``build_completion_request`` is the single entry point for chat payloads:
it validates the argument combination and then picks one of the two
:class:`CompletionRequest` constructors. ``encode_json_body`` turns any
request value into bytes, reporting unserializable values as
``INVALID_ARGUMENT`` instead of letting ``TypeError`` escape.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from ..base.errors import ErrorCode, ProviderError
from ..base.models import Message
from .constants import PROVIDER_NAME
from .request_models import CompletionRequest, MessageLike
from .validation import validate_completion_inputs

JSON_CONTENT_TYPE = "application/json"


def build_completion_request(
    default_model: str,
    content: Optional[Sequence[MessageLike]] = None,
    *,
    with_format_response: bool = False,
    format_response: Optional[Dict[str, Any]] = None,
    custom_request: Union[CompletionRequest, Mapping[str, Any], None] = None,
) -> CompletionRequest:
    """Return the chat request for one ``send_message`` call.

    Parameters:
        default_model: Model used by the content path.
        content: Conversation messages (content path).
        with_format_response: Attach ``format_response`` as ``response_format``.
        format_response: Envelope produced by ``wrap_schema``.
        custom_request: Caller-prepared body (custom path). When combined
            with a schema, the schema replaces its ``response_format``.

    Raises:
        ProviderError: ``MISSING_ARGUMENT`` or ``INVALID_ARGUMENT`` for an
            invalid argument combination.
    """
    validate_completion_inputs(
        content,
        with_format_response=with_format_response,
        format_response=format_response,
        custom_request=custom_request,
    )
    schema = format_response if with_format_response else None
    if custom_request is not None:
        return CompletionRequest.from_custom(custom_request, response_format=schema)
    if isinstance(content, Message):
        content = [content]
    return CompletionRequest.from_messages(default_model, content or [], response_format=schema)


def encode_json_body(body: Mapping[str, Any], *, model: Optional[str] = None) -> bytes:
    """Serialize ``body`` to UTF-8 JSON bytes.

    Raises:
        ProviderError: ``INVALID_ARGUMENT`` when a value is not JSON
            serializable (including NaN/infinity floats).
    """
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ProviderError(
            code=ErrorCode.INVALID_ARGUMENT,
            message=f"failed to serialize request body: {exc}",
            provider=PROVIDER_NAME,
            model=model,
            raw=exc,
        ) from exc


__all__ = ["JSON_CONTENT_TYPE", "build_completion_request", "encode_json_body"]
