"""Message content composition helpers for OpenAI chat requests.

Two pure builders used before a chat completion is assembled:

- :func:`compose_vision_content` turns one image (URL or base64 payload) and an
  optional caption into an ordered list of :class:`ContentBlock` values: the
  image block always first, the caption block second and only when non-empty.
- :func:`wrap_schema` wraps a caller-supplied JSON schema in the
  ``response_format`` envelope used for structured outputs. The schema tree is
  passed through verbatim; the provider validates it.

Neither function performs I/O. Invalid inputs raise :class:`ProviderError`
with ``INVALID_ARGUMENT``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..base.errors import ErrorCode, ProviderError
from ..base.models import SUPPORTED_IMAGE_MEDIA_TYPES, ContentBlock
from .constants import PROVIDER_NAME


def compose_vision_content(
    media_type: str,
    is_url: bool,
    payload: str,
    caption: str = "",
) -> List[ContentBlock]:
    """Build the content blocks for a single image plus optional caption.

    Parameters:
        media_type: MIME type of a base64 payload, one of
            ``SUPPORTED_IMAGE_MEDIA_TYPES``. Ignored when ``is_url`` is set.
        is_url: True when ``payload`` is an image URL used verbatim.
        payload: Image URL or base64-encoded image bytes.
        caption: Optional text sent after the image.

    Returns:
        ``[image_block]`` or ``[image_block, text_block]``.

    Raises:
        ProviderError: ``INVALID_ARGUMENT`` for an empty payload, or for a
            base64 payload whose media type is empty or unsupported.
    """
    if not payload:
        raise ProviderError(
            code=ErrorCode.INVALID_ARGUMENT,
            message="image payload (url or base64 data) must be provided",
            provider=PROVIDER_NAME,
        )
    if not is_url:
        if not media_type:
            raise ProviderError(
                code=ErrorCode.INVALID_ARGUMENT,
                message="media_type must be provided for base64 image data",
                provider=PROVIDER_NAME,
            )
        if media_type not in SUPPORTED_IMAGE_MEDIA_TYPES:
            raise ProviderError(
                code=ErrorCode.INVALID_ARGUMENT,
                message=(
                    f"unsupported media_type {media_type!r}; expected one of "
                    + ", ".join(sorted(SUPPORTED_IMAGE_MEDIA_TYPES))
                ),
                provider=PROVIDER_NAME,
            )

    url = payload if is_url else f"data:{media_type};base64,{payload}"
    blocks = [ContentBlock.image(url)]
    if caption:
        blocks.append(ContentBlock.text_block(caption))
    return blocks


def wrap_schema(name: str, schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the structured-output envelope for ``schema``.

    Example::

        wrap_schema("Answer", {"type": "object", "properties": {"title": {"type": "string"}}})
        # {"type": "json_schema",
        #  "json_schema": {"name": "Answer", "schema": {...}}}
    """
    return {"type": "json_schema", "json_schema": {"name": name, "schema": schema}}


__all__ = ["compose_vision_content", "wrap_schema"]
