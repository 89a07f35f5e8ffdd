"""
Content block model for user messages.

This module defines the `ContentBlock` dataclass and its `ContentBlockType`
literal. A user message may carry a list of blocks instead of a plain string;
each block is either text or an image reference (http(s) URL or a base64
``data:`` URL). Construct blocks through the ``text_block`` and ``image``
helpers so the matching payload field is always the one that is set.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional


ContentBlockType = Literal["text", "image_url"]

# Image media types accepted for inline (base64) image payloads.
SUPPORTED_IMAGE_MEDIA_TYPES = frozenset(
    {"image/png", "image/jpeg", "image/jpg", "image/gif", "image/webp"}
)


@dataclass(frozen=True)
class ContentBlock:
    """A single block of mixed message content.

    Attributes:
        type: ``"text"`` or ``"image_url"``.
        text: Text payload for ``"text"`` blocks.
        url: Image URL for ``"image_url"`` blocks.
    """

    type: ContentBlockType
    text: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def text_block(cls, text: str) -> "ContentBlock":
        return cls(type="text", text=text)

    @classmethod
    def image(cls, url: str) -> "ContentBlock":
        return cls(type="image_url", url=url)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire shape of the block."""
        if self.type == "image_url":
            return {"type": "image_url", "image_url": {"url": self.url or ""}}
        return {"type": "text", "text": self.text or ""}


__all__ = [
    "ContentBlock",
    "ContentBlockType",
    "SUPPORTED_IMAGE_MEDIA_TYPES",
]
