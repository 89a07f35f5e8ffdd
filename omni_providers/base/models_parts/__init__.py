"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`omni_providers.base.models_parts` if needed, while `omni_providers.base.models`
remains the primary stable import path.
"""

from .content_block import ContentBlock, ContentBlockType, SUPPORTED_IMAGE_MEDIA_TYPES
from .message import Message, Role

__all__ = [
    "ContentBlock",
    "ContentBlockType",
    "SUPPORTED_IMAGE_MEDIA_TYPES",
    "Message",
    "Role",
]
