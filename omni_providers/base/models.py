"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``omni_providers.base.models_parts``.
"""

from .models_parts.content_block import ContentBlock, ContentBlockType, SUPPORTED_IMAGE_MEDIA_TYPES
from .models_parts.message import Message, Role

__all__ = [
    "ContentBlock",
    "ContentBlockType",
    "SUPPORTED_IMAGE_MEDIA_TYPES",
    "Message",
    "Role",
]
