"""OpenAI provider package.

Exports the adapter plus the request/response types and the pure helpers
callers use to build requests (``compose_vision_content``, ``wrap_schema``).
"""

from .client import OpenAIProvider
from .content import compose_vision_content, wrap_schema
from .request_models import (
    CompletionRequest,
    FileInput,
    ImageGenRequest,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)
from .responses import (
    AssistantMessage,
    ChatCompletion,
    ImageGenResult,
    InBandError,
    SegmentTimestampTranscription,
    SpeechResult,
    TranscriptionResult,
    WordTimestampTranscription,
)

__all__ = [
    "OpenAIProvider",
    "compose_vision_content",
    "wrap_schema",
    "CompletionRequest",
    "FileInput",
    "ImageGenRequest",
    "SpeechRequest",
    "TranscriptionRequest",
    "TranslationRequest",
    "AssistantMessage",
    "ChatCompletion",
    "ImageGenResult",
    "InBandError",
    "SegmentTimestampTranscription",
    "SpeechResult",
    "TranscriptionResult",
    "WordTimestampTranscription",
]
