"""Typed result models for OpenAI adapter operations.

Purpose
-------
Pydantic v2 models describing the decoded response of each operation. Models
are lenient about absent fields (the provider omits many of them depending on
the model and options), treat an explicit ``null`` as absent, and ignore
unknown keys, but a body whose shape contradicts a declared type fails
validation and is reported as ``DECODE`` by :mod:`omni_providers.openai.decoding`.

In-band errors
--------------
Speech-to-text and translation results carry an optional ``error`` object.
When its ``message`` is non-empty the call failed even though the HTTP
exchange succeeded; the decoder raises ``PROVIDER`` in that case, so a
result returned to the caller never holds a populated error.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # Explicit JSON null falls back to the field default.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class InBandError(_Lenient):
    """Error object embedded in an otherwise successful response body."""

    message: str = ""
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[int, str]] = None


# ---------------------------------------------------------------------------
# Chat completion
# ---------------------------------------------------------------------------


class AudioData(_Lenient):
    """Audio output attached to an assistant message (audio-capable models)."""

    id: str = ""
    expires_at: int = 0
    data: str = ""
    transcript: str = ""


class AssistantMessage(_Lenient):
    role: str = "assistant"
    content: Optional[str] = None
    refusal: Optional[str] = None
    audio: Optional[AudioData] = None


class Choice(_Lenient):
    index: int = 0
    message: AssistantMessage = Field(default_factory=AssistantMessage)
    logprobs: Optional[Any] = None
    finish_reason: Optional[str] = None


class TokensDetail(_Lenient):
    reasoning_tokens: int = 0


class Usage(_Lenient):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    completion_tokens_details: TokensDetail = Field(default_factory=TokensDetail)


class ChatCompletion(_Lenient):
    """Full ``/chat/completions`` response envelope."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    system_fingerprint: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)


# ---------------------------------------------------------------------------
# Image generation
# ---------------------------------------------------------------------------


class ImageData(_Lenient):
    """One generated image: ``url`` or ``b64_json`` depending on the requested format."""

    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


class ImageGenResult(_Lenient):
    created: int = 0
    data: List[ImageData] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Text-to-speech
# ---------------------------------------------------------------------------


class SpeechResult(_Lenient):
    """Synthesized audio re-encoded as base64.

    Attributes:
        format_audio: File extension derived from the requested format,
            e.g. ``".mp3"``.
        b64_json: Base64 of the complete audio body.
    """

    format_audio: str
    b64_json: str


# ---------------------------------------------------------------------------
# Speech-to-text
# ---------------------------------------------------------------------------


class TranscriptionResult(_Lenient):
    text: str = ""
    error: Optional[InBandError] = None


class WordTimestamp(_Lenient):
    word: str = ""
    start: float = 0.0
    end: float = 0.0


class WordTimestampTranscription(_Lenient):
    task: str = ""
    language: str = ""
    duration: float = 0.0
    text: str = ""
    words: List[WordTimestamp] = Field(default_factory=list)
    error: Optional[InBandError] = None


class Segment(_Lenient):
    id: int = 0
    seek: int = 0
    start: float = 0.0
    end: float = 0.0
    text: str = ""
    tokens: List[int] = Field(default_factory=list)
    temperature: float = 0.0
    avg_logprob: float = 0.0
    compression_ratio: float = 0.0
    no_speech_prob: float = 0.0


class SegmentTimestampTranscription(_Lenient):
    task: str = ""
    language: str = ""
    duration: float = 0.0
    text: str = ""
    segments: List[Segment] = Field(default_factory=list)
    error: Optional[InBandError] = None


__all__ = [
    "InBandError",
    "AudioData",
    "AssistantMessage",
    "Choice",
    "TokensDetail",
    "Usage",
    "ChatCompletion",
    "ImageData",
    "ImageGenResult",
    "SpeechResult",
    "TranscriptionResult",
    "WordTimestamp",
    "WordTimestampTranscription",
    "Segment",
    "SegmentTimestampTranscription",
]
