"""Per-operation precondition checks for the OpenAI adapter.

Every validator is a pure function that either returns ``None`` or raises a
:class:`ProviderError` whose code identifies the violated rule:

- ``MISSING_ARGUMENT``: a required value is absent.
- ``INVALID_ARGUMENT``: a value is outside its enumerated set, or mutually
  exclusive options were combined.
- ``OUT_OF_RANGE``: a numeric bound was violated.

Checks run in a fixed order and stop at the first failure. All of them run
before any payload is encoded or any network call is made.
"""

from __future__ import annotations

import os
from typing import Any, Iterable, Mapping, Optional

from ..base.errors import ErrorCode, ProviderError
from .constants import (
    AUDIO_EXTENSIONS,
    IMAGE_ADVANCED_MODEL,
    IMAGE_COUNT_MAX,
    IMAGE_COUNT_MIN,
    IMAGE_MODELS,
    IMAGE_QUALITIES,
    IMAGE_RESPONSE_FORMATS,
    IMAGE_STYLES,
    PROVIDER_NAME,
    SPEECH_MODELS,
    SPEECH_RESPONSE_FORMATS,
    SPEECH_SPEED_MAX,
    SPEECH_SPEED_MIN,
    SPEECH_VOICES,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
)
from .request_models import ImageGenRequest, SpeechRequest


def _fail(code: ErrorCode, message: str, model: Optional[str] = None) -> ProviderError:
    return ProviderError(code=code, message=message, provider=PROVIDER_NAME, model=model)


def _one_of(values: Iterable[str]) -> str:
    return ", ".join(sorted(values))


# ---------------------------------------------------------------------------
# Chat completion
# ---------------------------------------------------------------------------


def validate_completion_inputs(
    content: Any,
    *,
    with_format_response: bool,
    format_response: Any,
    custom_request: Any,
) -> None:
    """Check the argument combination of ``send_message``.

    Exactly one request path is active: the custom body when
    ``custom_request`` is given, otherwise the content path.
    """
    if custom_request is not None and content is not None:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            "content and custom_request are mutually exclusive",
        )
    if with_format_response and format_response is None:
        raise _fail(
            ErrorCode.MISSING_ARGUMENT,
            "format_response must be provided when with_format_response is true",
        )
    if custom_request is not None:
        messages = (
            custom_request.get("messages")
            if isinstance(custom_request, Mapping)
            else getattr(custom_request, "messages", None)
        )
        if not messages:
            raise _fail(
                ErrorCode.MISSING_ARGUMENT,
                "custom_request must carry a non-empty messages list",
            )
        return
    if content is None:
        raise _fail(ErrorCode.MISSING_ARGUMENT, "content must be provided")


# ---------------------------------------------------------------------------
# Image generation
# ---------------------------------------------------------------------------


def validate_image_request(req: ImageGenRequest) -> None:
    """Validate an image generation request.

    Order: model, count, model-gated fields, quality/style values,
    response format, prompt.
    """
    if req.model not in IMAGE_MODELS:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"model must be one of {_one_of(IMAGE_MODELS)}",
            req.model,
        )
    if req.n is not None and not IMAGE_COUNT_MIN <= req.n <= IMAGE_COUNT_MAX:
        raise _fail(
            ErrorCode.OUT_OF_RANGE,
            f"n must be between {IMAGE_COUNT_MIN} and {IMAGE_COUNT_MAX}",
            req.model,
        )
    if req.model != IMAGE_ADVANCED_MODEL and (req.quality or req.style):
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"quality and style are only supported by {IMAGE_ADVANCED_MODEL}",
            req.model,
        )
    if req.quality and req.quality not in IMAGE_QUALITIES:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"quality must be one of {_one_of(IMAGE_QUALITIES)}",
            req.model,
        )
    if req.style and req.style not in IMAGE_STYLES:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"style must be one of {_one_of(IMAGE_STYLES)}",
            req.model,
        )
    if req.response_format and req.response_format not in IMAGE_RESPONSE_FORMATS:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"response_format must be one of {_one_of(IMAGE_RESPONSE_FORMATS)}",
            req.model,
        )
    if not req.prompt:
        raise _fail(ErrorCode.MISSING_ARGUMENT, "prompt must be provided", req.model)


# ---------------------------------------------------------------------------
# Text-to-speech
# ---------------------------------------------------------------------------


def validate_speech_request(req: SpeechRequest) -> None:
    """Validate a text-to-speech request.

    ``voice`` and ``response_format`` are checked only when non-empty;
    ``speed`` only when set. Both speed bounds are inclusive.
    """
    if req.model not in SPEECH_MODELS:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"model must be one of {_one_of(SPEECH_MODELS)}",
            req.model,
        )
    if not req.input:
        raise _fail(ErrorCode.MISSING_ARGUMENT, "input text must be provided", req.model)
    if req.voice and req.voice not in SPEECH_VOICES:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"voice must be one of {_one_of(SPEECH_VOICES)}",
            req.model,
        )
    if req.response_format and req.response_format not in SPEECH_RESPONSE_FORMATS:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"response_format must be one of {_one_of(SPEECH_RESPONSE_FORMATS)}",
            req.model,
        )
    if req.speed is not None and not SPEECH_SPEED_MIN <= req.speed <= SPEECH_SPEED_MAX:
        raise _fail(
            ErrorCode.OUT_OF_RANGE,
            f"speed must be between {SPEECH_SPEED_MIN} and {SPEECH_SPEED_MAX}",
            req.model,
        )


# ---------------------------------------------------------------------------
# Speech-to-text
# ---------------------------------------------------------------------------


def validate_timestamp_flags(word_timestamps: bool, segment_timestamps: bool) -> None:
    if word_timestamps and segment_timestamps:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            "word and segment timestamps cannot be requested together",
        )


def validate_audio_filename(filename: str) -> str:
    """Return the extension of ``filename`` if it is an accepted audio type.

    The match is exact: ``.MP3`` is rejected.
    """
    ext = os.path.splitext(filename)[1]
    if ext not in AUDIO_EXTENSIONS:
        raise _fail(
            ErrorCode.INVALID_ARGUMENT,
            f"file extension is {ext or '(none)'}, but it must be one of " + ", ".join(AUDIO_EXTENSIONS),
        )
    return ext


def validate_temperature(temperature: float) -> None:
    """Accept 0 (unset) or a value within [0, 1]."""
    if temperature != 0 and not TEMPERATURE_MIN <= temperature <= TEMPERATURE_MAX:
        raise _fail(
            ErrorCode.OUT_OF_RANGE,
            f"temperature must be between {TEMPERATURE_MIN:g} and {TEMPERATURE_MAX:g}",
        )


__all__ = [
    "validate_completion_inputs",
    "validate_image_request",
    "validate_speech_request",
    "validate_timestamp_flags",
    "validate_audio_filename",
    "validate_temperature",
]
