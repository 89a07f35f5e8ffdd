"""Response decoding for the OpenAI adapter.

Purpose:
    Convert the raw bytes returned by the transport into typed results and
    classify failures that the transport could not see.

Behavior:
    - ``decode_json`` parses and validates a body against a pydantic model;
      malformed JSON or a mismatched shape is ``DECODE``.
    - ``raise_for_inband_error`` inspects the ``error`` object embedded in
      speech-to-text and translation results; a non-empty message is
      ``PROVIDER`` even though the HTTP status was 2xx.
    - ``first_choice_message`` projects a completion onto its first message.
    - ``encode_speech`` wraps raw audio bytes as a :class:`SpeechResult`.
"""

from __future__ import annotations

import base64
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..base.errors import ErrorCode, ProviderError
from .constants import PROVIDER_NAME, SPEECH_DEFAULT_FORMAT
from .responses import AssistantMessage, ChatCompletion, InBandError, SpeechResult

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_json(model_cls: Type[ModelT], content: bytes, *, model: Optional[str] = None) -> ModelT:
    """Parse ``content`` into ``model_cls``.

    Raises:
        ProviderError: ``DECODE`` when the body is not valid JSON or does not
            match the expected shape.
    """
    try:
        return model_cls.model_validate_json(content)
    except ValidationError as exc:
        raise ProviderError(
            code=ErrorCode.DECODE,
            message=f"failed to decode {model_cls.__name__} response: {exc.error_count()} error(s)",
            provider=PROVIDER_NAME,
            model=model,
            raw=exc,
        ) from exc


def raise_for_inband_error(result: BaseModel, *, model: Optional[str] = None) -> None:
    """Raise ``PROVIDER`` when ``result.error.message`` is non-empty."""
    error: Optional[InBandError] = getattr(result, "error", None)
    if error is None or not error.message:
        return
    raise ProviderError(
        code=ErrorCode.PROVIDER,
        message=error.message,
        provider=PROVIDER_NAME,
        model=model,
        details=error.model_dump(exclude_none=True, exclude={"message"}),
    )


def first_choice_message(completion: ChatCompletion) -> AssistantMessage:
    """Return the message of the first choice.

    Raises:
        ProviderError: ``DECODE`` when the completion has no choices.
    """
    if not completion.choices:
        raise ProviderError(
            code=ErrorCode.DECODE,
            message="completion response contains no choices",
            provider=PROVIDER_NAME,
            model=completion.model or None,
        )
    return completion.choices[0].message


def encode_speech(content: bytes, response_format: str = "") -> SpeechResult:
    """Base64-encode the whole audio body; the extension defaults to ``.mp3``."""
    return SpeechResult(
        format_audio="." + (response_format or SPEECH_DEFAULT_FORMAT),
        b64_json=base64.b64encode(content).decode("ascii"),
    )


__all__ = ["decode_json", "raise_for_inband_error", "first_choice_message", "encode_speech"]
