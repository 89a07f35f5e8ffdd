"""Multipart/form-data encoding for speech-to-text uploads.

Purpose:
    Turn a :class:`TranscriptionRequest` into the exact multipart body sent to
    ``/audio/transcriptions`` or ``/audio/translations``.

Field order:
    ``file`` first, then ``model``, ``temperature`` (non-zero only, six
    decimals), ``prompt`` and ``language`` (non-empty only), and, for a
    timestamp mode, ``response_format=verbose_json`` followed by one
    ``timestamp_granularities[]`` value.

Resources:
    The audio source is resolved through :meth:`FileInput.open`, so a file
    opened from a path is closed on every exit path, including validation
    failures raised after it was opened. Read failures surface as ``IO``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..base.errors import ErrorCode, ProviderError
from ..config.defaults import WHISPER_MODEL
from .constants import PROVIDER_NAME, VERBOSE_RESPONSE_FORMAT
from .request_models import TranscriptionRequest
from .validation import validate_audio_filename, validate_temperature, validate_timestamp_flags

FILE_CONTENT_TYPE = "application/octet-stream"

_QUOTE_ESCAPES = {'"': "%22", "\r": "%0D", "\n": "%0A"}


@dataclass(frozen=True)
class MultipartBody:
    """Encoded form ready for the transport.

    Attributes:
        content: Complete request body.
        content_type: ``multipart/form-data; boundary=...`` header value.
        filename: Name sent with the file part.
        fields: Scalar fields in wire order (file part excluded).
    """

    content: bytes
    content_type: str
    filename: str
    fields: Tuple[Tuple[str, str], ...]


def _quote(value: str) -> str:
    return "".join(_QUOTE_ESCAPES.get(ch, ch) for ch in value)


def _scalar_fields(
    req: TranscriptionRequest,
    *,
    is_transcription: bool,
    granularity: Optional[str],
) -> List[Tuple[str, str]]:
    fields: List[Tuple[str, str]] = [("model", WHISPER_MODEL)]
    if req.temperature != 0:
        fields.append(("temperature", f"{req.temperature:.6f}"))
    if req.prompt:
        fields.append(("prompt", req.prompt))
    if is_transcription and req.language:
        fields.append(("language", req.language))
    if granularity:
        fields.append(("response_format", VERBOSE_RESPONSE_FORMAT))
        fields.append(("timestamp_granularities[]", granularity))
    return fields


def _assemble(boundary: str, filename: str, data: bytes, fields: List[Tuple[str, str]]) -> bytes:
    parts: List[bytes] = [
        f"--{boundary}\r\n".encode(),
        f'Content-Disposition: form-data; name="file"; filename="{_quote(filename)}"\r\n'.encode(),
        f"Content-Type: {FILE_CONTENT_TYPE}\r\n\r\n".encode(),
        data,
        b"\r\n",
    ]
    for name, value in fields:
        parts.append(f"--{boundary}\r\n".encode())
        parts.append(f'Content-Disposition: form-data; name="{_quote(name)}"\r\n\r\n'.encode())
        parts.append(value.encode("utf-8"))
        parts.append(b"\r\n")
    parts.append(f"--{boundary}--\r\n".encode())
    return b"".join(parts)


def encode_transcription_form(
    req: TranscriptionRequest,
    *,
    is_transcription: bool = True,
    word_timestamps: bool = False,
    segment_timestamps: bool = False,
    boundary: Optional[str] = None,
) -> MultipartBody:
    """Validate ``req`` and encode it as a multipart body.

    Parameters:
        req: Upload request; translations pass ``is_transcription=False``,
            which drops ``language`` and any timestamp mode.
        is_transcription: Transcription (True) or translation (False).
        word_timestamps: Request word-level timing.
        segment_timestamps: Request segment-level timing.
        boundary: Fixed boundary (tests); a random one is generated otherwise.

    Raises:
        ProviderError: ``INVALID_ARGUMENT`` for both timestamp flags, an
            unsupported file object or extension; ``MISSING_ARGUMENT`` for a
            missing file or stream filename; ``OUT_OF_RANGE`` for the
            temperature; ``IO`` when the source cannot be read.
    """
    if is_transcription:
        validate_timestamp_flags(word_timestamps, segment_timestamps)
        granularity = "word" if word_timestamps else "segment" if segment_timestamps else None
    else:
        granularity = None

    source = req.file_input()
    with source.open() as (reader, filename):
        validate_audio_filename(filename)
        validate_temperature(req.temperature)
        try:
            data = reader.read()
        except OSError as exc:
            raise ProviderError(
                code=ErrorCode.IO,
                message=f"failed to read file content: {exc}",
                provider=PROVIDER_NAME,
                model=WHISPER_MODEL,
                raw=exc,
            ) from exc

    if isinstance(data, str):
        data = data.encode("utf-8")
    fields = _scalar_fields(req, is_transcription=is_transcription, granularity=granularity)
    boundary = boundary or uuid.uuid4().hex
    return MultipartBody(
        content=_assemble(boundary, filename, bytes(data), fields),
        content_type=f"multipart/form-data; boundary={boundary}",
        filename=filename,
        fields=tuple(fields),
    )


__all__ = ["MultipartBody", "encode_transcription_form", "FILE_CONTENT_TYPE"]
