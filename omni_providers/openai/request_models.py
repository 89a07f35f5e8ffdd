"""Caller-facing request types for the OpenAI adapter.

Purpose:
    Typed, per-call request values for every operation, each able to render
    its own wire body. Values are plain dataclasses: they are built by the
    caller (or by the adapter's convenience signatures), validated by
    :mod:`omni_providers.openai.validation` and discarded after the call.

Wire rendering:
    Optional fields that are ``None`` or empty are omitted from the rendered
    body, so the provider applies its own defaults.

File inputs:
    Speech-to-text accepts three source kinds, modeled as the closed
    :class:`FileInput` union and resolved once into a ``(reader, filename)``
    pair by :meth:`FileInput.open`:

    - ``handle``: a framework upload object exposing ``filename`` plus a
      binary ``file`` (Starlette/FastAPI ``UploadFile``) or ``stream``
      (Werkzeug ``FileStorage``) attribute. The framework owns its lifetime.
    - ``path``: a filesystem path; the file is opened and always closed by
      the adapter, and the filename is the path's basename.
    - ``stream``: any binary readable object plus an explicit filename.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field, fields, replace
from typing import Any, BinaryIO, Dict, Iterator, List, Literal, Mapping, Optional, Sequence, Tuple, Union

from ..base.errors import ErrorCode, ProviderError
from ..base.models import ContentBlock, Message
from .constants import PROVIDER_NAME

MessageLike = Union[Message, Mapping[str, Any]]
FileInputKind = Literal["handle", "path", "stream"]


def _message_to_wire(message: MessageLike) -> Dict[str, Any]:
    if isinstance(message, Message):
        return message.to_dict()
    out = dict(message)
    content = out.get("content")
    if isinstance(content, list):
        out["content"] = [b.to_dict() if isinstance(b, ContentBlock) else b for b in content]
    return out


def _prune(body: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``None``, empty strings, empty containers and ``False`` flags."""
    return {k: v for k, v in body.items() if v is not None and v != "" and v != {} and v != [] and v is not False}


# ---------------------------------------------------------------------------
# Chat completion
# ---------------------------------------------------------------------------


@dataclass
class CompletionRequest:
    """Body of a ``/chat/completions`` request.

    Build it with :meth:`from_messages` (content plus flags) or
    :meth:`from_custom` (a caller-prepared body); both converge here.

    Attributes:
        model: Chat model identifier.
        messages: Conversation in chronological order.
        store: Ask the provider to store the completion.
        metadata: Free-form tags stored with the completion.
        frequency_penalty: Repetition penalty.
        logit_bias: Token id to bias mapping.
        logprobs: Return log probabilities.
        modalities: Output modalities, e.g. ``["text", "audio"]``.
        response_format: Structured-output envelope (see ``wrap_schema``).
        extra: Additional body fields passed through verbatim.
    """

    model: str
    messages: List[MessageLike]
    store: bool = False
    metadata: Optional[Dict[str, Any]] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, Any]] = None
    logprobs: bool = False
    modalities: Optional[List[str]] = None
    response_format: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_messages(
        cls,
        model: str,
        messages: Sequence[MessageLike],
        *,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> "CompletionRequest":
        """Build a request from conversation content and an optional schema envelope."""
        return cls(model=model, messages=list(messages), response_format=response_format)

    @classmethod
    def from_custom(
        cls,
        custom: Union["CompletionRequest", Mapping[str, Any]],
        *,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> "CompletionRequest":
        """Adopt a caller-prepared request; ``response_format`` overwrites the body's own."""
        if isinstance(custom, CompletionRequest):
            base = replace(custom, messages=list(custom.messages or []), extra=dict(custom.extra))
        else:
            data = dict(custom)
            known = {f.name for f in fields(cls)} - {"extra"}
            kwargs = {k: data.pop(k) for k in list(data) if k in known}
            kwargs.setdefault("model", "")
            kwargs["messages"] = list(kwargs.get("messages") or [])
            base = cls(**kwargs, extra=data)
        if response_format is not None:
            base.response_format = response_format
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Render the JSON body; ``model`` and ``messages`` are always present."""
        optional = _prune(
            {
                "store": self.store,
                "metadata": self.metadata,
                "frequency_penalty": self.frequency_penalty,
                "logit_bias": self.logit_bias,
                "logprobs": self.logprobs,
                "modalities": self.modalities,
                "response_format": self.response_format,
            }
        )
        body: Dict[str, Any] = dict(self.extra)
        body |= {"model": self.model, "messages": [_message_to_wire(m) for m in self.messages]}
        body |= optional
        return body


# ---------------------------------------------------------------------------
# Image generation
# ---------------------------------------------------------------------------


@dataclass
class ImageGenRequest:
    """Body of an ``/images/generations`` request.

    ``quality`` and ``style`` are only accepted with ``dall-e-3``. ``size``
    is passed through; the provider checks it against the model.
    """

    prompt: str
    model: str
    n: Optional[int] = None
    quality: Optional[str] = None
    size: Optional[str] = None
    style: Optional[str] = None
    response_format: Optional[str] = None
    user: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"prompt": self.prompt, "model": self.model}
        body |= _prune(
            {
                "n": self.n,
                "quality": self.quality,
                "size": self.size,
                "style": self.style,
                "response_format": self.response_format,
                "user": self.user,
            }
        )
        return body


# ---------------------------------------------------------------------------
# Text-to-speech
# ---------------------------------------------------------------------------


@dataclass
class SpeechRequest:
    """Body of an ``/audio/speech`` request."""

    model: str
    input: str
    voice: str = ""
    response_format: str = ""
    speed: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"model": self.model, "input": self.input}
        body |= _prune({"voice": self.voice, "response_format": self.response_format, "speed": self.speed})
        return body


# ---------------------------------------------------------------------------
# Speech-to-text
# ---------------------------------------------------------------------------


def _handle_reader(handle: Any) -> Optional[BinaryIO]:
    for attr in ("file", "stream"):
        reader = getattr(handle, attr, None)
        if reader is not None and callable(getattr(reader, "read", None)):
            return reader
    return None


def _is_handle(obj: Any) -> bool:
    return hasattr(obj, "filename") and _handle_reader(obj) is not None


@dataclass(frozen=True)
class FileInput:
    """One audio source for a transcription or translation upload.

    Attributes:
        kind: ``"handle"``, ``"path"`` or ``"stream"``.
        source: The upload handle, path, or binary readable.
        filename: Explicit filename; required for ``"stream"``.
    """

    kind: FileInputKind
    source: Any
    filename: str = ""

    @classmethod
    def from_handle(cls, handle: Any) -> "FileInput":
        return cls(kind="handle", source=handle)

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "FileInput":
        return cls(kind="path", source=path)

    @classmethod
    def from_stream(cls, stream: BinaryIO, filename: str) -> "FileInput":
        return cls(kind="stream", source=stream, filename=filename)

    @classmethod
    def coerce(cls, obj: Any, filename: str = "") -> "FileInput":
        """Classify a raw caller value into a :class:`FileInput`.

        Raises:
            ProviderError: ``MISSING_ARGUMENT`` when ``obj`` is ``None``;
                ``INVALID_ARGUMENT`` when it matches none of the three kinds.
        """
        if obj is None:
            raise ProviderError(
                code=ErrorCode.MISSING_ARGUMENT,
                message="file must be provided",
                provider=PROVIDER_NAME,
            )
        if isinstance(obj, FileInput):
            if obj.kind == "stream" and not obj.filename and filename:
                return replace(obj, filename=filename)
            return obj
        if isinstance(obj, (str, os.PathLike)):
            return cls.from_path(obj)
        if _is_handle(obj):
            return cls.from_handle(obj)
        if callable(getattr(obj, "read", None)):
            return cls(kind="stream", source=obj, filename=filename)
        raise ProviderError(
            code=ErrorCode.INVALID_ARGUMENT,
            message=(
                f"unsupported file input {type(obj).__name__}; expected an upload handle, "
                "a filesystem path, or a binary stream with a filename"
            ),
            provider=PROVIDER_NAME,
        )

    @contextmanager
    def open(self) -> Iterator[Tuple[BinaryIO, str]]:
        """Yield ``(reader, filename)``; files opened here are closed on exit.

        Raises:
            ProviderError: ``IO`` when a path cannot be opened or a handle has
                no readable body; ``MISSING_ARGUMENT`` for a stream without a
                filename.
        """
        if self.kind == "path":
            name = os.path.basename(os.fspath(self.source))
            try:
                fh = open(self.source, "rb")  # noqa: SIM115 - closed in finally
            except OSError as exc:
                raise ProviderError(
                    code=ErrorCode.IO,
                    message=f"failed to open file: {exc}",
                    provider=PROVIDER_NAME,
                    raw=exc,
                ) from exc
            try:
                yield fh, name
            finally:
                fh.close()
            return

        if self.kind == "handle":
            reader = _handle_reader(self.source)
            if reader is None:
                raise ProviderError(
                    code=ErrorCode.IO,
                    message="failed to access upload content",
                    provider=PROVIDER_NAME,
                )
            yield reader, str(getattr(self.source, "filename", "") or "")
            return

        if not self.filename:
            raise ProviderError(
                code=ErrorCode.MISSING_ARGUMENT,
                message="filename must be provided when file is a stream",
                provider=PROVIDER_NAME,
            )
        yield self.source, self.filename


@dataclass
class TranscriptionRequest:
    """Input of an ``/audio/transcriptions`` upload.

    ``file`` may be a :class:`FileInput` or any raw value accepted by
    :meth:`FileInput.coerce`; ``filename`` is required for raw streams.
    A ``temperature`` of 0 means "unset".
    """

    file: Any
    filename: str = ""
    prompt: str = ""
    language: str = ""
    temperature: float = 0.0

    def file_input(self) -> FileInput:
        return FileInput.coerce(self.file, self.filename)


@dataclass
class TranslationRequest:
    """Input of an ``/audio/translations`` upload (English output, no language hint)."""

    file: Any
    filename: str = ""
    prompt: str = ""
    temperature: float = 0.0

    def as_transcription(self) -> TranscriptionRequest:
        return TranscriptionRequest(
            file=self.file,
            filename=self.filename,
            prompt=self.prompt,
            temperature=self.temperature,
        )


__all__ = [
    "MessageLike",
    "CompletionRequest",
    "ImageGenRequest",
    "SpeechRequest",
    "FileInput",
    "FileInputKind",
    "TranscriptionRequest",
    "TranslationRequest",
]
