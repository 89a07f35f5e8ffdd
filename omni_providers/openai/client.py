"""OpenAI provider adapter.

Purpose
-------
Expose the OpenAI HTTP API as typed, synchronous operations:

- ``send_message`` / ``first_message``: chat completions (plain, vision,
  structured output, or a caller-prepared body)
- ``create_image``: DALL-E image generation
- ``text_to_speech``: speech synthesis, returned as base64 audio
- ``speech_to_text`` (+ word/segment timestamp variants) and
  ``translate_speech``: Whisper uploads

Pipeline
--------
Each operation runs the same fixed sequence: API key precondition, request
validation, payload construction, one HTTP exchange, response decoding. All
validation precedes network I/O, and every failure is raised as a
:class:`ProviderError`; nothing is retried.

Configuration
-------------
Credentials, default model and base URL come from ``AdapterParams`` layered
over ``get_provider_config("openai")`` (defaults, config file, environment).
The HTTP client is injected or taken from the shared pool; its timeout is the
only deadline applied to an operation.

Logging
-------
Each operation emits ``<operation>.start`` and ``<operation>.success`` or
``<operation>.error`` events at DEBUG level. Request bodies and credentials
are never logged.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..base.dto import AdapterParams
from ..base.errors import ErrorCode, ProviderError, classify_exception
from ..base.http import HttpExchange, exchange, get_httpx_client
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..config import get_provider_config
from ..config.env import get_env_var_name, is_placeholder
from ..config.defaults import (
    OPENAI_AUDIO_SPEECH_PATH,
    OPENAI_AUDIO_TRANSCRIPTIONS_PATH,
    OPENAI_AUDIO_TRANSLATIONS_PATH,
    OPENAI_CHAT_COMPLETIONS_PATH,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    OPENAI_IMAGES_GENERATIONS_PATH,
    OPENAI_ORGANIZATION_HEADER,
    OPENAI_PROJECT_HEADER,
    WHISPER_MODEL,
)
from .constants import PROVIDER_NAME
from .decoding import decode_json, encode_speech, first_choice_message, raise_for_inband_error
from .multipart import encode_transcription_form
from .payloads import JSON_CONTENT_TYPE, build_completion_request, encode_json_body
from .request_models import (
    CompletionRequest,
    ImageGenRequest,
    MessageLike,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)
from .responses import (
    AssistantMessage,
    ChatCompletion,
    ImageGenResult,
    SegmentTimestampTranscription,
    SpeechResult,
    TranscriptionResult,
    WordTimestampTranscription,
)
from .validation import validate_image_request, validate_speech_request

__all__ = ["OpenAIProvider"]

T = TypeVar("T")
ResultT = TypeVar("ResultT", bound=BaseModel)


class OpenAIProvider:
    """Synchronous adapter for the OpenAI HTTP API.

    Instances hold only immutable configuration and a reference to a
    thread-safe ``httpx.Client``, so one adapter may serve concurrent callers.
    """

    def __init__(
        self,
        params: Optional[AdapterParams] = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Resolve configuration and bind the HTTP client.

        Args:
            params: Explicit settings; unset fields fall back to configuration.
            http_client: Client to use instead of the shared pool (custom
                transport, proxies, or a test ``MockTransport``).
        """
        params = params or AdapterParams()
        cfg = get_provider_config(PROVIDER_NAME, params.config_overrides())

        self._api_key: str = cfg.get("api_key") or ""
        self._model: str = cfg.get("model") or OPENAI_DEFAULT_MODEL
        self._base_url: str = str(cfg.get("base_url") or OPENAI_DEFAULT_BASE_URL).rstrip("/")
        self._headers: httpx.Headers = self._static_headers(cfg, params.headers)
        self._client = http_client or get_httpx_client(
            self._base_url,
            PROVIDER_NAME,
            params.timeout_seconds or cfg.get("timeout_seconds"),
        )
        self._logger = get_logger("openai")
        if is_placeholder(self._api_key):
            log_event(
                self._logger,
                "config.placeholder_key",
                LogContext(provider=PROVIDER_NAME, model=self._model),
                level=logging.WARNING,
                env_var=get_env_var_name(PROVIDER_NAME),
            )

    @staticmethod
    def _static_headers(cfg: Mapping[str, Any], extra: Mapping[str, str]) -> httpx.Headers:
        headers = httpx.Headers(extra or {})
        if cfg.get("organization"):
            headers[OPENAI_ORGANIZATION_HEADER] = str(cfg["organization"])
        if cfg.get("project"):
            headers[OPENAI_PROJECT_HEADER] = str(cfg["project"])
        return headers

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return PROVIDER_NAME

    @property
    def base_url(self) -> str:
        return self._base_url

    def default_model(self) -> str:
        """Return the chat model used by the content path of ``send_message``."""
        return self._model

    # -------------------- Chat completion --------------------

    def send_message(
        self,
        content: Optional[Sequence[MessageLike]] = None,
        *,
        with_format_response: bool = False,
        format_response: Optional[Dict[str, Any]] = None,
        custom_request: Union[CompletionRequest, Mapping[str, Any], None] = None,
    ) -> ChatCompletion:
        """Send a chat completion and return the full response envelope.

        Exactly one of ``content`` (messages sent with the default model) or
        ``custom_request`` (a complete request body) must be given. With
        ``with_format_response`` the ``format_response`` envelope (see
        ``wrap_schema``) becomes the request's ``response_format``,
        replacing any value in a custom body.

        Raises:
            ProviderError: ``AUTH``, ``MISSING_ARGUMENT``,
                ``INVALID_ARGUMENT``, ``TRANSPORT`` or ``DECODE``.
        """
        ctx = self._ctx("chat", OPENAI_CHAT_COMPLETIONS_PATH, self._model)

        def _invoke() -> ChatCompletion:
            req = build_completion_request(
                self._model,
                content,
                with_format_response=with_format_response,
                format_response=format_response,
                custom_request=custom_request,
            )
            ctx.model = req.model or ctx.model
            body = encode_json_body(req.to_dict(), model=req.model)
            resp = self._post(OPENAI_CHAT_COMPLETIONS_PATH, body, JSON_CONTENT_TYPE, model=req.model)
            return decode_json(ChatCompletion, resp.content, model=req.model)

        return self._run(ctx, _invoke, has_schema=with_format_response)

    def first_message(
        self,
        content: Optional[Sequence[MessageLike]] = None,
        *,
        with_format_response: bool = False,
        format_response: Optional[Dict[str, Any]] = None,
        custom_request: Union[CompletionRequest, Mapping[str, Any], None] = None,
    ) -> AssistantMessage:
        """Like ``send_message`` but return only ``choices[0].message``.

        Raises:
            ProviderError: as ``send_message``; ``DECODE`` when the response
                has no choices.
        """
        completion = self.send_message(
            content,
            with_format_response=with_format_response,
            format_response=format_response,
            custom_request=custom_request,
        )
        return first_choice_message(completion)

    # -------------------- Image generation --------------------

    def create_image(self, request: ImageGenRequest) -> ImageGenResult:
        """Generate images with DALL-E.

        Raises:
            ProviderError: ``AUTH``, ``INVALID_ARGUMENT``, ``OUT_OF_RANGE``,
                ``MISSING_ARGUMENT``, ``TRANSPORT`` or ``DECODE``.
        """
        ctx = self._ctx("images", OPENAI_IMAGES_GENERATIONS_PATH, request.model)

        def _invoke() -> ImageGenResult:
            validate_image_request(request)
            body = encode_json_body(request.to_dict(), model=request.model)
            resp = self._post(OPENAI_IMAGES_GENERATIONS_PATH, body, JSON_CONTENT_TYPE, model=request.model)
            return decode_json(ImageGenResult, resp.content, model=request.model)

        return self._run(ctx, _invoke, n=request.n)

    # -------------------- Text-to-speech --------------------

    def text_to_speech(self, request: SpeechRequest) -> SpeechResult:
        """Synthesize speech; the audio body is returned base64-encoded.

        Nothing is written to disk. ``format_audio`` is the file extension
        of the requested format (``".mp3"`` when unspecified).

        Raises:
            ProviderError: ``AUTH``, ``INVALID_ARGUMENT``, ``OUT_OF_RANGE``,
                ``MISSING_ARGUMENT`` or ``TRANSPORT``.
        """
        ctx = self._ctx("speech", OPENAI_AUDIO_SPEECH_PATH, request.model)

        def _invoke() -> SpeechResult:
            validate_speech_request(request)
            body = encode_json_body(request.to_dict(), model=request.model)
            resp = self._post(OPENAI_AUDIO_SPEECH_PATH, body, JSON_CONTENT_TYPE, model=request.model)
            return encode_speech(resp.content, request.response_format)

        return self._run(ctx, _invoke)

    # -------------------- Speech-to-text --------------------

    def speech_to_text(self, request: TranscriptionRequest) -> TranscriptionResult:
        """Transcribe audio into text in the spoken language."""
        return self._upload(
            "transcription",
            request,
            TranscriptionResult,
            path=OPENAI_AUDIO_TRANSCRIPTIONS_PATH,
        )

    def speech_to_text_word_timestamps(self, request: TranscriptionRequest) -> WordTimestampTranscription:
        """Transcribe audio with per-word timing."""
        return self._upload(
            "transcription",
            request,
            WordTimestampTranscription,
            path=OPENAI_AUDIO_TRANSCRIPTIONS_PATH,
            word_timestamps=True,
        )

    def speech_to_text_segment_timestamps(self, request: TranscriptionRequest) -> SegmentTimestampTranscription:
        """Transcribe audio with per-segment timing."""
        return self._upload(
            "transcription",
            request,
            SegmentTimestampTranscription,
            path=OPENAI_AUDIO_TRANSCRIPTIONS_PATH,
            segment_timestamps=True,
        )

    def translate_speech(self, request: TranslationRequest) -> TranscriptionResult:
        """Translate audio into English text."""
        return self._upload(
            "translation",
            request.as_transcription(),
            TranscriptionResult,
            path=OPENAI_AUDIO_TRANSLATIONS_PATH,
            is_transcription=False,
        )

    def _upload(
        self,
        operation: str,
        request: TranscriptionRequest,
        result_cls: Type[ResultT],
        *,
        path: str,
        is_transcription: bool = True,
        word_timestamps: bool = False,
        segment_timestamps: bool = False,
    ) -> ResultT:
        """Shared multipart flow for transcription and translation.

        Raises:
            ProviderError: ``AUTH``, ``MISSING_ARGUMENT``,
                ``INVALID_ARGUMENT``, ``OUT_OF_RANGE``, ``IO``,
                ``TRANSPORT``, ``DECODE`` or ``PROVIDER`` (in-band error).
        """
        ctx = self._ctx(operation, path, WHISPER_MODEL)

        def _invoke() -> ResultT:
            form = encode_transcription_form(
                request,
                is_transcription=is_transcription,
                word_timestamps=word_timestamps,
                segment_timestamps=segment_timestamps,
            )
            resp = self._post(path, form.content, form.content_type, model=WHISPER_MODEL)
            result = decode_json(result_cls, resp.content, model=WHISPER_MODEL)
            raise_for_inband_error(result, model=WHISPER_MODEL)
            return result

        granularity = "word" if word_timestamps else "segment" if segment_timestamps else None
        return self._run(ctx, _invoke, granularity=granularity)

    # -------------------- Internal helpers --------------------

    def _ctx(self, operation: str, endpoint: str, model: Optional[str]) -> LogContext:
        return LogContext(provider=PROVIDER_NAME, model=model, operation=operation, endpoint=endpoint)

    def _require_api_key(self, model: Optional[str]) -> None:
        if not self._api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="API key is empty; set OPENAI_API_KEY or pass AdapterParams(api_key=...)",
                provider=PROVIDER_NAME,
                model=model,
            )

    def _post(self, path: str, body: bytes, content_type: str, *, model: Optional[str]) -> HttpExchange:
        return exchange(
            self._client,
            "POST",
            f"{self._base_url}{path}",
            body,
            content_type,
            self._api_key,
            extra_headers=self._headers,
            provider=PROVIDER_NAME,
            model=model,
        )

    def _run(self, ctx: LogContext, invoke: Callable[[], T], **fields: Any) -> T:
        """Run one operation with the key precondition and start/finish events.

        Unexpected exceptions are re-raised as ``ProviderError`` using
        :func:`classify_exception` so callers see a single error type.
        """
        op = ctx.operation or "operation"
        normalized_log_event(self._logger, f"{op}.start", ctx.bind(**fields), phase="start")
        started = time.perf_counter()
        try:
            self._require_api_key(ctx.model)
            result = invoke()
        except ProviderError as exc:
            self._log_error(ctx, exc, started)
            raise
        except Exception as exc:  # noqa: BLE001 - normalized below
            err = ProviderError(
                code=classify_exception(exc),
                message=str(exc) or type(exc).__name__,
                provider=PROVIDER_NAME,
                model=ctx.model,
                raw=exc,
            )
            self._log_error(ctx, err, started)
            raise err from exc
        normalized_log_event(
            self._logger,
            f"{op}.success",
            ctx,
            phase="finalize",
            latency_ms=_elapsed_ms(started),
        )
        return result

    def _log_error(self, ctx: LogContext, exc: ProviderError, started: float) -> None:
        normalized_log_event(
            self._logger,
            f"{ctx.operation}.error",
            ctx,
            phase="finalize",
            error_code=exc.code.value,
            status_code=exc.status_code,
            latency_ms=_elapsed_ms(started),
            error=exc.message,
        )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)
