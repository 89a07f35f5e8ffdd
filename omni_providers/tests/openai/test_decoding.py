"""Tests for response decoding and in-band error classification."""

from __future__ import annotations

import base64

import pytest

from omni_providers.base.errors import ErrorCode, ProviderError
from omni_providers.openai.decoding import (
    decode_json,
    encode_speech,
    first_choice_message,
    raise_for_inband_error,
)
from omni_providers.openai.responses import (
    ChatCompletion,
    SegmentTimestampTranscription,
    TranscriptionResult,
)


def test_decode_chat_completion_ignores_unknown_keys():
    body = (
        b'{"id":"c1","model":"gpt-4o-mini","choices":[{"index":0,'
        b'"message":{"role":"assistant","content":"hi"},"finish_reason":"stop"}],'
        b'"usage":{"prompt_tokens":3,"completion_tokens":1,"total_tokens":4,'
        b'"completion_tokens_details":{"reasoning_tokens":0}},"service_tier":"default"}'
    )
    result = decode_json(ChatCompletion, body)
    assert result.choices[0].message.content == "hi"  # nosec B101
    assert result.usage.total_tokens == 4  # nosec B101


@pytest.mark.parametrize("body", [b"not json", b"", b'{"choices": "nope"}', b"[1, 2]"])
def test_malformed_or_mismatched_bodies_are_decode(body):
    with pytest.raises(ProviderError) as exc:
        decode_json(ChatCompletion, body, model="gpt-4o")
    assert exc.value.code is ErrorCode.DECODE  # nosec B101
    assert exc.value.model == "gpt-4o"  # nosec B101
    assert "ChatCompletion" in exc.value.message  # nosec B101


def test_inband_error_raises_provider_with_details():
    result = decode_json(
        TranscriptionResult,
        b'{"text":"","error":{"message":"bad audio","type":"invalid_request_error","code":400}}',
    )
    with pytest.raises(ProviderError) as exc:
        raise_for_inband_error(result, model="whisper-1")
    err = exc.value
    assert err.code is ErrorCode.PROVIDER  # nosec B101
    assert err.message == "bad audio"  # nosec B101
    assert err.details == {"type": "invalid_request_error", "code": 400}  # nosec B101


@pytest.mark.parametrize(
    "body",
    [b'{"text":"hello"}', b'{"text":"hello","error":null}', b'{"text":"hello","error":{"message":""}}'],
)
def test_absent_or_empty_inband_error_passes(body):
    result = decode_json(TranscriptionResult, body)
    raise_for_inband_error(result)
    assert result.text == "hello"  # nosec B101


def test_segment_result_decodes_and_checks_error():
    result = decode_json(
        SegmentTimestampTranscription,
        b'{"task":"transcribe","language":"english","duration":1.5,"text":"hi",'
        b'"segments":[{"id":0,"start":0.0,"end":1.5,"text":"hi","tokens":[1,2]}]}',
    )
    raise_for_inband_error(result)
    assert result.segments[0].tokens == [1, 2]  # nosec B101


def test_first_choice_message_requires_a_choice():
    completion = ChatCompletion(model="gpt-4o-mini")
    with pytest.raises(ProviderError) as exc:
        first_choice_message(completion)
    assert exc.value.code is ErrorCode.DECODE  # nosec B101
    assert exc.value.model == "gpt-4o-mini"  # nosec B101


def test_encode_speech_defaults_to_mp3():
    audio = bytes(range(256))
    result = encode_speech(audio)
    assert result.format_audio == ".mp3"  # nosec B101
    assert base64.b64decode(result.b64_json) == audio  # nosec B101
    assert encode_speech(b"", "flac").format_audio == ".flac"  # nosec B101
    assert encode_speech(b"").b64_json == ""  # nosec B101


def test_explicit_nulls_fall_back_to_defaults():
    result = decode_json(
        ChatCompletion,
        b'{"model":"gpt-4o-mini","system_fingerprint":null,"usage":null,'
        b'"choices":[{"index":0,"message":{"role":"assistant","content":"hi","refusal":null}}]}',
    )
    assert result.usage.total_tokens == 0  # nosec B101
    assert result.usage.completion_tokens_details.reasoning_tokens == 0  # nosec B101
    assert result.choices[0].message.content == "hi"  # nosec B101

    nested = decode_json(
        ChatCompletion,
        b'{"choices":[],"usage":{"prompt_tokens":1,"completion_tokens_details":null}}',
    )
    assert nested.usage.prompt_tokens == 1  # nosec B101

    transcription = decode_json(TranscriptionResult, b'{"text":"ok","error":{"message":null,"code":null}}')
    raise_for_inband_error(transcription)
    assert transcription.error is not None and transcription.error.message == ""  # nosec B101
