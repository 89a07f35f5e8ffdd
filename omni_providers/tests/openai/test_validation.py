"""Tests for per-operation validators.

Covers image generation, text-to-speech, chat argument combinations and the
speech-to-text helpers, including boundary values and check ordering.
"""

from __future__ import annotations

import pytest

from omni_providers.base.errors import ErrorCode, ProviderError
from omni_providers.base.models import Message
from omni_providers.openai.request_models import ImageGenRequest, SpeechRequest
from omni_providers.openai.validation import (
    validate_audio_filename,
    validate_completion_inputs,
    validate_image_request,
    validate_speech_request,
    validate_temperature,
    validate_timestamp_flags,
)


def _code(fn, *args, **kwargs) -> ErrorCode:
    with pytest.raises(ProviderError) as exc:
        fn(*args, **kwargs)
    return exc.value.code


# ---- image generation ----


def test_dall_e_3_accepts_hd_quality_and_style():
    validate_image_request(ImageGenRequest(prompt="a fox", model="dall-e-3", quality="hd", style="natural"))


def test_dall_e_2_rejects_hd_quality():
    req = ImageGenRequest(prompt="a fox", model="dall-e-2", quality="hd")
    assert _code(validate_image_request, req) is ErrorCode.INVALID_ARGUMENT  # nosec B101


def test_dall_e_2_rejects_style():
    req = ImageGenRequest(prompt="a fox", model="dall-e-2", style="vivid")
    assert _code(validate_image_request, req) is ErrorCode.INVALID_ARGUMENT  # nosec B101


def test_unknown_image_model():
    assert _code(validate_image_request, ImageGenRequest(prompt="p", model="dall-e-4")) is ErrorCode.INVALID_ARGUMENT  # nosec B101


@pytest.mark.parametrize("n", [1, 10])
def test_image_count_bounds_pass(n):
    validate_image_request(ImageGenRequest(prompt="p", model="dall-e-2", n=n))


@pytest.mark.parametrize("n", [0, 11, -1])
def test_image_count_out_of_range(n):
    assert _code(validate_image_request, ImageGenRequest(prompt="p", model="dall-e-2", n=n)) is ErrorCode.OUT_OF_RANGE  # nosec B101


def test_image_checks_short_circuit_in_order():
    # Count is checked before the model-gated quality rule.
    req = ImageGenRequest(prompt="p", model="dall-e-2", n=50, quality="ultra")
    assert _code(validate_image_request, req) is ErrorCode.OUT_OF_RANGE  # nosec B101
    # Model is checked before everything else.
    req = ImageGenRequest(prompt="", model="midjourney", n=50)
    assert _code(validate_image_request, req) is ErrorCode.INVALID_ARGUMENT  # nosec B101


@pytest.mark.parametrize(
    "field,value",
    [("quality", "ultra"), ("style", "cartoon"), ("response_format", "png")],
)
def test_image_enumerations(field, value):
    req = ImageGenRequest(prompt="p", model="dall-e-3", **{field: value})
    assert _code(validate_image_request, req) is ErrorCode.INVALID_ARGUMENT  # nosec B101


def test_image_prompt_required():
    assert _code(validate_image_request, ImageGenRequest(prompt="", model="dall-e-3")) is ErrorCode.MISSING_ARGUMENT  # nosec B101


# ---- text-to-speech ----


@pytest.mark.parametrize("speed", [0.25, 1.0, 4.0])
def test_speed_bounds_pass(speed):
    validate_speech_request(SpeechRequest(model="tts-1", input="hello", voice="alloy", speed=speed))


@pytest.mark.parametrize("speed", [0.24, 4.01, 0.0])
def test_speed_out_of_range(speed):
    req = SpeechRequest(model="tts-1", input="hello", voice="alloy", speed=speed)
    assert _code(validate_speech_request, req) is ErrorCode.OUT_OF_RANGE  # nosec B101


def test_speech_model_and_input():
    assert _code(validate_speech_request, SpeechRequest(model="gpt-3", input="x")) is ErrorCode.INVALID_ARGUMENT  # nosec B101
    assert _code(validate_speech_request, SpeechRequest(model="tts-1-hd", input="")) is ErrorCode.MISSING_ARGUMENT  # nosec B101


@pytest.mark.parametrize("voice", ["alloy", "echo", "fable", "onyx", "nova", "shimmer", ""])
def test_voices_accepted(voice):
    validate_speech_request(SpeechRequest(model="tts-1", input="x", voice=voice))


def test_unknown_voice_rejected():
    assert _code(validate_speech_request, SpeechRequest(model="tts-1", input="x", voice="shimer")) is ErrorCode.INVALID_ARGUMENT  # nosec B101


@pytest.mark.parametrize("fmt", ["mp3", "opus", "aac", "flac", "wav", "pcm", ""])
def test_speech_formats_accepted(fmt):
    validate_speech_request(SpeechRequest(model="tts-1", input="x", response_format=fmt))


def test_speech_format_enforced():
    req = SpeechRequest(model="tts-1", input="x", response_format="ogg")
    assert _code(validate_speech_request, req) is ErrorCode.INVALID_ARGUMENT  # nosec B101


# ---- chat completion ----


def test_content_path_requires_content():
    code = _code(validate_completion_inputs, None, with_format_response=False, format_response=None, custom_request=None)
    assert code is ErrorCode.MISSING_ARGUMENT  # nosec B101


def test_custom_path_requires_messages():
    for custom in ({"model": "gpt-4o", "messages": []}, {"model": "gpt-4o"}):
        code = _code(validate_completion_inputs, None, with_format_response=False, format_response=None, custom_request=custom)
        assert code is ErrorCode.MISSING_ARGUMENT  # nosec B101


def test_schema_flag_requires_schema():
    code = _code(
        validate_completion_inputs,
        [Message(role="user", content="hi")],
        with_format_response=True,
        format_response=None,
        custom_request=None,
    )
    assert code is ErrorCode.MISSING_ARGUMENT  # nosec B101


def test_paths_are_mutually_exclusive():
    code = _code(
        validate_completion_inputs,
        [Message(role="user", content="hi")],
        with_format_response=False,
        format_response=None,
        custom_request={"model": "gpt-4o", "messages": [{"role": "user", "content": "x"}]},
    )
    assert code is ErrorCode.INVALID_ARGUMENT  # nosec B101


# ---- speech-to-text ----


def test_both_timestamp_flags_rejected():
    assert _code(validate_timestamp_flags, True, True) is ErrorCode.INVALID_ARGUMENT  # nosec B101
    validate_timestamp_flags(True, False)
    validate_timestamp_flags(False, True)


@pytest.mark.parametrize("ext", [".mp3", ".mp4", ".mpeg", ".mpga", ".m4a", ".webm", ".wav", ".flac", ".ogg"])
def test_accepted_extensions(ext):
    assert validate_audio_filename(f"clip{ext}") == ext  # nosec B101


@pytest.mark.parametrize("name", ["clip.MP3", "clip.Wav", "clip.aiff", "clip", "clip.mp3.txt"])
def test_rejected_extensions_are_case_sensitive(name):
    assert _code(validate_audio_filename, name) is ErrorCode.INVALID_ARGUMENT  # nosec B101


@pytest.mark.parametrize("temperature", [0.0, 0.2, 1.0])
def test_temperature_accepted(temperature):
    validate_temperature(temperature)


@pytest.mark.parametrize("temperature", [-0.1, 1.01])
def test_temperature_out_of_range(temperature):
    assert _code(validate_temperature, temperature) is ErrorCode.OUT_OF_RANGE  # nosec B101
