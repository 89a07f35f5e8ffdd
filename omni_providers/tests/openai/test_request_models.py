"""Tests for request value types: wire rendering and file input resolution."""

from __future__ import annotations

import io
import types

import pytest

from omni_providers.base.errors import ErrorCode, ProviderError
from omni_providers.base.models import ContentBlock, Message
from omni_providers.openai.request_models import (
    CompletionRequest,
    FileInput,
    ImageGenRequest,
    SpeechRequest,
    TranslationRequest,
)


class _Upload:
    """Minimal stand-in for a framework upload object (``filename`` + ``file``)."""

    def __init__(self, filename, data: bytes) -> None:
        self.filename = filename
        self.file = io.BytesIO(data)


# ---- CompletionRequest ----


def test_from_messages_omits_empty_optionals():
    req = CompletionRequest.from_messages("gpt-4o-mini", [Message(role="user", content="hi")])
    assert req.to_dict() == {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "hi"}]}  # nosec B101


def test_from_messages_renders_blocks_in_mapping_messages():
    msg = {"role": "user", "content": [ContentBlock.image("https://x/a.png"), {"type": "text", "text": "t"}]}
    body = CompletionRequest.from_messages("m", [msg]).to_dict()
    assert body["messages"][0]["content"] == [  # nosec B101
        {"type": "image_url", "image_url": {"url": "https://x/a.png"}},
        {"type": "text", "text": "t"},
    ]


def test_from_custom_mapping_keeps_unknown_fields_and_overwrites_format():
    custom = {
        "model": "gpt-4o",
        "messages": [{"role": "user", "content": "x"}],
        "temperature": 0.3,
        "response_format": {"type": "json_object"},
        "store": True,
    }
    envelope = {"type": "json_schema", "json_schema": {"name": "n", "schema": {}}}
    body = CompletionRequest.from_custom(custom, response_format=envelope).to_dict()
    assert body["temperature"] == 0.3  # nosec B101
    assert body["store"] is True  # nosec B101
    assert body["response_format"] == envelope  # nosec B101
    assert custom["response_format"] == {"type": "json_object"}  # nosec B101


def test_from_custom_dataclass_is_copied():
    original = CompletionRequest(model="gpt-4o", messages=[{"role": "user", "content": "x"}], logprobs=True)
    adopted = CompletionRequest.from_custom(original, response_format={"type": "json_object"})
    assert adopted is not original  # nosec B101
    assert original.response_format is None  # nosec B101
    assert adopted.to_dict()["logprobs"] is True  # nosec B101


# ---- image / speech bodies ----


def test_image_request_body_omits_unset_fields():
    body = ImageGenRequest(prompt="a fox", model="dall-e-3", n=1, quality="hd").to_dict()
    assert body == {"prompt": "a fox", "model": "dall-e-3", "n": 1, "quality": "hd"}  # nosec B101


def test_speech_request_body():
    body = SpeechRequest(model="tts-1", input="hi", voice="nova", speed=1.5).to_dict()
    assert body == {"model": "tts-1", "input": "hi", "voice": "nova", "speed": 1.5}  # nosec B101


def test_translation_maps_to_transcription_without_language():
    tr = TranslationRequest(file="a.mp3", prompt="p", temperature=0.5).as_transcription()
    assert tr.language == ""  # nosec B101
    assert (tr.file, tr.prompt, tr.temperature) == ("a.mp3", "p", 0.5)  # nosec B101


# ---- FileInput ----


def test_coerce_classifies_the_three_kinds(tmp_path):
    path = tmp_path / "a.mp3"
    path.write_bytes(b"x")
    assert FileInput.coerce(str(path)).kind == "path"  # nosec B101
    assert FileInput.coerce(path).kind == "path"  # nosec B101
    assert FileInput.coerce(_Upload("a.mp3", b"x")).kind == "handle"  # nosec B101
    stream = FileInput.coerce(io.BytesIO(b"x"), "a.wav")
    assert (stream.kind, stream.filename) == ("stream", "a.wav")  # nosec B101


def test_coerce_none_is_missing():
    with pytest.raises(ProviderError) as exc:
        FileInput.coerce(None)
    assert exc.value.code is ErrorCode.MISSING_ARGUMENT  # nosec B101


def test_coerce_unsupported_object_is_invalid():
    with pytest.raises(ProviderError) as exc:
        FileInput.coerce(12345)
    assert exc.value.code is ErrorCode.INVALID_ARGUMENT  # nosec B101


def test_coerce_fills_stream_filename_once():
    fi = FileInput(kind="stream", source=io.BytesIO(b""))
    assert FileInput.coerce(fi, "late.ogg").filename == "late.ogg"  # nosec B101
    assert FileInput.coerce(FileInput.from_stream(io.BytesIO(), "x.ogg"), "other.ogg").filename == "x.ogg"  # nosec B101


def test_open_path_yields_basename_and_closes(tmp_path):
    path = tmp_path / "nested" / "speech.wav"
    path.parent.mkdir()
    path.write_bytes(b"RIFF")
    with FileInput.from_path(path).open() as (reader, name):
        assert name == "speech.wav"  # nosec B101
        assert reader.read() == b"RIFF"  # nosec B101
    assert reader.closed  # nosec B101


def test_open_path_closes_on_error(tmp_path):
    path = tmp_path / "speech.wav"
    path.write_bytes(b"RIFF")
    with pytest.raises(RuntimeError):
        with FileInput.from_path(path).open() as (reader, _):
            raise RuntimeError("boom")
    assert reader.closed  # nosec B101


def test_open_missing_path_is_io(tmp_path):
    with pytest.raises(ProviderError) as exc:
        with FileInput.from_path(tmp_path / "absent.mp3").open():
            pass
    assert exc.value.code is ErrorCode.IO  # nosec B101


def test_open_stream_without_filename_is_missing():
    with pytest.raises(ProviderError) as exc:
        with FileInput.coerce(io.BytesIO(b"x")).open():
            pass
    assert exc.value.code is ErrorCode.MISSING_ARGUMENT  # nosec B101


def test_open_handle_uses_its_filename_and_leaves_it_open():
    upload = _Upload("voice.m4a", b"data")
    with FileInput.coerce(upload).open() as (reader, name):
        assert name == "voice.m4a"  # nosec B101
        assert reader.read() == b"data"  # nosec B101
    assert not upload.file.closed  # nosec B101


def test_open_handle_with_stream_attribute():
    storage = types.SimpleNamespace(filename="note.flac", stream=io.BytesIO(b"fLaC"))
    with FileInput.coerce(storage).open() as (reader, name):
        assert (name, reader.read()) == ("note.flac", b"fLaC")  # nosec B101
