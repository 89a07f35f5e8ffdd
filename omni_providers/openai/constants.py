"""Enumerated value sets accepted by the OpenAI adapter.

Plain constants only; the validators in :mod:`omni_providers.openai.validation`
and the file resolution in :mod:`omni_providers.openai.request_models` read
from here.
"""

from __future__ import annotations

PROVIDER_NAME = "openai"

# ---- Image generation ----
IMAGE_MODELS = frozenset({"dall-e-2", "dall-e-3"})
# Model that accepts ``quality`` and ``style``.
IMAGE_ADVANCED_MODEL = "dall-e-3"
IMAGE_QUALITIES = frozenset({"standard", "hd"})
IMAGE_STYLES = frozenset({"vivid", "natural"})
IMAGE_RESPONSE_FORMATS = frozenset({"url", "b64_json"})
IMAGE_COUNT_MIN = 1
IMAGE_COUNT_MAX = 10

# ---- Text-to-speech ----
SPEECH_MODELS = frozenset({"tts-1", "tts-1-hd"})
SPEECH_VOICES = frozenset({"alloy", "echo", "fable", "onyx", "nova", "shimmer"})
SPEECH_RESPONSE_FORMATS = frozenset({"mp3", "opus", "aac", "flac", "wav", "pcm"})
SPEECH_DEFAULT_FORMAT = "mp3"
SPEECH_SPEED_MIN = 0.25
SPEECH_SPEED_MAX = 4.0

# ---- Speech-to-text ----
# Exact, case-sensitive match against the filename extension.
AUDIO_EXTENSIONS = (".mp3", ".mp4", ".mpeg", ".mpga", ".m4a", ".webm", ".wav", ".flac", ".ogg")
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 1.0
VERBOSE_RESPONSE_FORMAT = "verbose_json"

__all__ = [
    "PROVIDER_NAME",
    "IMAGE_MODELS",
    "IMAGE_ADVANCED_MODEL",
    "IMAGE_QUALITIES",
    "IMAGE_STYLES",
    "IMAGE_RESPONSE_FORMATS",
    "IMAGE_COUNT_MIN",
    "IMAGE_COUNT_MAX",
    "SPEECH_MODELS",
    "SPEECH_VOICES",
    "SPEECH_RESPONSE_FORMATS",
    "SPEECH_DEFAULT_FORMAT",
    "SPEECH_SPEED_MIN",
    "SPEECH_SPEED_MAX",
    "AUDIO_EXTENSIONS",
    "TEMPERATURE_MIN",
    "TEMPERATURE_MAX",
    "VERBOSE_RESPONSE_FORMAT",
]
