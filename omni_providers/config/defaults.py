"""omni_providers.config.defaults
==============================

Central place for small, stable default values used across the
omni_providers package. These defaults can be overridden via environment
variables or external configuration, but provide sensible fallbacks for local
development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters free of magic literals such as endpoint paths and fixed
  model names.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- OpenAI ----
# Chat model used by the content path of ``send_message`` when nothing else is configured.
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Endpoint paths, relative to the base URL.
OPENAI_CHAT_COMPLETIONS_PATH = "/chat/completions"
OPENAI_IMAGES_GENERATIONS_PATH = "/images/generations"
OPENAI_AUDIO_SPEECH_PATH = "/audio/speech"
OPENAI_AUDIO_TRANSCRIPTIONS_PATH = "/audio/transcriptions"
OPENAI_AUDIO_TRANSLATIONS_PATH = "/audio/translations"

# Speech-to-text and translation always use this model.
WHISPER_MODEL = "whisper-1"

# Optional account scoping headers.
OPENAI_ORGANIZATION_HEADER = "OpenAI-Organization"
OPENAI_PROJECT_HEADER = "OpenAI-Project"

__all__ = [
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_CHAT_COMPLETIONS_PATH",
    "OPENAI_IMAGES_GENERATIONS_PATH",
    "OPENAI_AUDIO_SPEECH_PATH",
    "OPENAI_AUDIO_TRANSCRIPTIONS_PATH",
    "OPENAI_AUDIO_TRANSLATIONS_PATH",
    "WHISPER_MODEL",
    "OPENAI_ORGANIZATION_HEADER",
    "OPENAI_PROJECT_HEADER",
]
