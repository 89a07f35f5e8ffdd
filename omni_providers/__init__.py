"""omni_providers package

Typed adapter for the OpenAI HTTP API (chat, vision, structured output,
image generation, text-to-speech, speech-to-text and translation).

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Parameters: :class:`AdapterParams`
    - Message types: :class:`Message`, :class:`ContentBlock`
    - Factory: :func:`create`, :class:`ProviderFactory`

Usage::

    from omni_providers import AdapterParams, Message, create

    provider = create("openai", params=AdapterParams(api_key="sk-..."))
    reply = provider.first_message([Message(role="user", content="Hello")])
"""

from typing import Any

from .base.dto import AdapterParams
from .base.errors import ErrorCode, ProviderError
from .base.factory import ParamsLike, ProviderFactory, UnknownProviderError
from .base.models import ContentBlock, Message

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "UnknownProviderError",
    # Core helpers
    "create",
    "ProviderFactory",
    "AdapterParams",
    # Message types
    "Message",
    "ContentBlock",
]


def create(provider: str, *, params: ParamsLike = None, **kwargs: Any) -> Any:
    """Return a provider adapter instance for ``provider`` (e.g. ``"openai"``).

    ``kwargs`` are forwarded to the adapter constructor (``http_client``).
    Raises :class:`UnknownProviderError` for unknown names.
    """
    return ProviderFactory.create(provider, params=params, **kwargs)
