"""
Providers Base Package

Exports the provider-agnostic building blocks shared by adapters:

- Errors: normalized ``ErrorCode`` taxonomy and ``ProviderError``
- Models (DTOs): ``Message`` and ``ContentBlock``
- Parameters: ``AdapterParams``
- HTTP: pooled ``httpx`` clients and the bearer-authenticated exchange
- Timeouts: ``TimeoutConfig`` resolution
- Factory: lazy creation of provider adapters by canonical name
"""

from .dto import AdapterParams
from .errors import ErrorCode, ProviderError, classify_exception, is_retryable_status
from .factory import ProviderFactory, UnknownProviderError
from .http import HttpExchange, close_all_clients, exchange, get_httpx_client
from .models import SUPPORTED_IMAGE_MEDIA_TYPES, ContentBlock, ContentBlockType, Message, Role
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "AdapterParams",
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "is_retryable_status",
    "ProviderFactory",
    "UnknownProviderError",
    "HttpExchange",
    "close_all_clients",
    "exchange",
    "get_httpx_client",
    "SUPPORTED_IMAGE_MEDIA_TYPES",
    "ContentBlock",
    "ContentBlockType",
    "Message",
    "Role",
    "TimeoutConfig",
    "get_timeout_config",
]
