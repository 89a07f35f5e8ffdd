"""omni_providers.config.env
==========================

Environment variable names for provider settings.

Every configurable field of a provider is read from ``<PROVIDER>_<FIELD>``
(``OPENAI_MODEL``, ``OPENAI_BASE_URL``, ...). The API key variable is listed
explicitly in ``ENV_MAP`` so callers can name it in messages and logs.

Unset and empty variables are treated the same: helpers return ``None`` and
never raise. Whether a missing key is fatal is decided by the adapter, which
reports ``AUTH`` when an operation runs.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# provider -> API key variable
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
}

# config field -> variable suffix
ENV_FIELD_SUFFIXES: Dict[str, str] = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - suffix name, not a secret
    "base_url": "BASE_URL",
    "organization": "ORGANIZATION",
    "project": "PROJECT",
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example", "your-api-key")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True when ``val`` looks like a sample credential rather than a real one.

    Matches (case-insensitively) values containing ``placeholder``,
    ``changeme``, ``example`` or ``your-api-key``, and values starting with
    ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return v.startswith("test_") or any(marker in v for marker in _PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str, field: str = "api_key") -> Optional[str]:
    """Return the variable holding ``field`` for ``provider``.

    API keys resolve only for providers registered in ``ENV_MAP``; None is
    returned for those misses and for unknown fields.
    """
    if not provider:
        return None
    name = provider.strip().lower()
    if field == "api_key":
        return ENV_MAP.get(name)
    suffix = ENV_FIELD_SUFFIXES.get(field)
    return f"{name.upper()}_{suffix}" if suffix else None


def read_env_fields(provider: str) -> Dict[str, str]:
    """Return every non-empty ``<PROVIDER>_<FIELD>`` value keyed by field name."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_SUFFIXES:
        var = get_env_var_name(provider, field)
        if var and (val := os.environ.get(var)):
            out[field] = val
    return out


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, variable_name)`` from the environment, or ``(None, None)``.

    Only providers registered in ``ENV_MAP`` resolve.
    """
    name = ENV_MAP.get((provider or "").strip().lower())
    if name and (val := os.environ.get(name)):
        return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_FIELD_SUFFIXES",
    "is_placeholder",
    "get_env_var_name",
    "read_env_fields",
    "resolve_provider_key",
]
