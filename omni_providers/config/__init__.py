"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (model, base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, OPENAI_API_KEY)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.
* Keep zero hard dependency on PyYAML (load YAML only if available).

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_BASE_URL,
<PROVIDER>_ORGANIZATION, <PROVIDER>_PROJECT, e.g. OPENAI_MODEL.

External Config File (Optional)
-------------------------------
If PROVIDERS_CONFIG_FILE is set to a path, we attempt to load JSON first.
If that fails and PyYAML is installed, attempt YAML. Structure example:

```
openai:
  model: gpt-4o-mini
  base_url: https://api.openai.com/v1
  organization: org-123
```

The parsed file is cached per path; ``reset_config_cache()`` clears it.

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json
import os

from .defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL
from .env import read_env_fields

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
}


_FILE_CACHE: Optional[Tuple[str, Dict[str, Any]]] = None


def reset_config_cache() -> None:
    """Forget the parsed external config file (tests switch files per case)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _parse_config_text(text: str) -> Dict[str, Any]:
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        if yaml is None:
            return {}
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            return {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE") or ""
    if _FILE_CACHE is not None and _FILE_CACHE[0] == path:
        return _FILE_CACHE[1]
    data: Dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.is_file():
            data = _parse_config_text(p.read_text(encoding="utf-8"))
    _FILE_CACHE = (path, data)
    return data


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= read_env_fields(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
