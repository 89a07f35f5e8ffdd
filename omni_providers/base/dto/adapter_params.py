"""Construction parameters for provider adapters.

``AdapterParams`` is the single argument an adapter constructor takes besides
an optional injected HTTP client. Unset fields (``None``) defer to the
configuration layer (``omni_providers.config``): defaults, config file and
environment. Blank strings are treated as unset so an empty environment
export or form field never shadows a configured value.

Pydantic v2 validates types and the timeout bound; nothing here performs I/O.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

# Fields forwarded to ``get_provider_config`` as explicit overrides.
CONFIG_FIELDS = ("model", "api_key", "base_url", "organization", "project")


class AdapterParams(BaseModel):
    """Explicit adapter settings.

    Attributes
    ----------
    provider:
        Provider name; checked against the name passed to the factory.
    model:
        Default chat model for the content path of ``send_message``.
    api_key:
        Bearer credential. Falls back to ``OPENAI_API_KEY`` when unset.
    base_url:
        API root, e.g. a proxy or gateway in front of the provider.
    organization, project:
        Sent as ``OpenAI-Organization`` / ``OpenAI-Project`` when set.
    timeout_seconds:
        Whole-request timeout of the pooled HTTP client. Ignored when an
        explicit ``http_client`` is injected.
    headers:
        Static headers added to every request.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    organization: Optional[str] = None
    project: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    headers: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("provider", "model", "api_key", "base_url", "organization", "project", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def config_overrides(self) -> Dict[str, Any]:
        """Return the set configuration fields, ready for ``get_provider_config``."""
        return {name: getattr(self, name) for name in CONFIG_FIELDS if getattr(self, name) is not None}


__all__ = ["AdapterParams", "CONFIG_FIELDS"]
