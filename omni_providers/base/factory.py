"""Adapter factory.

Purpose
-------
Resolve a canonical provider name to its adapter class and build an instance
from :class:`AdapterParams`. Adapter modules are imported on first use so
that ``import omni_providers`` stays cheap.

Failure modes
-------------
Every resolution or construction failure surfaces as
:class:`UnknownProviderError`; the factory never retries or falls back to a
different adapter.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from .dto.adapter_params import AdapterParams

ParamsLike = Union[AdapterParams, Mapping[str, Any], None]


class UnknownProviderError(Exception):
    """Raised when a provider name cannot be turned into an adapter instance."""


class ProviderFactory:
    """Build provider adapters by canonical name (e.g. ``"openai"``)."""

    # name -> "module:Class"
    _REGISTRY: Dict[str, str] = {
        "openai": "omni_providers.openai.client:OpenAIProvider",
    }

    @classmethod
    def create(cls, provider: str, *, params: ParamsLike = None, **kwargs: Any) -> Any:
        """Return a new adapter for ``provider``.

        Parameters
        ----------
        provider:
            Provider name; matching is case-insensitive.
        params:
            :class:`AdapterParams` or a mapping of its fields. A ``provider``
            field, when set, must name the same provider.
        **kwargs:
            Passed to the adapter constructor (``http_client``).

        Raises
        ------
        UnknownProviderError
            Unregistered name, mismatching ``params.provider``, import
            failure, or a constructor that rejects its arguments.
        """
        name = (provider or "").strip().lower()
        adapter_cls = cls._resolve(name, provider)
        resolved = cls._coerce_params(params)
        if resolved is not None and resolved.provider and resolved.provider.strip().lower() != name:
            raise UnknownProviderError(
                f"params.provider '{resolved.provider}' does not match requested provider '{provider}'"
            )
        try:
            return adapter_cls(params=resolved, **kwargs)
        except TypeError as exc:
            raise UnknownProviderError(f"invalid arguments for '{name}' adapter: {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Registered provider names, sorted."""
        return tuple(sorted(cls._REGISTRY))

    @classmethod
    def _resolve(cls, name: str, requested: str) -> Type[Any]:
        target = cls._REGISTRY.get(name)
        if target is None:
            raise UnknownProviderError(
                f"unknown provider '{requested}'; supported: {', '.join(cls.supported())}"
            )
        module_path, _, class_name = target.partition(":")
        try:
            return getattr(import_module(module_path), class_name)
        except (ImportError, AttributeError) as exc:  # pragma: no cover - broken registry entry
            raise UnknownProviderError(f"cannot load adapter '{target}' for '{name}': {exc}") from exc

    @staticmethod
    def _coerce_params(params: ParamsLike) -> Optional[AdapterParams]:
        if params is None or isinstance(params, AdapterParams):
            return params
        return AdapterParams(**dict(params))


__all__ = ["ParamsLike", "ProviderFactory", "UnknownProviderError"]
