"""Per-operation context attached to structured log events.

A :class:`LogContext` names who is talking to what: provider, model,
operation and endpoint path. ``extra`` holds ad-hoc keys (request ids,
granularity, ...). Rendering flattens ``extra`` into the top level and drops
``None`` values, so events only carry what is known.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Identity fields shared by the events of one adapter operation."""

    provider: Optional[str] = None
    model: Optional[str] = None
    operation: Optional[str] = None
    endpoint: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **updates: Any) -> "LogContext":
        """Return a copy with identity fields replaced and other keys merged into ``extra``."""
        own = {k: v for k, v in updates.items() if k in ("provider", "model", "operation", "endpoint")}
        merged = {**self.extra, **{k: v for k, v in updates.items() if k not in own}}
        return replace(self, extra=merged, **own)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "provider": self.provider,
            "model": self.model,
            "operation": self.operation,
            "endpoint": self.endpoint,
        }
        for key, value in (self.extra or {}).items():
            out.setdefault(key, value)
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext"]
