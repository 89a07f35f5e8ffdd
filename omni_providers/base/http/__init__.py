"""HTTP utilities for adapters (shared client pool and the bearer exchange)."""

from .client import get_httpx_client, close_all_clients
from .transport import HttpExchange, exchange

__all__ = ["get_httpx_client", "close_all_clients", "HttpExchange", "exchange"]
