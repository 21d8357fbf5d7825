"""HTTP transport adapters."""

from .client import HttpxTransport

__all__ = ["HttpxTransport"]
