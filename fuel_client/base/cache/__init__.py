"""Catalog cache store package.

Public API:
- resolve_default_location
- load / last_modified / persist
"""

from .paths import resolve_default_location
from .store import last_modified, load, persist

__all__ = ["resolve_default_location", "load", "last_modified", "persist"]
