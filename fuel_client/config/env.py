"""fuel_client.config.env
======================

Environment variable names and small lookup helpers for client settings.

Failure Modes
-------------
Helpers never raise on unset variables; they return ``None`` and callers
decide how to proceed (e.g., fall back to config file values or defaults).
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Config field -> environment variable
ENV_MAP: Dict[str, str] = {
    "url": "FUEL_URL",
    "token": "FUEL_TOKEN",
    "cache_path": "FUEL_CACHE_PATH",
    "http_timeout_seconds": "FUEL_HTTP_TIMEOUT_SECONDS",
}

CONFIG_FILE_ENV = "FUEL_CONFIG_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_value(field: str) -> Optional[str]:
    """Return the stripped environment value for a config ``field``, if set and non-empty."""
    name = ENV_MAP.get(field)
    if not name:
        return None
    val = os.environ.get(name)
    if val is None or not val.strip():
        return None
    return val.strip()


__all__ = [
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "get_env_value",
]
