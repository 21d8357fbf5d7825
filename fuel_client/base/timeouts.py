"""Timeout configuration for catalog HTTP requests.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`, re-reading
    ``FUEL_HTTP_TIMEOUT_SECONDS`` only when its value changes (so tests can
    adjust it at runtime). No other module hard-codes a request timeout.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from ..config.defaults import FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS

_ENV_NAME = "FUEL_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-request timeout for one catalog page GET.
    """

    http_timeout_seconds: float = FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from environment variable ``name``, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached ``TimeoutConfig`` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = os.getenv(_ENV_NAME, "")
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(_ENV_NAME, FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
