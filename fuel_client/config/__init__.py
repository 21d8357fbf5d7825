"""Unified configuration layer for the Fuel client.

Merge order (later wins)
------------------------
1. Built-in defaults (:mod:`fuel_client.config.defaults`)
2. Optional external config file (JSON or YAML) named by ``FUEL_CONFIG_FILE``
3. Environment variables ``FUEL_URL``, ``FUEL_TOKEN``, ``FUEL_CACHE_PATH``,
   ``FUEL_HTTP_TIMEOUT_SECONDS``
4. In-code overrides passed to :func:`get_client_config` (``None`` ignored)

External Config File (Optional)
-------------------------------
JSON is tried first; YAML is attempted only when PyYAML is installed::

    url: https://fuel.gazebosim.org/1.0/
    cache_path: ~/.cache/open-robotics/gz-fuel/model_cache.json
    http_timeout_seconds: 10

Placeholder-looking tokens (``changeme``, ``placeholder`` ...) are dropped.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import FUEL_DEFAULT_BASE_URL, FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS
from .env import CONFIG_FILE_ENV, ENV_MAP, get_env_value, is_placeholder

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Any] = {
    "url": FUEL_DEFAULT_BASE_URL,
    "token": None,
    "cache_path": None,
    "http_timeout_seconds": FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_KEY: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the optional config file named by ``FUEL_CONFIG_FILE``."""
    global _FILE_CACHE, _FILE_CACHE_KEY
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_KEY == path:
        return _FILE_CACHE
    data: Any = {}
    p = Path(path).expanduser() if path else None
    if p is not None and p.is_file():
        text = p.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            if yaml is not None:  # pragma: no cover (depends on optional lib)
                try:
                    data = yaml.safe_load(text) or {}
                except yaml.YAMLError:
                    data = {}
            else:
                data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = {k: v for k, v in data.items() if k in DEFAULTS}
    _FILE_CACHE_KEY = path
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        val = get_env_value(field)
        if val is not None:
            out[field] = val
    return out


def _coerce_timeout(value: Any) -> float:
    try:
        val = float(value)
    except (TypeError, ValueError):
        return FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS
    return val if val > 0 else FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Keys: ``url`` (str), ``token`` (str | None), ``cache_path`` (str | None;
    ``None`` means "use the platform default"), ``http_timeout_seconds`` (float).
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    if is_placeholder(cfg.get("token")):
        cfg["token"] = None
    url = str(cfg.get("url") or FUEL_DEFAULT_BASE_URL)
    cfg["url"] = url if url.endswith("/") else url + "/"
    if cfg.get("cache_path"):
        cfg["cache_path"] = str(Path(str(cfg["cache_path"])).expanduser())
    cfg["http_timeout_seconds"] = _coerce_timeout(cfg.get("http_timeout_seconds"))
    return cfg


def _reset_config_cache_for_tests() -> None:
    global _FILE_CACHE, _FILE_CACHE_KEY
    _FILE_CACHE = None
    _FILE_CACHE_KEY = None


__all__ = [
    "get_client_config",
    "DEFAULTS",
]
