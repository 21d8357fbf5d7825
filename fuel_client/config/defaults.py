"""fuel_client.config.defaults
===========================

Central place for small, stable default values used across the client. These
defaults can be overridden via environment variables or an external config
file (see :func:`fuel_client.config.get_client_config`).

This module intentionally imports nothing from the rest of the package to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Remote service ----
# Trailing slash matters: page URLs are built as f"{base_url}models?page={n}".
FUEL_DEFAULT_BASE_URL = "https://fuel.gazebosim.org/1.0/"
FUEL_MODELS_ENDPOINT = "models"
FUEL_TOKEN_HEADER = "Private-token"
FUEL_FIRST_PAGE = 1

# ---- Cache ----
# Relative to the platform user cache directory.
FUEL_CACHE_SUBPATH = ("open-robotics", "gz-fuel", "model_cache.json")

# ---- HTTP ----
FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

# ---- CLI ----
# Staleness threshold used by the CLI when none is given (about 28 hours).
FUEL_CLI_DEFAULT_THRESHOLD_SECONDS = 100000


__all__ = [
    "FUEL_DEFAULT_BASE_URL",
    "FUEL_MODELS_ENDPOINT",
    "FUEL_TOKEN_HEADER",
    "FUEL_FIRST_PAGE",
    "FUEL_CACHE_SUBPATH",
    "FUEL_DEFAULT_HTTP_TIMEOUT_SECONDS",
    "FUEL_CLI_DEFAULT_THRESHOLD_SECONDS",
]
