"""Default cache location resolution.

Mirrors the per-platform user cache directory conventions:

- Linux/BSD: ``$XDG_CACHE_HOME`` or ``~/.cache``
- macOS: ``~/Library/Caches``
- Windows: ``%LOCALAPPDATA%``

The catalog file lives at ``<cache dir>/open-robotics/gz-fuel/model_cache.json``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from ...config.defaults import FUEL_CACHE_SUBPATH


def _user_cache_dir() -> Optional[Path]:
    """Return the platform user cache directory, or ``None`` if unresolvable."""
    if sys.platform.startswith("win"):
        root = os.environ.get("LOCALAPPDATA")
        return Path(root) if root else None
    try:
        home = Path.home()
    except (KeyError, RuntimeError):
        home = None
    if sys.platform == "darwin":
        return home / "Library" / "Caches" if home else None
    root = os.environ.get("XDG_CACHE_HOME")
    if root and os.path.isabs(root):
        return Path(root)
    return home / ".cache" if home else None


def resolve_default_location() -> Optional[Path]:
    """Return the default catalog cache file path.

    Never raises; returns ``None`` when no cache directory can be resolved
    on this host and callers must then run without a cache file.
    """
    base = _user_cache_dir()
    if base is None:
        return None
    return base.joinpath(*FUEL_CACHE_SUBPATH)


__all__ = ["resolve_default_location"]
