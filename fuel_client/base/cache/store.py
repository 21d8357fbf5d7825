"""Catalog cache file store.

Reads and writes the catalog snapshot as a single pretty-printed JSON array
and reports the file's modification time for the staleness policy.

Failure semantics
-----------------
- ``load`` and ``last_modified`` never raise: a missing or corrupt cache means
  "no cache". The cause is still logged with its own error code so a missing
  file (``cache_missing``) and a broken one (``cache_load``) stay
  distinguishable.
- ``persist`` raises :class:`FuelError` (``ErrorCode.PERSISTENCE``). The
  payload is written to a sibling temp file and moved into place with
  ``os.replace``, so readers never observe a partially written artifact.

Concurrency
-----------
No file lock is taken. Two clients writing the same path concurrently race and
the last ``os.replace`` wins.
"""

from __future__ import annotations

import contextlib
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..errors import ErrorCode, FuelError, wrap_exception
from ..logging import LogContext, get_logger, log_event
from ..models import FuelModel, decode_catalog, encode_catalog

PathLike = Union[str, "os.PathLike[str]"]

_logger = get_logger("fuel.cache")


def load(path: Optional[PathLike]) -> Optional[List[FuelModel]]:
    """Load a cached snapshot from ``path``.

    Args:
        path: Cache file location; ``None`` is treated as "no cache".

    Returns:
        The decoded records, or ``None`` on any read or decode failure.
    """
    if path is None:
        return None
    ctx = LogContext(cache_path=str(path))
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        log_event(_logger, "cache.load", ctx, level=logging.DEBUG, ok=False, error_code=ErrorCode.CACHE_MISSING.value)
        return None
    except OSError as e:
        log_event(_logger, "cache.load", ctx, level=logging.WARNING, ok=False, error_code=ErrorCode.CACHE_LOAD.value, error=str(e))
        return None
    try:
        models = decode_catalog(raw, url=str(path))
    except FuelError as e:
        log_event(_logger, "cache.load", ctx, level=logging.WARNING, ok=False, error_code=ErrorCode.CACHE_LOAD.value, error=e.message)
        return None
    log_event(_logger, "cache.load", ctx, level=logging.DEBUG, ok=True, count=len(models))
    return models


def last_modified(path: Optional[PathLike]) -> Optional[datetime]:
    """Return the cache file's modification time (UTC), or ``None`` if unavailable."""
    if path is None:
        return None
    try:
        mtime = os.stat(path).st_mtime
    except (OSError, ValueError):
        return None
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


def persist(path: PathLike, models: Sequence[FuelModel]) -> None:
    """Write ``models`` to ``path``, creating parent directories as needed.

    Args:
        path: Destination cache file; existing content is replaced.
        models: Snapshot to serialize.

    Raises:
        FuelError: ``ErrorCode.PERSISTENCE`` when serialization, directory
            creation or the write fails.
    """
    target = Path(path)
    tmp_path = target.with_name(f"{target.name}.tmp")
    ctx = LogContext(cache_path=str(target))
    try:
        payload = encode_catalog(models)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(payload)
        os.replace(tmp_path, target)
    except Exception as e:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        err = wrap_exception(e, url=str(target), code=ErrorCode.PERSISTENCE)
        log_event(_logger, "cache.persist", ctx, level=logging.WARNING, ok=False, error_code=err.code.value, error=err.message)
        raise err from e
    log_event(_logger, "cache.persist", ctx, ok=True, count=len(models), bytes=len(payload))


__all__ = ["load", "last_modified", "persist"]
