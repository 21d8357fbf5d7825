"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Transport adapters and the cache store use these to wrap library exceptions
(``httpx``, ``pydantic``, ``json``, ``OSError``) into :class:`FuelError`.
"""
from __future__ import annotations

import asyncio
import json
from typing import Optional

import httpx
from pydantic import ValidationError

from .error_code import ErrorCode
from .fuel_error import FuelError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. FuelError passthrough.
        2. Decode failures (pydantic validation, JSON, unicode).
        3. Transport failures (httpx errors, timeouts, HTTP status).
        4. Filesystem errors (reported as persistence failures).
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, FuelError):
        return exc.code
    if isinstance(exc, (ValidationError, json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCode.DECODE
    if isinstance(exc, (httpx.HTTPError, TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TRANSPORT
    if _extract_status(exc) is not None:
        return ErrorCode.TRANSPORT
    if isinstance(exc, OSError):
        return ErrorCode.PERSISTENCE
    return ErrorCode.UNKNOWN


def wrap_exception(
    exc: BaseException,
    *,
    url: Optional[str] = None,
    page: Optional[int] = None,
    code: Optional[ErrorCode] = None,
) -> FuelError:
    """Return ``exc`` as a :class:`FuelError`, classifying it unless ``code`` is given."""
    if isinstance(exc, FuelError):
        return exc
    status = _extract_status(exc) if isinstance(exc, Exception) else None
    message = f"HTTP {status}" if status is not None else (str(exc) or type(exc).__name__)
    return FuelError(
        code=code or classify_exception(exc),
        message=message[:300],
        url=url,
        page=page,
        raw=exc if isinstance(exc, Exception) else None,
    )


__all__ = [
    "classify_exception",
    "wrap_exception",
    "_extract_status",
]
