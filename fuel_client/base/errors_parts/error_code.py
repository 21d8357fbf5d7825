"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the cache store, the fetch
orchestrator and the transport adapters. Values are lowercase snake_case and
are considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories.

    ``TRANSPORT``, ``DECODE`` and ``EXHAUSTED`` double as pagination stop
    reasons; ``EXHAUSTED`` is the only one that is not a failure.
    """

    TRANSPORT = "transport"
    DECODE = "decode"
    EXHAUSTED = "exhausted"
    EMPTY_RESULT = "empty_result"
    PERSISTENCE = "persistence"
    CACHE_MISSING = "cache_missing"
    CACHE_LOAD = "cache_load"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
