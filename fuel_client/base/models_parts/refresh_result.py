"""
RefreshResult DTO describing the outcome of one catalog refresh.

Keeps "no catalog because the first page failed" distinguishable from "catalog
fetched but the cache write failed", while the held snapshot semantics stay
simple: ``models`` is ``None`` exactly when the refresh failed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..errors import ErrorCode, FuelError
from .fuel_model import FuelModel


@dataclass
class RefreshResult:
    """Outcome of :meth:`FuelClient.refresh`.

    Attributes:
        models: The new snapshot, or ``None`` when nothing was fetched.
        pages_fetched: Number of pages that decoded successfully.
        stop_reason: Why pagination ended (``TRANSPORT``, ``DECODE`` or
            ``EXHAUSTED`` for an empty page).
        stop_error: The transport/decode error that ended pagination, if any.
        error: ``ErrorCode.EMPTY_RESULT`` when no record was fetched.
        persisted: ``True``/``False`` when a cache write was attempted,
            ``None`` when persistence was not requested or not reached.
        persist_error: The persistence failure, if any.
        duration_ms: Wall time spent in the refresh.
    """

    models: Optional[List[FuelModel]]
    pages_fetched: int
    stop_reason: ErrorCode
    stop_error: Optional[FuelError] = None
    error: Optional[ErrorCode] = None
    persisted: Optional[bool] = None
    persist_error: Optional[FuelError] = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Return ``True`` when a non-empty snapshot was fetched."""
        return self.models is not None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable summary (records are counted, not dumped)."""
        return {
            "ok": self.ok,
            "count": len(self.models) if self.models is not None else None,
            "pages_fetched": self.pages_fetched,
            "stop_reason": self.stop_reason.value,
            "stop_error": str(self.stop_error) if self.stop_error else None,
            "error": self.error.value if self.error else None,
            "persisted": self.persisted,
            "persist_error": str(self.persist_error) if self.persist_error else None,
            "duration_ms": round(self.duration_ms, 1),
        }


__all__ = ["RefreshResult"]
