"""
Structured client error exception type.

Wraps transport, decode and filesystem exceptions with a normalized
`ErrorCode` so callers and log consumers can tell the failure categories apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class FuelError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        url: Request URL or cache path the failure relates to, if any.
        page: Catalog page being fetched when the failure occurred, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    url: Optional[str] = None
    page: Optional[int] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code, location and message."""
        where = self.url or "-"
        if self.page is not None:
            where = f"{where}#page={self.page}"
        return f"{self.code.value} {where}: {self.message}"


__all__ = ["FuelError"]
