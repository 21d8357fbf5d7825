"""ProgressSink Protocol (single-class module).

Observer invoked synchronously once per fetched record during a refresh.
Delivery is best effort: exceptions raised by the sink are swallowed by the
fetch loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import FuelModel


class ProgressSink(Protocol):
    """Callable receiving each record in fetch order."""

    def __call__(self, model: "FuelModel") -> None:
        ...
