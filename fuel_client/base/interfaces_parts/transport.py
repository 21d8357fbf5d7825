"""Transport Protocol (single-class module).

Interface for the injected capability that performs one HTTP GET per catalog
page.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Perform an HTTP GET and return the response body."""

    async def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        """Return the body of a successful response to ``GET url``.

        Implementations raise :class:`fuel_client.base.errors.FuelError` with
        ``ErrorCode.TRANSPORT`` for connection errors, timeouts and non-2xx
        statuses. Other exceptions are treated the same way by the caller.
        """
        ...
