"""httpx-backed catalog transport.

Purpose:
    Provide the default :class:`~fuel_client.base.interfaces.Transport`
    implementation used by :class:`FuelClient` when none is injected.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Timeout strategy:
    - The request timeout derives from :func:`get_timeout_config` unless an
      explicit ``timeout`` is passed. No retries are performed.

Lifecycle & cleanup:
    - When an ``httpx.AsyncClient`` is injected, the caller owns it and this
      adapter never closes it.
    - Without one, each ``get`` opens and closes a short-lived client. This
      keeps the adapter usable across separate event loops, which
      ``FuelClient.blocking_refresh`` creates per call.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ..errors import ErrorCode, wrap_exception
from ..timeouts import get_timeout_config


class HttpxTransport:
    """Perform catalog page GETs with ``httpx``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None) -> None:
        self._client = client
        self._timeout = timeout

    def _effective_timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return get_timeout_config().http_timeout_seconds

    async def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        """Return the response body for ``GET url``.

        Raises:
            FuelError: ``ErrorCode.TRANSPORT`` on connection errors, timeouts
                and non-2xx responses.
        """
        try:
            if self._client is not None:
                resp = await self._client.get(url, headers=dict(headers))
            else:
                async with httpx.AsyncClient(timeout=self._effective_timeout()) as client:
                    resp = await client.get(url, headers=dict(headers))
            resp.raise_for_status()
            return resp.content
        except (httpx.HTTPError, TimeoutError) as e:
            raise wrap_exception(e, url=url, code=ErrorCode.TRANSPORT) from e


__all__ = ["HttpxTransport"]
