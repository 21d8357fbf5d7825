"""Deterministic mock transport backed by canned pages for offline use.

Purpose
-------
Provide a :class:`~fuel_client.base.interfaces.Transport` that serves
predefined page bodies instead of talking to the network, so the fetch loop,
the cache store and the CLI can be exercised hermetically.

Page semantics
--------------
Page ``n`` of the catalog is ``pages[n - 1]``. Each entry may be raw ``bytes``
/ ``str`` (served verbatim), a list of record mappings (JSON encoded), or an
exception instance (raised). Requests past the last page fail with a
transport error, the way the live service answers 404 past the end.

External dependencies
---------------------
Standard library only. The bundled sample catalog is loaded via
``importlib.resources``.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union
from urllib.parse import parse_qs, urlsplit

from ..base.errors import ErrorCode, FuelError

PageBody = Union[bytes, str, List[Mapping[str, Any]], BaseException]

_FIXTURE_RESOURCE = "sample_catalog.json"


def load_fixture_catalog(resource: str = _FIXTURE_RESOURCE) -> List[Dict[str, Any]]:
    """Load the JSON record list bundled with the mock transport.

    Parameters
    ----------
    resource: str, default ``sample_catalog.json``
        Name of the resource file located under ``fuel_client.mock.fixtures``.
    """
    data = resources.files("fuel_client.mock.fixtures").joinpath(resource).read_text(encoding="utf-8")
    return json.loads(data)


class MockTransport:
    """Transport serving canned catalog pages and recording each request."""

    def __init__(self, pages: Sequence[PageBody]) -> None:
        self.pages: List[PageBody] = list(pages)
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    @classmethod
    def from_fixture(cls, page_size: int = 2, resource: str = _FIXTURE_RESOURCE) -> "MockTransport":
        """Build a transport paging the bundled sample catalog ``page_size`` records at a time."""
        records = load_fixture_catalog(resource)
        size = max(1, page_size)
        return cls([records[i : i + size] for i in range(0, len(records), size)])

    @staticmethod
    def _page_number(url: str) -> int:
        values = parse_qs(urlsplit(url).query).get("page") or ["1"]
        try:
            return int(values[0])
        except ValueError:
            return 0

    async def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        self.calls.append((url, dict(headers)))
        page = self._page_number(url)
        if page < 1 or page > len(self.pages):
            raise FuelError(code=ErrorCode.TRANSPORT, message="HTTP 404", url=url, page=page)
        body = self.pages[page - 1]
        if isinstance(body, BaseException):
            raise body
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(list(body)).encode("utf-8")

    @property
    def requested_urls(self) -> List[str]:
        return [url for url, _ in self.calls]


__all__ = ["MockTransport", "load_fixture_catalog"]
