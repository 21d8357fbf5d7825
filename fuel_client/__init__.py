"""fuel_client package

Client for the Fuel model catalog service with a local JSON cache.

Purpose:
    Fetch the paginated model listing, keep it in a cache file under the user
    cache directory, and answer owner/tag/visibility queries over the cached
    snapshot.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`FuelClient`
    - Records and outcomes: :class:`FuelModel`, :class:`RefreshResult`
    - Exceptions: :class:`FuelError`, :class:`ErrorCode`
    - Transports: :class:`HttpxTransport`, :class:`MockTransport`
    - Cache helpers: :func:`resolve_default_location`

Example::

    from datetime import timedelta
    from fuel_client import FuelClient

    client = FuelClient()
    if client.should_refresh(timedelta(days=1)):
        client.blocking_refresh()
    print(client.get_owners())
"""

from .base.cache import resolve_default_location
from .base.client import FuelClient
from .base.errors import ErrorCode, FuelError
from .base.http import HttpxTransport
from .base.interfaces import ProgressSink, Transport
from .base.models import FuelModel, RefreshResult
from .mock import MockTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FuelClient",
    "FuelModel",
    "RefreshResult",
    "ErrorCode",
    "FuelError",
    "HttpxTransport",
    "MockTransport",
    "ProgressSink",
    "Transport",
    "resolve_default_location",
]
