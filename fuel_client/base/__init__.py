"""
Fuel client base package

Exports the catalog DTOs, error taxonomy, boundary interfaces and the client:
- Models: ``FuelModel`` records and ``RefreshResult`` outcomes
- Errors: ``ErrorCode`` / ``FuelError``
- Interfaces: ``Transport`` and ``ProgressSink``
- Client: ``FuelClient`` (staleness policy, paginated refresh, queries)
"""

from .errors import ErrorCode, FuelError, classify_exception
from .interfaces import ProgressSink, Transport
from .models import FuelModel, RefreshResult, decode_catalog, encode_catalog
from .timeouts import TimeoutConfig, get_timeout_config
from .http import HttpxTransport
from .client import FuelClient

__all__ = [
    "ErrorCode",
    "FuelError",
    "classify_exception",
    "ProgressSink",
    "Transport",
    "FuelModel",
    "RefreshResult",
    "decode_catalog",
    "encode_catalog",
    "TimeoutConfig",
    "get_timeout_config",
    "HttpxTransport",
    "FuelClient",
]
