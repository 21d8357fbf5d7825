"""One-class-per-file DTO implementations re-exported by ``base.models``."""

from .fuel_model import FuelModel, decode_catalog, encode_catalog
from .refresh_result import RefreshResult

__all__ = ["FuelModel", "RefreshResult", "decode_catalog", "encode_catalog"]
