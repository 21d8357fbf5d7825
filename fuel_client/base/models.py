"""
Catalog domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``fuel_client.base.models_parts``.
"""

from .models_parts.fuel_model import FuelModel, decode_catalog, encode_catalog
from .models_parts.refresh_result import RefreshResult

__all__ = [
    "FuelModel",
    "RefreshResult",
    "decode_catalog",
    "encode_catalog",
]
