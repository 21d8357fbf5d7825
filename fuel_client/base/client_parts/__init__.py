"""One-class-per-file client implementation re-exported by ``base.client``."""

from .fuel_client import FuelClient

__all__ = ["FuelClient"]
