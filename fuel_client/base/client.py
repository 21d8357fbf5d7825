"""
Fuel catalog client

This shim module re-exports the public class from the one-class-per-file
implementation under ``client_parts``.
"""

from .client_parts.fuel_client import FuelClient

__all__ = ["FuelClient"]
