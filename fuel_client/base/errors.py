"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``fuel_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.fuel_error import FuelError
from .errors_parts.classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "FuelError", "classify_exception", "wrap_exception"]
