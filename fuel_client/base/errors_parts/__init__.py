"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `fuel_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .fuel_error import FuelError
from .classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "FuelError", "classify_exception", "wrap_exception"]
