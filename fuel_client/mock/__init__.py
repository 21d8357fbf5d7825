"""Offline mock transport for the Fuel client."""

from .client import MockTransport, load_fixture_catalog

__all__ = ["MockTransport", "load_fixture_catalog"]
