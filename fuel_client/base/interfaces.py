"""
Client boundary interfaces (Protocols).

This module re-exports Protocols split into single-class modules under
``fuel_client.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ProgressSink, Transport

__all__ = ["ProgressSink", "Transport"]
