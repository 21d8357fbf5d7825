"""Fuel CLI (package entrypoint).

Wires argument parsing to the action handler; performs no catalog logic
directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import os
from typing import Optional

from ..base.logging import LOG_LEVEL_ENV, configure_logger
from .cli_actions import handle_sync
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """Parse ``argv`` and run the sync command; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logger(level=args.log_level or os.getenv(LOG_LEVEL_ENV) or "WARNING", json_mode=True)
    return handle_sync(args)


__all__ = ["main"]
