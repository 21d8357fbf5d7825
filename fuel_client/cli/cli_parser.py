"""CLI parser construction for fuel-cli.

This module wires argument shapes but contains no execution logic. The
handler lives in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ..config.defaults import FUEL_CLI_DEFAULT_THRESHOLD_SECONDS


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the single sync-and-query command. No I/O occurs here.
    """
    p = argparse.ArgumentParser(
        prog="fuel-cli",
        description="Synchronize the local Fuel model cache and query it",
    )
    p.add_argument("--url", default=None, help="Service base URL (default: FUEL_URL or the public Fuel server)")
    p.add_argument("--token", default=None, help="Private token sent as the Private-token header")
    p.add_argument("--cache-path", default=None, help="Cache file override")
    p.add_argument(
        "--threshold-seconds",
        type=int,
        default=FUEL_CLI_DEFAULT_THRESHOLD_SECONDS,
        help=f"Refresh when the cache is older than this (default {FUEL_CLI_DEFAULT_THRESHOLD_SECONDS}); "
        "a negative value trusts any existing cache",
    )
    p.add_argument("--force", action="store_true", help="Refresh regardless of cache age")
    p.add_argument("--no-persist", dest="persist", action="store_false", help="Do not write the cache file")
    p.add_argument("--owners", action="store_true", help="List distinct owners")
    p.add_argument("--tags", action="store_true", help="List distinct tags")
    p.add_argument("--owner", default=None, help="List models owned by NAME")
    p.add_argument("--tag", default=None, help="List models tagged NAME")
    p.add_argument("--private", choices=("yes", "no"), default=None, help="Restrict listed models by visibility")
    p.add_argument("--json", action="store_true", help="Output a JSON report only")
    p.add_argument("--log-level", default=None, help="Logging level (default: FUEL_LOG_LEVEL or WARNING)")
    return p


__all__ = ["build_parser"]
