"""CLI action handlers for fuel-cli.

Purpose
-------
Load the cache, apply the staleness policy, refresh when due, and print the
requested projections. This module has no top-level side effects and is safe
to import in tests.

Fallback & Error Semantics
--------------------------
A failed refresh is not fatal when a cached snapshot is still held; the
report says so and the command exits 0. Exit code 1 means no snapshot is
available at all.
"""

from __future__ import annotations

import argparse
import json
from datetime import timedelta
from typing import Any, Callable, Dict, List, Optional

from ..base.client import FuelClient
from ..base.interfaces import Transport
from ..base.models import FuelModel, RefreshResult


def build_client(args: argparse.Namespace, transport: Optional[Transport] = None) -> FuelClient:
    """Create a client from parsed CLI arguments."""
    return FuelClient(url=args.url, cache_path=args.cache_path, token=args.token, transport=transport)


def _threshold(seconds: int) -> Optional[timedelta]:
    return None if seconds < 0 else timedelta(seconds=seconds)


def plan_refresh(client: FuelClient, threshold_seconds: int, force: bool = False) -> Dict[str, Any]:
    """Return the cache status and whether a refresh is due, without network I/O."""
    last = client.last_updated()
    return {
        "cache_path": str(client.cache_path) if client.cache_path else None,
        "last_updated": last.isoformat() if last else None,
        "cached_count": len(client.models) if client.models is not None else None,
        "refresh_due": force or client.should_refresh(_threshold(threshold_seconds)),
    }


def _selected_models(client: FuelClient, args: argparse.Namespace) -> Optional[List[FuelModel]]:
    """Apply the --owner/--tag/--private filters in sequence; ``None`` when nothing was asked."""
    if args.owner is None and args.tag is None and args.private is None:
        return None
    selected = client.models
    if args.owner is not None:
        selected = client.models_by_owner(args.owner, selected)
    if args.tag is not None:
        selected = client.models_by_tag(args.tag, selected)
    if args.private is not None:
        selected = client.models_by_private(args.private == "yes", selected)
    return selected


def build_report(client: FuelClient, args: argparse.Namespace, plan: Dict[str, Any], result: Optional[RefreshResult]) -> Dict[str, Any]:
    """Assemble the JSON-serializable report printed by the CLI."""
    report: Dict[str, Any] = dict(plan)
    report["refresh"] = result.to_dict() if result is not None else None
    report["count"] = len(client.models) if client.models is not None else None
    if args.owners:
        report["owners"] = client.get_owners()
    if args.tags:
        report["tags"] = client.get_tags()
    selected = _selected_models(client, args)
    if selected is not None or any(v is not None for v in (args.owner, args.tag, args.private)):
        report["models"] = [f"{m.owner}/{m.name}" for m in selected or []]
    return report


def _print_plain(report: Dict[str, Any], out: Callable[[str], None]) -> None:
    out(f"cache: {report['cache_path'] or '-'} (last updated {report['last_updated'] or 'never'})")
    refresh = report.get("refresh")
    if refresh is None:
        out("refresh: not due")
    elif refresh["ok"]:
        persisted = {True: "saved", False: "not saved", None: "not persisted"}[refresh["persisted"]]
        out(
            f"refresh: OK count={refresh['count']} pages={refresh['pages_fetched']} "
            f"time={refresh['duration_ms']:.1f}ms cache {persisted}"
            + (f" err={refresh['persist_error']}" if refresh["persist_error"] else "")
        )
    else:
        out(f"refresh: FAIL stop={refresh['stop_reason']}" + (f" err={refresh['stop_error']}" if refresh["stop_error"] else ""))
    out(f"models: {report['count'] if report['count'] is not None else 'none'}")
    for key in ("owners", "tags", "models"):
        if key in report:
            values = report[key] or []
            out(f"\n{key} ({len(values)}):")
            for v in values:
                out(f"- {v}")


def handle_sync(args: argparse.Namespace, transport: Optional[Transport] = None, out: Callable[[str], None] = print) -> int:
    """Run the sync-and-query command.

    Returns
    -------
    int
        0 when a snapshot is available afterwards, 1 otherwise.
    """
    client = build_client(args, transport=transport)
    plan = plan_refresh(client, args.threshold_seconds, force=args.force)
    result: Optional[RefreshResult] = None
    if plan["refresh_due"]:
        result = client.blocking_refresh(persist=args.persist)
    report = build_report(client, args, plan, result)
    if args.json:
        out(json.dumps(report, indent=2))
    else:
        _print_plain(report, out)
    return 0 if client.models is not None else 1


__all__ = ["build_client", "plan_refresh", "build_report", "handle_sync"]
