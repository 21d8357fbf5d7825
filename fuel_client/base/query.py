"""Read-only projections over a catalog snapshot.

Every function takes the snapshot explicitly, never mutates it and returns a
new list. Filters keep the relative order of matching records.

Distinct owners/tags are de-duplicated case-insensitively, keeping the
spelling seen first, and sorted by their lowercase form: owners
``["Bob", "alice", "Alice"]`` project to ``["alice", "Bob"]``. Case variants
of one owner or tag are deliberately collapsed; de-duplicating on the exact
string would return ``["alice", "Alice", "Bob"]`` instead.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .models import FuelModel


def by_owner(models: Sequence[FuelModel], owner: str) -> List[FuelModel]:
    """Return records whose ``owner`` equals ``owner`` exactly."""
    return [m for m in models if m.owner == owner]


def by_private(models: Sequence[FuelModel], private: bool) -> List[FuelModel]:
    """Return records whose ``private`` flag equals ``private``."""
    return [m for m in models if m.private == private]


def by_tag(models: Sequence[FuelModel], tag: str) -> List[FuelModel]:
    """Return records carrying ``tag`` (exact match) among their tags."""
    return [m for m in models if tag in m.tags]


def _unique_sorted(values: Iterable[str]) -> List[str]:
    first_seen: Dict[str, str] = {}
    for value in values:
        first_seen.setdefault(value.lower(), value)
    return [first_seen[key] for key in sorted(first_seen)]


def distinct_owners(models: Sequence[FuelModel]) -> List[str]:
    """Return unique owners sorted case-insensitively."""
    return _unique_sorted(m.owner for m in models)


def distinct_tags(models: Sequence[FuelModel]) -> List[str]:
    """Return unique tags across all records sorted case-insensitively."""
    return _unique_sorted(tag for m in models for tag in m.tags)


__all__ = [
    "by_owner",
    "by_private",
    "by_tag",
    "distinct_owners",
    "distinct_tags",
]
