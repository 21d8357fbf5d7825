"""Tests for the catalog cache file store."""

from __future__ import annotations

import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

from fuel_client.base import cache
from fuel_client.base.errors import ErrorCode, FuelError


def test_persist_then_load_roundtrips(cache_file, make_model):
    models = [make_model("A", tags=["t1", "t2"]), make_model("B", owner="bob", private=True)]
    cache.persist(cache_file, models)
    assert cache.load(cache_file) == models


def test_persist_creates_parent_dirs_and_overwrites(cache_file, make_model):
    assert not cache_file.parent.exists()
    cache.persist(cache_file, [make_model("A"), make_model("B")])
    cache.persist(cache_file, [make_model("C")])
    loaded = cache.load(cache_file)
    assert [m.name for m in loaded] == ["C"]
    assert not cache_file.with_name(cache_file.name + ".tmp").exists()


def test_persisted_file_is_pretty_json_array(cache_file, make_model):
    cache.persist(cache_file, [make_model("A")])
    text = cache_file.read_text(encoding="utf-8")
    assert text.startswith("[\n")
    assert json.loads(text)[0]["createdAt"] == "2021-01-01T00:00:00.000Z"


def test_persist_failure_raises_persistence_error(tmp_path, make_model):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(FuelError) as ei:
        cache.persist(blocker / "model_cache.json", [make_model()])
    assert ei.value.code is ErrorCode.PERSISTENCE


def test_load_missing_file_returns_none(cache_file):
    assert cache.load(cache_file) is None


def test_load_none_path_returns_none():
    assert cache.load(None) is None


def test_load_corrupt_file_returns_none(cache_file):
    cache_file.parent.mkdir(parents=True)
    cache_file.write_text("[{ broken", encoding="utf-8")
    assert cache.load(cache_file) is None


def test_load_schema_mismatch_returns_none(cache_file):
    cache_file.parent.mkdir(parents=True)
    cache_file.write_text(json.dumps([{"name": "only-a-name"}]), encoding="utf-8")
    assert cache.load(cache_file) is None


def test_last_modified_absent_and_present(cache_file, make_model):
    assert cache.last_modified(cache_file) is None
    assert cache.last_modified(None) is None
    cache.persist(cache_file, [make_model()])
    stamp = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc).timestamp()
    os.utime(cache_file, (stamp, stamp))
    assert cache.last_modified(cache_file) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout applies to Linux/BSD")
def test_default_location_honours_xdg_cache_home(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
    assert cache.resolve_default_location() == tmp_path / "open-robotics" / "gz-fuel" / "model_cache.json"


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout applies to Linux/BSD")
def test_default_location_falls_back_to_home_cache(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert cache.resolve_default_location() == tmp_path / ".cache" / "open-robotics" / "gz-fuel" / "model_cache.json"


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout applies to Linux/BSD")
def test_default_location_absent_when_home_unresolvable(monkeypatch):
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)

    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))
    assert cache.resolve_default_location() is None
