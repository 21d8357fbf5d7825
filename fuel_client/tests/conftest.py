"""Pytest configuration for the Fuel client test suite.

Every test runs with the ``FUEL_*`` environment cleared so a developer's own
settings (token, cache path, config file) never leak into assertions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest

from fuel_client import config as fuel_config
from fuel_client.base.models import FuelModel

_FUEL_ENV = (
    "FUEL_URL",
    "FUEL_TOKEN",
    "FUEL_CACHE_PATH",
    "FUEL_HTTP_TIMEOUT_SECONDS",
    "FUEL_CONFIG_FILE",
    "FUEL_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_fuel_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear client environment variables and the cached config file."""

    for name in _FUEL_ENV:
        monkeypatch.delenv(name, raising=False)
    fuel_config._reset_config_cache_for_tests()
    yield
    fuel_config._reset_config_cache_for_tests()


def record(name: str = "Box", owner: str = "OpenRobotics", **overrides: Any) -> Dict[str, Any]:
    """Return a wire-format record mapping with sensible defaults."""

    data: Dict[str, Any] = {
        "createdAt": "2021-01-01T00:00:00.000Z",
        "updatedAt": "2021-01-02T00:00:00.000Z",
        "name": name,
        "owner": owner,
        "description": f"{name} model",
        "likes": 1,
        "downloads": 10,
        "filesize": 1024,
        "upload_date": "2021-01-01T00:00:00.000Z",
        "modify_date": "2021-01-02T00:00:00.000Z",
        "license_id": 2,
        "license_name": "Creative Commons - Attribution",
        "license_url": "http://creativecommons.org/licenses/by/4.0/",
        "license_image": "https://i.creativecommons.org/l/by/4.0/88x31.png",
        "permission": 0,
        "url_name": name,
        "private": False,
        "tags": [],
        "categories": [],
    }
    data.update(overrides)
    return data


@pytest.fixture()
def make_record() -> Callable[..., Dict[str, Any]]:
    """Factory fixture producing wire-format record mappings."""

    return record


@pytest.fixture()
def make_model() -> Callable[..., FuelModel]:
    """Factory fixture producing validated ``FuelModel`` instances."""

    def _make(name: str = "Box", owner: str = "OpenRobotics", **overrides: Any) -> FuelModel:
        return FuelModel.model_validate(record(name, owner, **overrides))

    return _make


@pytest.fixture()
def cache_file(tmp_path: Path) -> Path:
    """Cache path inside a not-yet-existing directory under ``tmp_path``."""

    return tmp_path / "open-robotics" / "gz-fuel" / "model_cache.json"
