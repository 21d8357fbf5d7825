"""Tests for the FuelModel record and the catalog JSON codec."""

from __future__ import annotations

import json

import pytest

from fuel_client.base.errors import ErrorCode, FuelError
from fuel_client.base.models import FuelModel, decode_catalog, encode_catalog


def test_decode_maps_wire_names(make_record):
    body = json.dumps([make_record("Ambulance", tags=["vehicle"])])
    models = decode_catalog(body)
    assert len(models) == 1
    m = models[0]
    assert m.name == "Ambulance"
    assert m.created_at == "2021-01-01T00:00:00.000Z"
    assert m.updated_at == "2021-01-02T00:00:00.000Z"
    assert m.tags == ["vehicle"]


def test_tags_and_categories_default_to_empty(make_record):
    raw = make_record()
    del raw["tags"]
    del raw["categories"]
    (m,) = decode_catalog(json.dumps([raw]))
    assert m.tags == []
    assert m.categories == []


def test_unknown_keys_are_ignored(make_record):
    (m,) = decode_catalog(json.dumps([make_record(thumbnail_url="x.png")]))
    assert m.name == "Box"


def test_decode_empty_array_is_empty_list():
    assert decode_catalog(b"[]") == []


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"models": []}',
        b"[1, 2]",
    ],
)
def test_malformed_bodies_raise_decode_error(body):
    with pytest.raises(FuelError) as ei:
        decode_catalog(body, url="https://fuel.example/models?page=3", page=3)
    assert ei.value.code is ErrorCode.DECODE
    assert ei.value.page == 3


def test_missing_required_field_is_decode_error(make_record):
    raw = make_record()
    del raw["owner"]
    with pytest.raises(FuelError) as ei:
        decode_catalog(json.dumps([raw]))
    assert ei.value.code is ErrorCode.DECODE


def test_negative_counter_is_decode_error(make_record):
    with pytest.raises(FuelError):
        decode_catalog(json.dumps([make_record(likes=-1)]))


@pytest.mark.parametrize(
    "field, value",
    [
        ("private", "yes"),
        ("private", 1),
        ("likes", "5"),
        ("license_id", 2.0),
        ("downloads", True),
        ("tags", "vehicle"),
        ("name", 42),
    ],
)
def test_wrongly_typed_value_is_decode_error(make_record, field, value):
    with pytest.raises(FuelError) as ei:
        decode_catalog(json.dumps([make_record(**{field: value})]))
    assert ei.value.code is ErrorCode.DECODE


def test_equality_is_structural(make_model):
    assert make_model("A", tags=["x"]) == make_model("A", tags=["x"])
    assert make_model("A", tags=["x"]) != make_model("A", tags=["y"])


def test_records_are_immutable(make_model):
    m = make_model()
    with pytest.raises(Exception):
        m.name = "Other"


def test_encode_is_pretty_printed_with_wire_names(make_model):
    text = encode_catalog([make_model("A")]).decode("utf-8")
    assert text.startswith("[\n  {")
    data = json.loads(text)
    assert "createdAt" in data[0] and "created_at" not in data[0]
    assert data[0]["updatedAt"] == "2021-01-02T00:00:00.000Z"


def test_to_dict_uses_wire_names(make_model):
    d = make_model().to_dict()
    assert d["createdAt"] == "2021-01-01T00:00:00.000Z"
    assert d["private"] is False


def test_model_validate_accepts_field_names(make_record):
    raw = make_record()
    raw["created_at"] = raw.pop("createdAt")
    raw["updated_at"] = raw.pop("updatedAt")
    assert FuelModel.model_validate(raw).created_at == "2021-01-01T00:00:00.000Z"
