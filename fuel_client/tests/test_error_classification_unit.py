"""Tests for exception classification and wrapping."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import BaseModel, ValidationError

from fuel_client.base.errors import ErrorCode, FuelError, classify_exception, wrap_exception


class _Strict(BaseModel):
    n: int


def _validation_error() -> ValidationError:
    try:
        _Strict.model_validate({"n": "nope"})
    except ValidationError as e:
        return e
    raise AssertionError("expected ValidationError")


class _StatusError(Exception):
    status_code = 503


@pytest.mark.parametrize(
    "exc, expected",
    [
        (FuelError(code=ErrorCode.CACHE_LOAD, message="bad"), ErrorCode.CACHE_LOAD),
        (json.JSONDecodeError("x", "doc", 0), ErrorCode.DECODE),
        (httpx.ConnectError("refused"), ErrorCode.TRANSPORT),
        (TimeoutError(), ErrorCode.TRANSPORT),
        (_StatusError(), ErrorCode.TRANSPORT),
        (PermissionError("denied"), ErrorCode.PERSISTENCE),
        (RuntimeError("boom"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, expected):
    assert classify_exception(exc) is expected


def test_validation_error_is_decode():
    assert classify_exception(_validation_error()) is ErrorCode.DECODE


def test_wrap_exception_passes_fuel_errors_through():
    err = FuelError(code=ErrorCode.DECODE, message="bad page", page=2)
    assert wrap_exception(err, code=ErrorCode.TRANSPORT) is err


def test_wrap_exception_uses_http_status_message():
    wrapped = wrap_exception(_StatusError("upstream"), url="https://x/models?page=1", page=1)
    assert wrapped.code is ErrorCode.TRANSPORT
    assert wrapped.message == "HTTP 503"
    assert str(wrapped) == "transport https://x/models?page=1#page=1: HTTP 503"


def test_wrap_exception_truncates_long_messages():
    wrapped = wrap_exception(RuntimeError("x" * 1000), code=ErrorCode.TRANSPORT)
    assert wrapped.code is ErrorCode.TRANSPORT
    assert len(wrapped.message) == 300
    assert isinstance(wrapped.raw, RuntimeError)


def test_wrap_exception_empty_message_uses_type_name():
    assert wrap_exception(ConnectionResetError()).message == "ConnectionResetError"


def test_error_code_values_are_stable():
    assert {c.value for c in ErrorCode} >= {
        "transport",
        "decode",
        "exhausted",
        "empty_result",
        "persistence",
        "cache_missing",
        "cache_load",
    }
