"""Tests for :mod:`strict_coerce.result`."""

from __future__ import annotations

import dataclasses

import pytest

from strict_coerce.errors import CoercionError
from strict_coerce.result import FAILED, NO_VALUE, Coerced, success


def test_success_record_is_truthy() -> None:
    result = success(3)
    assert result
    assert result.ok
    assert result.value == 3
    assert result.unwrap() == 3
    assert result.value_or(9) == 3


def test_success_with_none_is_still_a_success() -> None:
    result = success(None)
    assert result
    assert result.unwrap() is None
    assert result.value_or("fallback") is None


def test_failed_record() -> None:
    assert not FAILED
    assert FAILED.value is NO_VALUE
    assert FAILED == Coerced(ok=False)
    assert FAILED.value_or("fallback") == "fallback"
    with pytest.raises(CoercionError):
        FAILED.unwrap()


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        FAILED.value = 1  # type: ignore[misc]


def test_no_value_repr() -> None:
    assert repr(NO_VALUE) == "NO_VALUE"
    assert repr(FAILED) == "Coerced(ok=False, value=NO_VALUE)"
