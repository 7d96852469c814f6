"""Tests for :mod:`strict_coerce.values`."""

from __future__ import annotations

import math
from collections import OrderedDict
from decimal import Decimal

import numpy as np
import pytest

from strict_coerce.values import (
    SupportsText,
    ValueKind,
    classify,
    has_text_representation,
    is_nullish,
    parse_numeric_string,
    round_half_away_from_zero,
)


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (np.bool_(False), ValueKind.BOOL),
        (0, ValueKind.INT),
        (np.uint8(3), ValueKind.INT),
        (1.5, ValueKind.FLOAT),
        (math.nan, ValueKind.FLOAT),
        (np.float32(1.0), ValueKind.FLOAT),
        ("", ValueKind.STRING),
        ("abc", ValueKind.STRING),
        ([1], ValueKind.SEQUENCE),
        ((1,), ValueKind.SEQUENCE),
        (frozenset(), ValueKind.SEQUENCE),
        (b"", ValueKind.SEQUENCE),
        (np.zeros(2), ValueKind.SEQUENCE),
        ({}, ValueKind.MAP),
        (OrderedDict(a=1), ValueKind.MAP),
        (Decimal("1"), ValueKind.OBJECT),
        (object(), ValueKind.OBJECT),
    ],
)
def test_classify(value, kind) -> None:
    assert classify(value) is kind


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("", True), (" ", False), (0, False), (False, False), ([], False)],
)
def test_is_nullish(value, expected) -> None:
    assert is_nullish(value) is expected


def test_has_text_representation(text_object, plain_object) -> None:
    assert has_text_representation(text_object)
    assert not has_text_representation(plain_object)
    assert not has_text_representation(object())


def test_has_text_representation_follows_inheritance(make_text_object) -> None:
    class Derived(make_text_object):
        pass

    assert has_text_representation(Derived("x"))


def test_supports_text_matches_text_capability(text_object, plain_object) -> None:
    assert isinstance(text_object, SupportsText)
    assert not isinstance(plain_object, SupportsText)
    assert not isinstance(object(), SupportsText)


def test_supports_text_accepts_explicit_opt_in() -> None:
    class Registered:
        pass

    class Declared(SupportsText):
        pass

    SupportsText.register(Registered)
    assert isinstance(Registered(), SupportsText)
    assert has_text_representation(Registered())
    assert has_text_representation(Declared())


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("-12", -12),
        ("+7", 7),
        ("  8\n", 8),
        ("2.5", 2.5),
        ("2.", 2.0),
        (".5", 0.5),
        ("1E2", 100.0),
        ("-1e-2", -0.01),
    ],
)
def test_parse_numeric_string(text, expected) -> None:
    parsed = parse_numeric_string(text)
    assert parsed == expected
    assert type(parsed) is type(expected)


@pytest.mark.parametrize(
    "text",
    [
        "",
        " ",
        "abc",
        "nan",
        "inf",
        "-Infinity",
        "0x1f",
        "1_0",
        "1e",
        "--1",
        ".",
        "\u0661\u0662",
        "\uff11\uff12",
        "\u0663.\u0665",
        "\xa07",
    ],
)
def test_parse_numeric_string_rejects(text) -> None:
    assert parse_numeric_string(text) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-0.5, -1),
        (-2.5, -3),
        (2.4999, 2),
        (-0.4, 0),
        (1e20, 10**20),
    ],
)
def test_round_half_away_from_zero(value, expected) -> None:
    assert round_half_away_from_zero(value) == expected
