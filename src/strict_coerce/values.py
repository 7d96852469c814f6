# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Input classification helpers shared by every coercion.

Dynamic inputs are mapped onto a closed set of kinds so each coercion can
branch on :class:`ValueKind` instead of probing types ad hoc. NumPy scalars
are folded into the matching Python kinds.
"""

from __future__ import annotations

import math
import re
from abc import ABC
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Optional, Union

import numpy as np

__all__ = [
    "ValueKind",
    "SupportsText",
    "classify",
    "is_nullish",
    "has_text_representation",
    "parse_numeric_string",
    "round_half_away_from_zero",
]

# ASCII decimal literals only: no nan/inf spellings, hex, digit separators
# or non-ASCII digits and spaces.
_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_NUMERIC_RE = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII
)


class ValueKind(Enum):
    """Closed set of input kinds understood by the coercions."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAP = "map"
    OBJECT = "object"


class SupportsText(ABC):
    """Objects with an author-defined text form.

    Every Python object has ``__str__``, so a class counts as text-capable
    only when it defines its own instead of inheriting ``object.__str__``.
    Classes may also opt in explicitly by subclassing or
    :meth:`SupportsText.register`.
    """

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is SupportsText and _defines_own_str(subclass):
            return True
        return NotImplemented


def _defines_own_str(klass: type) -> bool:
    for base in klass.__mro__:
        if base is object:
            return False
        if "__str__" in vars(base):
            return True
    return False


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of ``value``."""

    if value is None:
        return ValueKind.NULL
    # bool subclasses int, so it must be tested first
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOL
    if isinstance(value, (int, np.integer)):
        return ValueKind.INT
    if isinstance(value, (float, np.floating)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bytes, bytearray, np.ndarray, Set, Sequence)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAP
    return ValueKind.OBJECT


def is_nullish(value: Any) -> bool:
    """Return ``True`` for ``None`` and the empty string."""

    return value is None or (isinstance(value, str) and value == "")


def has_text_representation(value: Any) -> bool:
    """Return ``True`` when ``value`` is a :class:`SupportsText` instance."""

    return isinstance(value, SupportsText)


def parse_numeric_string(text: str) -> Optional[Union[int, float]]:
    """Parse a decimal numeric literal.

    Integer literals are returned as exact ``int`` values so that large
    integers survive unchanged; every other numeric literal is returned as a
    ``float`` (which may be non-finite for huge exponents). Returns ``None``
    for anything that is not a numeric literal.
    """

    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # beyond the interpreter's integer string conversion limit
            return None
    if _NUMERIC_RE.fullmatch(text):
        return float(text)
    return None


def round_half_away_from_zero(value: float) -> int:
    """Round a finite float to the nearest integer, ties away from zero."""

    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for binary floats
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole
