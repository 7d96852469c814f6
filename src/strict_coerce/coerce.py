# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Strict coercion of dynamic values to ``str``, ``int``, ``float``, ``bool``
and dictionary keys.

Each ``to_*`` function returns a :class:`~strict_coerce.result.Coerced`
record and never raises for bad input data. Every function has three
derived forms:

``to_*_or_none``
    nullish input (``None`` or ``""``) succeeds with ``None``.
``to_*_or_raise`` / ``to_*_or_none_or_raise``
    return the bare value and raise :class:`CoercionError` on failure.

A conversion succeeds only when it is exact and unambiguous. Fractional
floats are never truncated unless :class:`IntOptions` opts into rounding.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

from .errors import CoercionError, CoercionLogicError
from .options import (
    CoercionOptions,
    IntOptions,
    resolve_int_options,
    resolve_options,
)
from .result import FAILED, Coerced, success
from .values import (
    ValueKind,
    classify,
    has_text_representation,
    is_nullish,
    parse_numeric_string,
    round_half_away_from_zero,
)

__all__ = [
    "to_string",
    "to_string_or_none",
    "to_string_or_raise",
    "to_string_or_none_or_raise",
    "to_int",
    "to_int_or_none",
    "to_int_or_raise",
    "to_int_or_none_or_raise",
    "to_float",
    "to_float_or_none",
    "to_float_or_raise",
    "to_float_or_none_or_raise",
    "to_bool",
    "to_bool_or_none",
    "to_bool_or_raise",
    "to_bool_or_none_or_raise",
    "to_dict_key",
    "to_dict_key_or_none",
    "to_dict_key_or_raise",
    "to_dict_key_or_none_or_raise",
]

logger = logging.getLogger("strict_coerce")

DictKey = Union[int, str]

_TRUE_WORDS = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "f", "no", "n", "off"})

_NULL_SUCCESS: Coerced[Any] = success(None)


def _unwrap_or_raise(result: Coerced[Any], target: str, value: Any) -> Any:
    if not result.ok:
        logger.debug(
            "Unable to coerce %s value to %s", type(value).__name__, target
        )
        raise CoercionError(f"Unable to coerce value to {target}")
    return result.value


# --- string ------------------------------------------------------------------


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return str(value)


def to_string(value: Any, options: Optional[CoercionOptions] = None) -> Coerced[str]:
    """Coerce ``value`` to ``str``.

    Nullish input becomes ``""``. Booleans become ``"true"``/``"false"``.
    Numbers use their standard text form, with ``"NAN"``, ``"INF"`` and
    ``"-INF"`` for non-finite floats. Sequences and mappings are never
    serialized; objects succeed only when their class defines ``__str__``.
    """

    opts = resolve_options(options)
    if is_nullish(value):
        return success("")

    kind = classify(value)
    if kind is ValueKind.BOOL:
        if opts.reject_bool:
            return FAILED
        return success("true" if value else "false")
    if kind is ValueKind.INT:
        return success(str(int(value)))
    if kind is ValueKind.FLOAT:
        return success(_float_text(value))
    if kind is ValueKind.STRING:
        return success(str(value))
    if kind is ValueKind.OBJECT and has_text_representation(value):
        return success(str(value))
    return FAILED


def to_string_or_none(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[Optional[str]]:
    if is_nullish(value):
        return _NULL_SUCCESS
    return to_string(value, options)


def to_string_or_raise(value: Any, options: Optional[CoercionOptions] = None) -> str:
    return _unwrap_or_raise(to_string(value, options), "string", value)


def to_string_or_none_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> Optional[str]:
    return _unwrap_or_raise(to_string_or_none(value, options), "string", value)


# --- integer -----------------------------------------------------------------


def _int_candidate(value: Any, kind: ValueKind, opts: IntOptions) -> Optional[int]:
    if kind is ValueKind.INT:
        return int(value)
    if kind is ValueKind.BOOL:
        if opts.reject_bool:
            return None
        return 1 if value else 0
    if kind is ValueKind.STRING:
        parsed = parse_numeric_string(value)
        if parsed is None:
            return None
        if isinstance(parsed, int):
            return parsed
        value = parsed
    elif kind is not ValueKind.FLOAT:
        return None

    number = float(value)
    if not math.isfinite(number):
        return None
    if opts.round_floats:
        return round_half_away_from_zero(number)
    if not number.is_integer():
        return None
    return int(number)


def to_int(value: Any, options: Optional[CoercionOptions] = None) -> Coerced[int]:
    """Coerce ``value`` to ``int`` without losing information.

    Integers pass through, booleans map to ``1``/``0``, and floats or numeric
    strings succeed only when they carry no fractional part, unless
    ``IntOptions.round_floats`` is set. ``reject_negative`` and
    ``reject_zero`` then filter the result regardless of the input type.

    Pure integer literals such as ``"9007199254740993"`` are parsed exactly.
    Any other numeric literal (``"12345678901234567.0"``, ``"1e20"``) is read
    as a float first, so it carries float precision.
    """

    opts = resolve_int_options(options)
    if is_nullish(value):
        return FAILED

    candidate = _int_candidate(value, classify(value), opts)
    if candidate is None:
        return FAILED
    if opts.reject_negative and candidate < 0:
        return FAILED
    if opts.reject_zero and candidate == 0:
        return FAILED
    return success(candidate)


def to_int_or_none(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[Optional[int]]:
    if is_nullish(value):
        return _NULL_SUCCESS
    return to_int(value, options)


def to_int_or_raise(value: Any, options: Optional[CoercionOptions] = None) -> int:
    return _unwrap_or_raise(to_int(value, options), "integer", value)


def to_int_or_none_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> Optional[int]:
    return _unwrap_or_raise(to_int_or_none(value, options), "integer", value)


# --- float -------------------------------------------------------------------


def to_float(value: Any, options: Optional[CoercionOptions] = None) -> Coerced[float]:
    """Coerce ``value`` to a finite ``float``.

    NaN and infinities are rejected even when ``value`` is already a float,
    as are integers too large to represent.
    """

    opts = resolve_options(options)
    if is_nullish(value):
        return FAILED

    kind = classify(value)
    if kind is ValueKind.BOOL:
        if opts.reject_bool:
            return FAILED
        return success(1.0 if value else 0.0)
    if kind is ValueKind.STRING:
        value = parse_numeric_string(value)
        if value is None:
            return FAILED
    elif kind not in (ValueKind.INT, ValueKind.FLOAT):
        return FAILED

    try:
        number = float(value)
    except OverflowError:
        return FAILED
    if not math.isfinite(number):
        return FAILED
    return success(number)


def to_float_or_none(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[Optional[float]]:
    if is_nullish(value):
        return _NULL_SUCCESS
    return to_float(value, options)


def to_float_or_raise(value: Any, options: Optional[CoercionOptions] = None) -> float:
    return _unwrap_or_raise(to_float(value, options), "float", value)


def to_float_or_none_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> Optional[float]:
    return _unwrap_or_raise(to_float_or_none(value, options), "float", value)


# --- boolean -----------------------------------------------------------------


def _check_bool_options(options: Optional[CoercionOptions]) -> None:
    if options is not None and options.reject_bool:
        raise CoercionLogicError(
            "reject_bool makes no sense when coercing to boolean"
        )


def to_bool(value: Any, options: Optional[CoercionOptions] = None) -> Coerced[bool]:
    """Coerce ``value`` to ``bool`` using a closed vocabulary.

    Numbers succeed only when equal to ``0`` or ``1``. Strings are matched
    case-insensitively against ``1 true t yes y on`` and
    ``0 false f no n off``; anything else fails.

    Raises
    ------
    CoercionLogicError
        If ``options.reject_bool`` is set, whatever ``value`` is.
    """

    _check_bool_options(options)
    if is_nullish(value):
        return FAILED

    kind = classify(value)
    if kind is ValueKind.BOOL:
        return success(bool(value))
    if kind in (ValueKind.INT, ValueKind.FLOAT):
        if value == 0:
            return success(False)
        if value == 1:
            return success(True)
        return FAILED
    if kind is ValueKind.STRING:
        word = value.lower()
        if word in _TRUE_WORDS:
            return success(True)
        if word in _FALSE_WORDS:
            return success(False)
    return FAILED


def to_bool_or_none(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[Optional[bool]]:
    _check_bool_options(options)
    if is_nullish(value):
        return _NULL_SUCCESS
    return to_bool(value, options)


def to_bool_or_raise(value: Any, options: Optional[CoercionOptions] = None) -> bool:
    return _unwrap_or_raise(to_bool(value, options), "boolean", value)


def to_bool_or_none_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> Optional[bool]:
    return _unwrap_or_raise(to_bool_or_none(value, options), "boolean", value)


# --- dictionary key ----------------------------------------------------------


def to_dict_key(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[DictKey]:
    """Coerce ``value`` to an ``int`` or non-empty ``str`` usable as a key.

    Anything with an exact integer form (``1.0``, ``"1"``) becomes an ``int``
    key; other text-capable values (``2.5``, ``"2.5"``) become ``str`` keys.
    Booleans, non-finite floats and the empty string always fail. ``options``
    is accepted for symmetry; both lookups run with default options.
    """

    if is_nullish(value):
        return FAILED

    kind = classify(value)
    if kind is ValueKind.BOOL:
        return FAILED
    if kind is ValueKind.FLOAT and not math.isfinite(value):
        return FAILED

    as_int = to_int(value)
    if as_int:
        return as_int
    as_text = to_string(value)
    if not as_text or as_text.value == "":
        return FAILED
    return as_text


def to_dict_key_or_none(
    value: Any, options: Optional[CoercionOptions] = None
) -> Coerced[Optional[DictKey]]:
    if is_nullish(value):
        return _NULL_SUCCESS
    return to_dict_key(value, options)


def to_dict_key_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> DictKey:
    return _unwrap_or_raise(to_dict_key(value, options), "dictionary key", value)


def to_dict_key_or_none_or_raise(
    value: Any, options: Optional[CoercionOptions] = None
) -> Optional[DictKey]:
    return _unwrap_or_raise(
        to_dict_key_or_none(value, options), "dictionary key", value
    )
