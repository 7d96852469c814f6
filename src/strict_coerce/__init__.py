# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
strict-coerce: conservative coercion of dynamic values.

Converts untrusted inputs such as form fields, query parameters or decoded
JSON into ``str``, ``int``, ``float``, ``bool`` or dictionary keys, refusing
every conversion that would lose information or guess intent.
"""

import logging

from .coerce import (
    to_bool,
    to_bool_or_none,
    to_bool_or_none_or_raise,
    to_bool_or_raise,
    to_dict_key,
    to_dict_key_or_none,
    to_dict_key_or_none_or_raise,
    to_dict_key_or_raise,
    to_float,
    to_float_or_none,
    to_float_or_none_or_raise,
    to_float_or_raise,
    to_int,
    to_int_or_none,
    to_int_or_none_or_raise,
    to_int_or_raise,
    to_string,
    to_string_or_none,
    to_string_or_none_or_raise,
    to_string_or_raise,
)
from .errors import CoercionError, CoercionLogicError, OptionsError, StrictCoerceError
from .options import CoercionOptions, IntOptions
from .result import FAILED, NO_VALUE, Coerced, NoValue
from .values import SupportsText, ValueKind, classify, is_nullish

logger = logging.getLogger("strict_coerce")
logger.addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Coerced",
    "CoercionError",
    "CoercionLogicError",
    "CoercionOptions",
    "FAILED",
    "IntOptions",
    "NO_VALUE",
    "NoValue",
    "OptionsError",
    "StrictCoerceError",
    "SupportsText",
    "ValueKind",
    "classify",
    "is_nullish",
    "to_bool",
    "to_bool_or_none",
    "to_bool_or_none_or_raise",
    "to_bool_or_raise",
    "to_dict_key",
    "to_dict_key_or_none",
    "to_dict_key_or_none_or_raise",
    "to_dict_key_or_raise",
    "to_float",
    "to_float_or_none",
    "to_float_or_none_or_raise",
    "to_float_or_raise",
    "to_int",
    "to_int_or_none",
    "to_int_or_none_or_raise",
    "to_int_or_raise",
    "to_string",
    "to_string_or_none",
    "to_string_or_none_or_raise",
    "to_string_or_raise",
]
