# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Immutable per-call option records for the coercion functions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from .errors import CoercionError, OptionsError

__all__ = [
    "CoercionOptions",
    "IntOptions",
    "resolve_options",
    "resolve_int_options",
]

logger = logging.getLogger("strict_coerce")

_OptionsT = TypeVar("_OptionsT", bound="CoercionOptions")


@dataclass(frozen=True)
class CoercionOptions:
    """Options understood by every coercion.

    ``reject_bool`` makes boolean inputs fail instead of being converted. It
    is a caller error to set it when coercing *to* a boolean.
    """

    reject_bool: bool = False

    @classmethod
    def from_mapping(cls: Type[_OptionsT], mapping: Mapping[str, Any]) -> _OptionsT:
        """Build options from loosely typed settings such as query parameters.

        Values go through strict boolean coercion, so ``"yes"``, ``"0"`` or
        ``True`` are all accepted. Nullish values keep the field default.
        Unknown keys and values that are not booleans raise :class:`OptionsError`.
        """

        # Local import: coerce depends on this module.
        from .coerce import to_bool_or_none_or_raise

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in mapping if key not in known)
        if unknown:
            raise OptionsError(
                f"Unknown {cls.__name__} option(s): {', '.join(unknown)}"
            )

        kwargs: Dict[str, bool] = {}
        for name, raw in mapping.items():
            try:
                flag = to_bool_or_none_or_raise(raw)
            except CoercionError as exc:
                raise OptionsError(
                    f"Option {name!r} expects a boolean, got {type(raw).__name__}"
                ) from exc
            if flag is not None:
                kwargs[name] = flag

        options = cls(**kwargs)
        logger.debug("Resolved %s from mapping: %s", cls.__name__, options)
        return options


@dataclass(frozen=True)
class IntOptions(CoercionOptions):
    """Options for integer coercion.

    ``round_floats`` rounds finite floats to the nearest integer, ties away
    from zero, instead of rejecting fractional values. ``reject_negative``
    and ``reject_zero`` filter the final candidate whichever input produced it.
    """

    round_floats: bool = False
    reject_negative: bool = False
    reject_zero: bool = False


_DEFAULT_OPTIONS = CoercionOptions()
_DEFAULT_INT_OPTIONS = IntOptions()


def resolve_options(options: Optional[CoercionOptions]) -> CoercionOptions:
    """Return ``options`` or the shared default record."""

    return _DEFAULT_OPTIONS if options is None else options


def resolve_int_options(options: Optional[CoercionOptions]) -> IntOptions:
    """Return integer options, widening a plain :class:`CoercionOptions`."""

    if options is None:
        return _DEFAULT_INT_OPTIONS
    if isinstance(options, IntOptions):
        return options
    return IntOptions(reject_bool=options.reject_bool)
