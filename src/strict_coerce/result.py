# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Result record returned by the coercion functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from .errors import CoercionError

__all__ = ["Coerced", "NO_VALUE", "NoValue", "FAILED", "success"]

T = TypeVar("T")
D = TypeVar("D")


class NoValue(Enum):
    """Marker type for the value slot of a failed coercion."""

    NO_VALUE = "NO_VALUE"

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE = NoValue.NO_VALUE


@dataclass(frozen=True)
class Coerced(Generic[T]):
    """Outcome of a single coercion.

    ``value`` holds the coerced value when ``ok`` is true (``None`` for an
    or-none success on nullish input) and :data:`NO_VALUE` otherwise. The
    record is truthy exactly when the coercion succeeded, so callers may write
    ``if result := to_int(raw): ...``.
    """

    ok: bool
    value: Union[T, NoValue] = NO_VALUE

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the coerced value or raise :class:`CoercionError`."""
        if not self.ok:
            raise CoercionError("Coercion failed; no value available")
        return self.value  # type: ignore[return-value]

    def value_or(self, default: D) -> Union[T, D]:
        """Return the coerced value, or ``default`` on failure."""
        if not self.ok:
            return default
        return self.value  # type: ignore[return-value]


FAILED: Coerced = Coerced(ok=False)


def success(value: T) -> Coerced[T]:
    return Coerced(ok=True, value=value)
