# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Project-specific exception hierarchy for value coercion."""

from __future__ import annotations


class StrictCoerceError(Exception):
    """Base class for strict-coerce errors."""


class CoercionError(StrictCoerceError, ValueError):
    """Input value could not be coerced to the requested type."""


class CoercionLogicError(StrictCoerceError, RuntimeError):
    """Contradictory request, such as rejecting booleans while coercing to one."""


class OptionsError(StrictCoerceError, ValueError):
    """Invalid or unknown entry in an option mapping."""
