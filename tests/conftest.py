# Copyright (c) 2025 strict-coerce Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pytest configuration and fixtures for strict-coerce tests."""

import logging

import pytest


class TextObject:
    """Object with an author-defined text form."""

    def __init__(self, text: str = "foo") -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text


class PlainObject:
    """Object relying on the inherited ``object.__str__``."""


@pytest.fixture
def text_object() -> TextObject:
    return TextObject()


@pytest.fixture
def make_text_object():
    return TextObject


@pytest.fixture
def plain_object() -> PlainObject:
    return PlainObject()


@pytest.fixture
def coerce_debug_logs(caplog):
    """Capture DEBUG records from the package logger."""
    caplog.set_level(logging.DEBUG, logger="strict_coerce")
    return caplog
