"""Tests that the examples in tabcal's docstrings are correct."""

from __future__ import annotations

import doctest
import importlib

import pytest

MODULES = [
    "tabcal",
    "tabcal._internal.calendar",
    "tabcal._internal.validation",
    "tabcal.calendars",
    "tabcal.calendars.french",
    "tabcal.calendars.gregorian",
    "tabcal.calendars.islamic",
    "tabcal.calendars.julian",
    "tabcal.calendars.tabular",
    "tabcal.core.date",
    "tabcal.units.weekday",
]


@pytest.mark.parametrize("name", MODULES)
def test_docstring_examples(name: str) -> None:
    """Every example in the module's docstrings produces its shown output."""
    module = importlib.import_module(name)
    result = doctest.testmod(module, verbose=False)

    assert result.attempted > 0
    assert result.failed == 0
