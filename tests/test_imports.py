"""Tests for tabcal package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_tabcal() -> None:
    """Import tabcal package succeeds."""
    import tabcal

    assert hasattr(tabcal, "__version__")
    assert tabcal.__version__ == "0.1.0"


def test_import_calendars_module() -> None:
    """Import tabcal.calendars submodule succeeds."""
    from tabcal import calendars

    assert hasattr(calendars, "__all__")


def test_import_core_module() -> None:
    """Import tabcal.core submodule succeeds."""
    from tabcal import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import tabcal.units submodule succeeds."""
    from tabcal import units

    assert hasattr(units, "__all__")


def test_import_internal_module() -> None:
    """Import tabcal._internal submodule succeeds."""
    from tabcal import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Exception classes are importable from the top-level package."""
    from tabcal import CalendarTableError, TabcalError, ValidationError

    assert issubclass(ValidationError, TabcalError)
    assert issubclass(CalendarTableError, TabcalError)


def test_public_api_names_resolve() -> None:
    """Every name in tabcal.__all__ is an attribute of the package."""
    import tabcal

    for name in tabcal.__all__:
        assert hasattr(tabcal, name), name


def test_flat_api() -> None:
    """The flat conversion functions work from the top-level package."""
    from tabcal import french_month_name, islamic_to_sdn, sdn_to_islamic

    assert sdn_to_islamic(1948440) == (1, 1, 1)
    assert sdn_to_islamic(1948439) == (0, 0, 0)
    assert sdn_to_islamic(1948440 + 354) == (2, 1, 1)
    assert islamic_to_sdn(1, 1, 1) == 1948440
    assert french_month_name(1) == "Vendemiaire"
    assert french_month_name(0) == ""
    assert french_month_name(13) == "Extra"


def test_flat_functions_are_documented() -> None:
    """Every flat conversion function carries a docstring."""
    from tabcal import calendars

    for name in calendars.__all__:
        obj = getattr(calendars, name)
        if callable(obj) and not isinstance(obj, type):
            assert obj.__doc__, name
