"""Calendar definitions and SDN conversion functions.

This module provides the tabular calendars and the flat conversion API:
    - TABULAR_ISLAMIC: sdn_to_islamic, islamic_to_sdn, islamic_month_name
    - FRENCH_REPUBLICAN: sdn_to_french, french_to_sdn, french_month_name
    - Gregorian and Julian reference calendars

Examples:
    >>> from tabcal.calendars import get_calendar
    >>> get_calendar("french").sdn_to_date(2375840)
    CalendarDate(year=1, month=1, day=1)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from tabcal.calendars.french import (
    FRENCH_REPUBLICAN,
    french_month_name,
    french_to_sdn,
    sdn_to_french,
)
from tabcal.calendars.gregorian import gregorian_to_sdn, sdn_to_gregorian
from tabcal.calendars.islamic import (
    TABULAR_ISLAMIC,
    islamic_month_name,
    islamic_to_sdn,
    sdn_to_islamic,
)
from tabcal.calendars.julian import julian_to_sdn, sdn_to_julian
from tabcal.calendars.tabular import INVALID_DATE, CalendarDate, TabularCalendar
from tabcal.errors import ValidationError

CALENDARS: Mapping[str, TabularCalendar] = MappingProxyType(
    {
        TABULAR_ISLAMIC.name: TABULAR_ISLAMIC,
        FRENCH_REPUBLICAN.name: FRENCH_REPUBLICAN,
    }
)


def get_calendar(name: str) -> TabularCalendar:
    """Look up a tabular calendar by name (case insensitive).

    Raises:
        ValidationError: If no calendar has that name.
    """
    try:
        return CALENDARS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(CALENDARS))
        raise ValidationError(
            f"unknown calendar {name!r}, expected one of: {known}"
        ) from None


__all__ = [
    "CALENDARS",
    "CalendarDate",
    "FRENCH_REPUBLICAN",
    "INVALID_DATE",
    "TABULAR_ISLAMIC",
    "TabularCalendar",
    "french_month_name",
    "french_to_sdn",
    "get_calendar",
    "gregorian_to_sdn",
    "islamic_month_name",
    "islamic_to_sdn",
    "julian_to_sdn",
    "sdn_to_french",
    "sdn_to_gregorian",
    "sdn_to_islamic",
    "sdn_to_julian",
]
