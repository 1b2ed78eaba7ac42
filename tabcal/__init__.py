"""tabcal: Tabular calendar conversions over Serial Day Numbers.

tabcal converts between Serial Day Numbers (SDN, the Julian Day Number
of a civil day) and dates in arithmetic calendars whose leap years
follow a fixed cycle. Conversions are table driven: an epoch offset is
split into cycles, then located in cumulative year and month tables.

Calendars:
    TABULAR_ISLAMIC: 30-year cycle, 354/355-day years
    FRENCH_REPUBLICAN: 4-year cycle, years 1-14 with an "Extra" month
    Gregorian and Julian: proleptic reference calendars

Conversion Functions:
    sdn_to_islamic / islamic_to_sdn / islamic_month_name
    sdn_to_french / french_to_sdn / french_month_name
    sdn_to_gregorian / gregorian_to_sdn
    sdn_to_julian / julian_to_sdn
    day_of_week

Out-of-range input is not an error: date results are ``(0, 0, 0)`` and
SDN results are ``0``.

Exceptions:
    TabcalError: Base exception
    ValidationError: Caller contract violation
    CalendarTableError: Corrupted or exhausted boundary table

Example:
    >>> from tabcal import sdn_to_islamic, islamic_to_sdn
    >>> sdn_to_islamic(1948440 + 354)
    CalendarDate(year=2, month=1, day=1)
    >>> islamic_to_sdn(2, 1, 1)
    1948794
"""

from __future__ import annotations

__version__ = "0.1.0"

# Calendars and conversion functions
from tabcal.calendars import (
    FRENCH_REPUBLICAN,
    TABULAR_ISLAMIC,
    CalendarDate,
    TabularCalendar,
    french_month_name,
    french_to_sdn,
    get_calendar,
    gregorian_to_sdn,
    islamic_month_name,
    islamic_to_sdn,
    julian_to_sdn,
    sdn_to_french,
    sdn_to_gregorian,
    sdn_to_islamic,
    sdn_to_julian,
)

# Core types
from tabcal.core.date import TabularDate

# Units
from tabcal.units.weekday import Weekday, day_of_week

# Exceptions
from tabcal.errors import CalendarTableError, TabcalError, ValidationError

__all__: list[str] = [
    "__version__",
    # Calendars
    "CalendarDate",
    "TabularCalendar",
    "TABULAR_ISLAMIC",
    "FRENCH_REPUBLICAN",
    "get_calendar",
    # Conversion functions
    "sdn_to_islamic",
    "islamic_to_sdn",
    "islamic_month_name",
    "sdn_to_french",
    "french_to_sdn",
    "french_month_name",
    "sdn_to_gregorian",
    "gregorian_to_sdn",
    "sdn_to_julian",
    "julian_to_sdn",
    # Core types
    "TabularDate",
    # Units
    "Weekday",
    "day_of_week",
    # Exceptions
    "TabcalError",
    "ValidationError",
    "CalendarTableError",
]
