"""Tabular Islamic calendar.

The Islamic calendar proper begins each month on the observed new
crescent, which varies by country and cannot be computed ahead of time.
The tabular form replaces observation with a fixed 30-year cycle of
10631 days, so converted dates may differ from the locally observed
calendar by a day or two.

Months alternate between 30 and 29 days, starting with Muharram at 30.
Eleven years of each cycle are leap years, in which Dhu al-Hijjah gains
a 30th day.

Examples:
    >>> sdn_to_islamic(1948440)
    CalendarDate(year=1, month=1, day=1)
    >>> islamic_to_sdn(1, 1, 1)
    1948440
    >>> islamic_month_name(9)
    'Ramadan'
"""

from __future__ import annotations

from tabcal._internal.constants import (
    ISLAMIC_CYCLE_YEARS,
    ISLAMIC_EPOCH_SDN,
    ISLAMIC_MAX_YEAR,
    ISLAMIC_MONTH_END_DAYS,
    ISLAMIC_MONTH_NAMES,
    ISLAMIC_YEAR_END_DAYS,
)
from tabcal.calendars.tabular import CalendarDate, TabularCalendar

TABULAR_ISLAMIC = TabularCalendar(
    name="islamic",
    epoch_sdn=ISLAMIC_EPOCH_SDN,
    cycle_years=ISLAMIC_CYCLE_YEARS,
    year_end_days=ISLAMIC_YEAR_END_DAYS,
    month_end_days=ISLAMIC_MONTH_END_DAYS,
    month_names=ISLAMIC_MONTH_NAMES,
    max_year=ISLAMIC_MAX_YEAR,
)


def sdn_to_islamic(sdn: int) -> CalendarDate:
    """Convert an SDN to a Tabular Islamic date.

    Returns ``(0, 0, 0)`` before 1 Muharram 1 AH or after the end of
    year 9999.
    """
    return TABULAR_ISLAMIC.sdn_to_date(sdn)


def islamic_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a Tabular Islamic date to an SDN; 0 if out of range."""
    return TABULAR_ISLAMIC.date_to_sdn(year, month, day)


def islamic_month_name(index: int) -> str:
    """Return the name of Islamic month 1-12 ("" for 0)."""
    return TABULAR_ISLAMIC.month_name(index)


__all__ = [
    "TABULAR_ISLAMIC",
    "sdn_to_islamic",
    "islamic_to_sdn",
    "islamic_month_name",
]
