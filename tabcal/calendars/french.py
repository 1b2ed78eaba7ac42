"""French Republican calendar.

The French Republican calendar was adopted in October 1793 and
abandoned in January 1806. Its year has twelve months of 30 days each,
divided into three decades, followed by 5 or 6 complementary days that
are grouped here under the "Extra" month (month 13).

The epoch, 1 Vendemiaire I, is 22 September 1792 (Gregorian). Leap years
are every fourth year starting with year 3 (3, 7, 11, ...). No
authoritative leap rule exists for later centuries, so only years 1
through 14 are supported: SDN 2375840 through 2380952, which covers the
whole period the calendar was in use.

Examples:
    >>> sdn_to_french(2375840)
    CalendarDate(year=1, month=1, day=1)
    >>> french_to_sdn(14, 13, 5)
    2380952
    >>> french_month_name(13)
    'Extra'
"""

from __future__ import annotations

from tabcal._internal.constants import (
    FRENCH_CYCLE_YEARS,
    FRENCH_EPOCH_SDN,
    FRENCH_MAX_YEAR,
    FRENCH_MONTH_END_DAYS,
    FRENCH_MONTH_NAMES,
    FRENCH_YEAR_END_DAYS,
)
from tabcal.calendars.tabular import CalendarDate, TabularCalendar

FRENCH_REPUBLICAN = TabularCalendar(
    name="french",
    epoch_sdn=FRENCH_EPOCH_SDN,
    cycle_years=FRENCH_CYCLE_YEARS,
    year_end_days=FRENCH_YEAR_END_DAYS,
    month_end_days=FRENCH_MONTH_END_DAYS,
    month_names=FRENCH_MONTH_NAMES,
    max_year=FRENCH_MAX_YEAR,
)


def sdn_to_french(sdn: int) -> CalendarDate:
    """Convert an SDN to a French Republican date.

    If the SDN is before the first day of year 1 or after the last day
    of year 14, all three components are zero. Otherwise the year is
    1-14, the month 1-13 and the day 1-30; month 13 holds the
    complementary days, numbered 1-5 (1-6 in leap years).
    """
    return FRENCH_REPUBLICAN.sdn_to_date(sdn)


def french_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a French Republican date to an SDN.

    Returns 0 when the date is invalid or outside years 1-14. Every
    nonzero result converts back to the same date.
    """
    return FRENCH_REPUBLICAN.date_to_sdn(year, month, day)


def french_month_name(index: int) -> str:
    """Return the name of French month 1-13 ("" for 0, "Extra" for 13)."""
    return FRENCH_REPUBLICAN.month_name(index)


__all__ = [
    "FRENCH_REPUBLICAN",
    "sdn_to_french",
    "french_to_sdn",
    "french_month_name",
]
