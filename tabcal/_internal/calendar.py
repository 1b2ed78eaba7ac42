"""Calendar arithmetic for tabcal.

This module provides the table-driven decomposition used by every
tabular calendar, plus the ordinal arithmetic of the Gregorian and
Julian reference calendars.

A tabular conversion runs in three stages:

    offset -> decompose_cycle -> (cycle, day_in_cycle)
           -> locate_year     -> (year_in_cycle, day_in_year)
           -> locate_month    -> (month, day_of_month)

All offsets handed to the locators are 0-based. A locator that runs off
the end of its table raises CalendarTableError; it never returns a
sentinel.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import Sequence

import structlog

from tabcal._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
)
from tabcal.errors import CalendarTableError

# Events go to stdlib logging; the host application decides what is shown.
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


def decompose_cycle(offset: int, cycle_length: int) -> tuple[int, int]:
    """Split an epoch offset into a cycle index and a day within the cycle.

    Args:
        offset: Days since the calendar epoch (non-negative).
        cycle_length: Number of days in one full cycle of years.

    Returns:
        Tuple of (cycle_index, day_in_cycle), with day_in_cycle in
        ``[0, cycle_length)``.

    Examples:
        >>> decompose_cycle(10631, 10631)
        (1, 0)
        >>> decompose_cycle(354, 10631)
        (0, 354)
    """
    return divmod(offset, cycle_length)


def _locate(offset: int, boundaries: Sequence[int], table: str) -> tuple[int, int]:
    # First index whose cumulative total strictly exceeds the offset
    index = bisect_right(boundaries, offset)
    if offset < 0 or index == len(boundaries):
        last = boundaries[-1] if boundaries else None
        logger.error(
            "boundary_table_exhausted", table=table, offset=offset, last_entry=last
        )
        raise CalendarTableError(
            f"{table} offset {offset} is not covered by the boundary table "
            f"(last entry {last})"
        )
    base = boundaries[index - 1] if index else 0
    return index + 1, offset - base


def locate_year(day_in_cycle: int, year_end_days: Sequence[int]) -> tuple[int, int]:
    """Find the year of a cycle that contains a given day.

    Args:
        day_in_cycle: 0-based day within the cycle.
        year_end_days: Cumulative day totals at the end of each year of
            the cycle.

    Returns:
        Tuple of (year_in_cycle, day_in_year); year_in_cycle is 1-based,
        day_in_year is 0-based.

    Raises:
        CalendarTableError: If no table entry exceeds day_in_cycle.

    Examples:
        >>> locate_year(0, (354, 709, 1063))
        (1, 0)
        >>> locate_year(354, (354, 709, 1063))
        (2, 0)
    """
    return _locate(day_in_cycle, year_end_days, "year")


def locate_month(day_in_year: int, month_end_days: Sequence[int]) -> tuple[int, int]:
    """Find the month of a year that contains a given day.

    Args:
        day_in_year: 0-based day within the year.
        month_end_days: Cumulative day totals at the end of each month.

    Returns:
        Tuple of (month, day_of_month), both 1-based.

    Raises:
        CalendarTableError: If no table entry exceeds day_in_year.

    Examples:
        >>> locate_month(0, (30, 59, 89))
        (1, 1)
        >>> locate_month(58, (30, 59, 89))
        (2, 29)
    """
    month, day_in_month = _locate(day_in_year, month_end_days, "month")
    return month, day_in_month + 1


def is_gregorian_leap_year(year: int) -> bool:
    """Check if an astronomical year is a Gregorian leap year.

    Examples:
        >>> is_gregorian_leap_year(2000)
        True
        >>> is_gregorian_leap_year(1900)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    """Check if an astronomical year is a Julian leap year."""
    return year % 4 == 0


def days_in_month(year: int, month: int, *, julian: bool = False) -> int:
    """Return the number of days in a Gregorian (or Julian) month.

    Args:
        year: The astronomical year (needed for February).
        month: The month (1-12).
        julian: Use the Julian leap year rule.

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    leap = is_julian_leap_year(year) if julian else is_gregorian_leap_year(year)
    if month == 2 and leap:
        return 29
    return DAYS_IN_MONTH[month]


def _days_before_month(year: int, month: int, *, julian: bool = False) -> int:
    result = DAYS_BEFORE_MONTH[month]
    leap = is_julian_leap_year(year) if julian else is_gregorian_leap_year(year)
    if month > 2 and leap:
        result += 1
    return result


def gregorian_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert an astronomical Gregorian date to an ordinal.

    The ordinal for 0001-01-01 is 1. Python's ``//`` floors toward
    negative infinity, so the formula holds for year 0 and below.

    Args:
        year: The astronomical year (0 is 1 BCE).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_gregorian(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal to an astronomical Gregorian date.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    # 100-year blocks have 36524 days, except the last of each 400
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year block
    if n1 == 4 or (n100 == 4 and n4 == 0 and n1 == 0):
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def julian_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert an astronomical Julian date to an ordinal.

    The ordinal for Julian 0001-01-01 is 1.
    """
    y = year - 1
    return y * 365 + y // 4 + _days_before_month(year, month, julian=True) + day


def ordinal_to_julian(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal to an astronomical Julian date."""
    n4, n = divmod(ordinal - 1, DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n4 * 4 + n1 + 1
    if n1 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1, julian=True)
    return (year, month, day)


def _doy_to_md(year: int, doy: int, *, julian: bool = False) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month, julian=julian)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


__all__ = [
    "decompose_cycle",
    "locate_year",
    "locate_month",
    "is_gregorian_leap_year",
    "is_julian_leap_year",
    "days_in_month",
    "gregorian_to_ordinal",
    "ordinal_to_gregorian",
    "julian_to_ordinal",
    "ordinal_to_julian",
]
