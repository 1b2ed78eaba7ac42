"""Proleptic Gregorian calendar over SDNs.

Years use historical numbering: there is no year 0, and year -1 is
1 BCE. SDN 1 is 25 November 4714 BCE (Gregorian); SDNs of 0 or below
are not converted.

Examples:
    >>> sdn_to_gregorian(2375840)
    CalendarDate(year=1792, month=9, day=22)
    >>> gregorian_to_sdn(1792, 9, 22)
    2375840
"""

from __future__ import annotations

from tabcal._internal.calendar import (
    days_in_month,
    gregorian_to_ordinal,
    ordinal_to_gregorian,
)
from tabcal._internal.constants import GREGORIAN_SDN_OFFSET
from tabcal.calendars.tabular import INVALID_DATE, CalendarDate


def sdn_to_gregorian(sdn: int) -> CalendarDate:
    """Convert an SDN to a Gregorian date.

    Args:
        sdn: The serial day number.

    Returns:
        The CalendarDate, or ``(0, 0, 0)`` for SDNs of 0 or below.
    """
    if sdn <= 0:
        return INVALID_DATE

    year, month, day = ordinal_to_gregorian(sdn - GREGORIAN_SDN_OFFSET)
    if year <= 0:
        year -= 1
    return CalendarDate(year, month, day)


def gregorian_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to an SDN.

    Args:
        year: The year, negative for BCE; 0 is invalid.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The SDN, or 0 if the date is invalid or falls before SDN 1.
    """
    if year == 0 or month < 1 or month > 12:
        return 0

    # Astronomical numbering: 1 BCE is year 0
    astronomical = year + 1 if year < 0 else year
    if day < 1 or day > days_in_month(astronomical, month):
        return 0

    sdn = gregorian_to_ordinal(astronomical, month, day) + GREGORIAN_SDN_OFFSET
    return sdn if sdn > 0 else 0


__all__ = [
    "sdn_to_gregorian",
    "gregorian_to_sdn",
]
