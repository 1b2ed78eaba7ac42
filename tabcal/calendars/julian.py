"""Proleptic Julian calendar over SDNs.

SDN 0 is 1 January 4713 BCE (Julian), so SDN 1 is the first date
converted. Year numbering matches the Gregorian module: no year 0.

Examples:
    >>> sdn_to_julian(1948440)
    CalendarDate(year=622, month=7, day=16)
"""

from __future__ import annotations

from tabcal._internal.calendar import (
    days_in_month,
    julian_to_ordinal,
    ordinal_to_julian,
)
from tabcal._internal.constants import JULIAN_SDN_OFFSET
from tabcal.calendars.tabular import INVALID_DATE, CalendarDate


def sdn_to_julian(sdn: int) -> CalendarDate:
    """Convert an SDN to a Julian date; ``(0, 0, 0)`` for SDNs of 0 or below."""
    if sdn <= 0:
        return INVALID_DATE

    year, month, day = ordinal_to_julian(sdn - JULIAN_SDN_OFFSET)
    if year <= 0:
        year -= 1
    return CalendarDate(year, month, day)


def julian_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a Julian date to an SDN; 0 if invalid or before SDN 1."""
    if year == 0 or month < 1 or month > 12:
        return 0

    astronomical = year + 1 if year < 0 else year
    if day < 1 or day > days_in_month(astronomical, month, julian=True):
        return 0

    sdn = julian_to_ordinal(astronomical, month, day) + JULIAN_SDN_OFFSET
    return sdn if sdn > 0 else 0


__all__ = [
    "sdn_to_julian",
    "julian_to_sdn",
]
