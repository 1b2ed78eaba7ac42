"""Table-driven tabular calendars.

A tabular calendar repeats a fixed pattern of common and leap years. It
is fully described by an epoch SDN, the number of years in a cycle, and
two cumulative boundary tables: day totals at the end of each year of
the cycle, and at the end of each month of the year. The last month
entry covers the longest year; shorter years simply end before it.

Conversions report unsupported input with sentinels rather than
exceptions: ``sdn_to_date`` returns ``(0, 0, 0)`` and ``date_to_sdn``
returns ``0``.

Examples:
    >>> from tabcal.calendars import TABULAR_ISLAMIC
    >>> TABULAR_ISLAMIC.sdn_to_date(1948440)
    CalendarDate(year=1, month=1, day=1)
    >>> TABULAR_ISLAMIC.date_to_sdn(2, 1, 1)
    1948794
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import NamedTuple

import structlog

from tabcal._internal.calendar import decompose_cycle, locate_month, locate_year
from tabcal._internal.validation import (
    validate_boundary_table,
    validate_month_coverage,
    validate_month_index,
    validate_month_names,
)
from tabcal.errors import CalendarTableError

# Events go to stdlib logging; the host application decides what is shown.
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


class CalendarDate(NamedTuple):
    """A (year, month, day) triple; all zero when out of range."""

    year: int
    month: int
    day: int


INVALID_DATE = CalendarDate(0, 0, 0)


@dataclass(frozen=True)
class TabularCalendar:
    """An arithmetic calendar defined by cumulative boundary tables.

    Attributes:
        name: Short registry name (e.g. "islamic").
        epoch_sdn: SDN of day 1 of month 1 of year 1.
        cycle_years: Number of years in one repeating cycle.
        year_end_days: Cumulative day totals at the end of each year of
            the cycle. The last entry is the cycle length in days.
        month_end_days: Cumulative day totals at the end of each month.
            The last entry is the length of the longest year.
        month_names: Display names; index 0 is the empty string.
        max_year: Last supported year, or None for no explicit bound.

    Raises:
        CalendarTableError: If the tables are malformed.
    """

    name: str
    epoch_sdn: int
    cycle_years: int
    year_end_days: tuple[int, ...]
    month_end_days: tuple[int, ...]
    month_names: tuple[str, ...]
    max_year: int | None = None

    def __post_init__(self) -> None:
        # 0 is the "invalid date" SDN sentinel
        if self.epoch_sdn <= 0:
            raise CalendarTableError(
                f"epoch SDN must be positive, got {self.epoch_sdn}"
            )
        validate_boundary_table("year", self.year_end_days)
        validate_boundary_table("month", self.month_end_days)
        if len(self.year_end_days) != self.cycle_years:
            raise CalendarTableError(
                f"year table must have {self.cycle_years} entries, "
                f"got {len(self.year_end_days)}"
            )
        validate_month_coverage(self.year_end_days, self.month_end_days)
        validate_month_names(self.month_names, len(self.month_end_days))

    @property
    def cycle_length(self) -> int:
        """Number of days in one cycle."""
        return self.year_end_days[-1]

    @property
    def months_per_year(self) -> int:
        """Number of month slots, including any epagomenal slot."""
        return len(self.month_end_days)

    @property
    def first_sdn(self) -> int:
        """SDN of the first supported day."""
        return self.epoch_sdn

    @property
    def last_sdn(self) -> int | None:
        """SDN of the last supported day, or None when unbounded."""
        if self.max_year is None:
            return None
        return self._year_start_sdn(self.max_year + 1) - 1

    def _year_start_sdn(self, year: int) -> int:
        cycle, index = divmod(year - 1, self.cycle_years)
        base = self.year_end_days[index - 1] if index else 0
        return self.epoch_sdn + cycle * self.cycle_length + base

    def _in_year_range(self, year: int) -> bool:
        return year >= 1 and (self.max_year is None or year <= self.max_year)

    def days_in_year(self, year: int) -> int:
        """Return the number of days in a year.

        The year must be 1 or later; the cycle position is what matters,
        so years past max_year are still answered.
        """
        index = (year - 1) % self.cycle_years
        base = self.year_end_days[index - 1] if index else 0
        return self.year_end_days[index] - base

    @cached_property
    def shortest_year_length(self) -> int:
        """Number of days in the shortest year of the cycle."""
        return min(
            end - start
            for start, end in zip((0,) + self.year_end_days, self.year_end_days)
        )

    def is_leap_year(self, year: int) -> bool:
        """Return True if the year is longer than the shortest year."""
        return self.days_in_year(year) > self.shortest_year_length

    def days_in_month(self, year: int, month: int) -> int:
        """Return the number of days in a month of a year.

        The final month slot is cut short in years that end before the
        last month table entry.

        Returns:
            Days in the month, or 0 if month is not a valid slot.
        """
        if month < 1 or month > self.months_per_year:
            return 0
        start = self.month_end_days[month - 2] if month > 1 else 0
        end = min(self.month_end_days[month - 1], self.days_in_year(year))
        return max(end - start, 0)

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        """Return True if the calendar contains the date."""
        return self.date_to_sdn(year, month, day) != 0

    def sdn_to_date(self, sdn: int) -> CalendarDate:
        """Convert an SDN to a date in this calendar.

        Args:
            sdn: The serial day number.

        Returns:
            The CalendarDate, or ``(0, 0, 0)`` if the SDN falls before
            the epoch or after the last supported day.

        Raises:
            CalendarTableError: If the boundary tables fail to cover the
                day (corrupted calendar data).

        Examples:
            >>> from tabcal.calendars import TABULAR_ISLAMIC
            >>> TABULAR_ISLAMIC.sdn_to_date(1948439)
            CalendarDate(year=0, month=0, day=0)
        """
        last = self.last_sdn
        if sdn < self.epoch_sdn or (last is not None and sdn > last):
            logger.debug("sdn_out_of_range", calendar=self.name, sdn=sdn)
            return INVALID_DATE

        cycle, day_in_cycle = decompose_cycle(sdn - self.epoch_sdn, self.cycle_length)
        year_in_cycle, day_in_year = locate_year(day_in_cycle, self.year_end_days)
        month, day = locate_month(day_in_year, self.month_end_days)
        return CalendarDate(cycle * self.cycle_years + year_in_cycle, month, day)

    def date_to_sdn(self, year: int, month: int, day: int) -> int:
        """Convert a date in this calendar to an SDN.

        Args:
            year: The year (1 to max_year).
            month: The month slot (1 to months_per_year).
            day: The day of the month.

        Returns:
            The SDN, or 0 if any component is out of range.

        Examples:
            >>> from tabcal.calendars import FRENCH_REPUBLICAN
            >>> FRENCH_REPUBLICAN.date_to_sdn(1, 1, 1)
            2375840
            >>> FRENCH_REPUBLICAN.date_to_sdn(1, 13, 6)
            0
        """
        if not self._in_year_range(year):
            logger.debug(
                "date_out_of_range", calendar=self.name, field="year", year=year
            )
            return 0
        month_length = self.days_in_month(year, month)
        if day < 1 or day > month_length:
            logger.debug(
                "date_out_of_range",
                calendar=self.name,
                field="day" if month_length else "month",
                year=year,
                month=month,
                day=day,
            )
            return 0

        month_base = self.month_end_days[month - 2] if month > 1 else 0
        return self._year_start_sdn(year) + month_base + day - 1

    def month_name(self, index: int) -> str:
        """Return the display name of a month slot.

        Args:
            index: Month index; 0 returns the empty string.

        Raises:
            ValidationError: If index is outside the name table.
        """
        validate_month_index(index, self.months_per_year)
        return self.month_names[index]


__all__ = [
    "CalendarDate",
    "INVALID_DATE",
    "TabularCalendar",
]
