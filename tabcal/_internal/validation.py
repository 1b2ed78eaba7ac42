"""Validation utilities for tabcal.

This module checks the boundary tables a tabular calendar is built from,
and the indices callers hand to name lookups. Table checks raise
CalendarTableError because a bad table is corrupted data, not bad input.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Sequence

from tabcal.errors import CalendarTableError, ValidationError


def validate_boundary_table(name: str, table: Sequence[int]) -> None:
    """Validate that a cumulative boundary table is usable.

    Args:
        name: Table name, used in error messages.
        table: Cumulative day totals.

    Raises:
        CalendarTableError: If the table is empty, starts at or below
            zero, or is not strictly increasing.

    Examples:
        >>> validate_boundary_table("year", (354, 709))
        >>> validate_boundary_table("year", (354, 354))
        Traceback (most recent call last):
        ...
        tabcal.errors.CalendarTableError: year table must be strictly increasing at index 1, got 354 after 354
    """
    if not table:
        raise CalendarTableError(f"{name} table must not be empty")
    if table[0] <= 0:
        raise CalendarTableError(
            f"{name} table must start with a positive total, got {table[0]}"
        )
    for i in range(1, len(table)):
        if table[i] <= table[i - 1]:
            raise CalendarTableError(
                f"{name} table must be strictly increasing at index {i}, "
                f"got {table[i]} after {table[i - 1]}"
            )


def validate_month_coverage(
    year_end_days: Sequence[int], month_end_days: Sequence[int]
) -> None:
    """Validate that the month table spans the longest year of the cycle.

    Raises:
        CalendarTableError: If some year is longer than the month table.
    """
    last_month_start = month_end_days[-2] if len(month_end_days) > 1 else 0
    previous = 0
    for i, total in enumerate(year_end_days):
        length = total - previous
        if length > month_end_days[-1]:
            raise CalendarTableError(
                f"year {i + 1} of the cycle has {length} days, but the month "
                f"table only covers {month_end_days[-1]}"
            )
        if length <= last_month_start:
            raise CalendarTableError(
                f"year {i + 1} of the cycle has {length} days and never "
                f"reaches month {len(month_end_days)}"
            )
        previous = total


def validate_month_names(names: Sequence[str], months_per_year: int) -> None:
    """Validate a month name table against the number of month slots.

    Index 0 must hold the empty string.

    Raises:
        CalendarTableError: If the table has the wrong size or index 0
            is not empty.
    """
    if len(names) != months_per_year + 1:
        raise CalendarTableError(
            f"month name table must have {months_per_year + 1} entries, "
            f"got {len(names)}"
        )
    if names[0] != "":
        raise CalendarTableError(
            f"month name index 0 must be empty, got {names[0]!r}"
        )


def validate_month_index(index: int, months_per_year: int) -> None:
    """Validate that a month name index exists.

    Args:
        index: The month index (0 for "no month").
        months_per_year: Number of month slots in the calendar.

    Raises:
        ValidationError: If index is outside 0 to months_per_year.
    """
    if index < 0 or index > months_per_year:
        raise ValidationError(
            f"month index must be between 0 and {months_per_year}, got {index}"
        )


__all__ = [
    "validate_boundary_table",
    "validate_month_coverage",
    "validate_month_names",
    "validate_month_index",
]
