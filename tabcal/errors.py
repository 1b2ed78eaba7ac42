"""tabcal exception hierarchy.

All tabcal-specific exceptions inherit from TabcalError.

Out-of-range dates are not errors: the conversion functions report them
with the ``(0, 0, 0)`` and ``0`` sentinels.
"""

from __future__ import annotations


class TabcalError(Exception):
    """Base exception for all tabcal errors."""

    pass


class ValidationError(TabcalError):
    """Invalid input values.

    Raised when a caller breaks the contract of the object API.

    Examples:
        - Month name index outside the calendar's name table
        - Unknown calendar name
        - Constructing a TabularDate the calendar does not contain
    """

    pass


class CalendarTableError(TabcalError):
    """A boundary table is malformed or was exhausted during a lookup.

    This signals corrupted calendar data, not bad user input. A
    correctly built calendar never raises it.

    Examples:
        - Year boundary table that is not strictly increasing
        - Day offset past the last entry of a month table
    """

    pass


__all__ = [
    "TabcalError",
    "ValidationError",
    "CalendarTableError",
]
