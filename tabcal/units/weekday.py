"""Day-of-week enumeration over SDNs.

This module provides the Weekday enum and the ``day_of_week`` function.
SDN 0 was a Monday, so Sunday-based numbering is ``(sdn + 1) % 7``.
"""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """Day of the week, numbered from Sunday.

    Examples:
        >>> Weekday.SUNDAY.value
        0
        >>> Weekday.FRIDAY.short_name
        'Fri'
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def long_name(self) -> str:
        """Return the full English name (e.g. "Friday")."""
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation (e.g. "Fri")."""
        return self.long_name[:3]


def day_of_week(sdn: int) -> Weekday:
    """Return the day of the week of an SDN.

    Python's ``%`` is never negative, so SDNs before 0 are handled too.

    Args:
        sdn: The serial day number.

    Returns:
        The Weekday.

    Examples:
        >>> day_of_week(1948440)  # 1 Muharram 1 AH
        <Weekday.FRIDAY: 5>
    """
    return Weekday((sdn + 1) % 7)


__all__ = ["Weekday", "day_of_week"]
