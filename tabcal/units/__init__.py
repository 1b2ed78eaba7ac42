"""Unit types for tabcal.

This module provides enumeration types:
    - Weekday: Day of the week of an SDN
"""

from __future__ import annotations

from tabcal.units.weekday import Weekday, day_of_week

__all__: list[str] = [
    "Weekday",
    "day_of_week",
]
