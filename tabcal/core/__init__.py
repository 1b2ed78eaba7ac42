"""Core value types for tabcal.

This module provides:
    - TabularDate: A date in a tabular calendar, stored as an SDN
"""

from __future__ import annotations

from tabcal.core.date import TabularDate

__all__: list[str] = [
    "TabularDate",
]
