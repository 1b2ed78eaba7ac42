"""Internal utilities for tabcal.

This module contains private implementation details:
    - Calendar constants and boundary tables
    - Cycle, year and month locators
    - Table validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tabcal._internal.calendar import decompose_cycle, locate_month, locate_year
from tabcal._internal.validation import (
    validate_boundary_table,
    validate_month_coverage,
    validate_month_index,
    validate_month_names,
)

__all__: list[str] = [
    "decompose_cycle",
    "locate_month",
    "locate_year",
    "validate_boundary_table",
    "validate_month_coverage",
    "validate_month_index",
    "validate_month_names",
]
