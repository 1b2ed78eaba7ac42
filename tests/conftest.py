"""Pytest configuration and fixtures for tabcal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tabcal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def french_copy():
    """A private French Republican calendar that tests may corrupt."""
    from tabcal._internal.constants import (
        FRENCH_CYCLE_YEARS,
        FRENCH_EPOCH_SDN,
        FRENCH_MONTH_END_DAYS,
        FRENCH_MONTH_NAMES,
        FRENCH_YEAR_END_DAYS,
    )
    from tabcal.calendars.tabular import TabularCalendar

    return TabularCalendar(
        name="french-copy",
        epoch_sdn=FRENCH_EPOCH_SDN,
        cycle_years=FRENCH_CYCLE_YEARS,
        year_end_days=FRENCH_YEAR_END_DAYS,
        month_end_days=FRENCH_MONTH_END_DAYS,
        month_names=FRENCH_MONTH_NAMES,
    )
