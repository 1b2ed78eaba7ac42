"""Tests for the Tabular Islamic calendar."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from tabcal.calendars.gregorian import gregorian_to_sdn
from tabcal.calendars.islamic import (
    TABULAR_ISLAMIC,
    islamic_month_name,
    islamic_to_sdn,
    sdn_to_islamic,
)
from tabcal.errors import ValidationError

EPOCH = 1948440
LEAP_POSITIONS = {2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29}


class TestSdnToIslamic:
    """Tests for SDN to Tabular Islamic conversion."""

    def test_epoch_is_first_day(self) -> None:
        """The epoch SDN is 1 Muharram 1."""
        assert sdn_to_islamic(EPOCH) == (1, 1, 1)

    def test_day_before_epoch_is_invalid(self) -> None:
        """One day before the epoch returns the zero sentinel."""
        assert sdn_to_islamic(EPOCH - 1) == (0, 0, 0)

    def test_far_before_epoch_is_invalid(self) -> None:
        """Any SDN before the epoch returns the zero sentinel."""
        assert sdn_to_islamic(0) == (0, 0, 0)
        assert sdn_to_islamic(-5_000_000) == (0, 0, 0)

    def test_second_year_starts_after_354_days(self) -> None:
        """Year 1 is a common year of 354 days."""
        assert sdn_to_islamic(EPOCH + 353) == (1, 12, 29)
        assert sdn_to_islamic(EPOCH + 354) == (2, 1, 1)

    def test_leap_day(self) -> None:
        """Year 2 is a leap year with a 30th of Dhu al-Hijjah."""
        assert sdn_to_islamic(EPOCH + 354 + 354) == (2, 12, 30)
        assert sdn_to_islamic(EPOCH + 709) == (3, 1, 1)

    def test_second_cycle(self) -> None:
        """The 10631st day after the epoch starts year 31."""
        assert sdn_to_islamic(EPOCH + 10631) == (31, 1, 1)
        assert sdn_to_islamic(EPOCH + 10630) == (30, 12, 29)

    def test_ramadan_1445(self) -> None:
        """1 Ramadan 1445 falls on 11 March 2024 in the tabular calendar."""
        assert sdn_to_islamic(gregorian_to_sdn(2024, 3, 11)) == (1445, 9, 1)

    def test_result_has_named_fields(self) -> None:
        """The result exposes year, month and day by name."""
        result = sdn_to_islamic(EPOCH + 30)
        assert (result.year, result.month, result.day) == (1, 2, 1)

    def test_out_of_range_is_logged(self) -> None:
        """Returning the sentinel emits a debug event."""
        with capture_logs() as logs:
            sdn_to_islamic(EPOCH - 1)

        assert logs == [
            {
                "event": "sdn_out_of_range",
                "log_level": "debug",
                "calendar": "islamic",
                "sdn": EPOCH - 1,
            }
        ]


class TestIslamicToSdn:
    """Tests for Tabular Islamic to SDN conversion."""

    def test_epoch(self) -> None:
        """1 Muharram 1 is the epoch SDN."""
        assert islamic_to_sdn(1, 1, 1) == EPOCH

    def test_second_year(self) -> None:
        """1 Muharram 2 is 354 days after the epoch."""
        assert islamic_to_sdn(2, 1, 1) == EPOCH + 354

    def test_new_year_1446(self) -> None:
        """1 Muharram 1446 falls on 8 July 2024 in the tabular calendar."""
        assert islamic_to_sdn(1446, 1, 1) == gregorian_to_sdn(2024, 7, 8)

    def test_leap_day_only_in_leap_years(self) -> None:
        """The 30th of Dhu al-Hijjah exists only in leap years."""
        assert islamic_to_sdn(1, 12, 30) == 0
        assert islamic_to_sdn(2, 12, 30) == EPOCH + 708

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [
            (0, 1, 1),
            (-1, 1, 1),
            (1, 0, 1),
            (1, 13, 1),
            (1, 1, 0),
            (1, 1, 31),
            (1, 2, 30),
            (10000, 1, 1),
        ],
    )
    def test_invalid_dates_return_zero(self, year: int, month: int, day: int) -> None:
        """Out-of-range components return 0."""
        assert islamic_to_sdn(year, month, day) == 0

    def test_invalid_date_is_logged(self) -> None:
        """Rejecting a date emits a debug event naming the field."""
        with capture_logs() as logs:
            islamic_to_sdn(1, 2, 30)

        assert len(logs) == 1
        assert logs[0]["event"] == "date_out_of_range"
        assert logs[0]["field"] == "day"


class TestIslamicRange:
    """Tests for the supported range of the Tabular Islamic calendar."""

    def test_last_supported_day(self) -> None:
        """Year 9999 is the last supported year."""
        last = TABULAR_ISLAMIC.last_sdn
        assert last == 5_491_751
        assert sdn_to_islamic(last) == (9999, 12, 29)
        assert islamic_to_sdn(9999, 12, 29) == last

    def test_after_last_day_is_invalid(self) -> None:
        """The day after the end of year 9999 returns the zero sentinel."""
        assert sdn_to_islamic(TABULAR_ISLAMIC.last_sdn + 1) == (0, 0, 0)


class TestIslamicStructure:
    """Tests for the year and month structure of the cycle."""

    def test_leap_years(self) -> None:
        """Eleven cycle positions have 355 days, the rest 354."""
        for year in range(1, 31):
            expected = 355 if year in LEAP_POSITIONS else 354
            assert TABULAR_ISLAMIC.days_in_year(year) == expected
            assert TABULAR_ISLAMIC.is_leap_year(year) is (year in LEAP_POSITIONS)

    def test_leap_pattern_repeats(self) -> None:
        """Year 1445 sits at cycle position 5, a leap year."""
        assert TABULAR_ISLAMIC.is_leap_year(1445)
        assert not TABULAR_ISLAMIC.is_leap_year(1446)

    def test_cycle_length(self) -> None:
        """Thirty years sum to 10631 days."""
        assert TABULAR_ISLAMIC.cycle_length == 10631
        assert sum(TABULAR_ISLAMIC.days_in_year(y) for y in range(1, 31)) == 10631

    def test_month_lengths_common_year(self) -> None:
        """Odd months have 30 days and even months 29."""
        lengths = [TABULAR_ISLAMIC.days_in_month(1, m) for m in range(1, 13)]
        assert lengths == [30, 29] * 6

    def test_month_lengths_leap_year(self) -> None:
        """Dhu al-Hijjah has 30 days in a leap year."""
        lengths = [TABULAR_ISLAMIC.days_in_month(2, m) for m in range(1, 13)]
        assert lengths == [30, 29] * 5 + [30, 30]

    def test_round_trip_two_cycles(self) -> None:
        """Every day of the first two cycles converts back to itself."""
        for sdn in range(EPOCH, EPOCH + 2 * 10631):
            assert islamic_to_sdn(*sdn_to_islamic(sdn)) == sdn

    def test_round_trip_dates(self) -> None:
        """Every valid date of a cycle converts back to itself."""
        for year in range(1411, 1441):
            for month in range(1, 13):
                for day in range(1, TABULAR_ISLAMIC.days_in_month(year, month) + 1):
                    sdn = islamic_to_sdn(year, month, day)
                    assert sdn != 0
                    assert sdn_to_islamic(sdn) == (year, month, day)

    def test_monotonic(self) -> None:
        """Later SDNs never give earlier dates."""
        previous = sdn_to_islamic(EPOCH)
        for sdn in range(EPOCH + 1, EPOCH + 10631 + 400):
            current = sdn_to_islamic(sdn)
            assert current > previous
            previous = current


class TestIslamicMonthName:
    """Tests for Islamic month names."""

    @pytest.mark.parametrize(
        ("index", "name"),
        [
            (0, ""),
            (1, "Muharram"),
            (2, "Safar"),
            (9, "Ramadan"),
            (12, "Dhu al-Hijjah"),
        ],
    )
    def test_names(self, index: int, name: str) -> None:
        """Month indices map to their names."""
        assert islamic_month_name(index) == name

    @pytest.mark.parametrize("index", [-1, 13])
    def test_out_of_table_raises(self, index: int) -> None:
        """Indices outside the table are rejected."""
        with pytest.raises(ValidationError, match="month index must be between 0 and 12"):
            islamic_month_name(index)
