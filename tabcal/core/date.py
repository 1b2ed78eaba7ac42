"""TabularDate class representing a date in a tabular calendar.

This module provides the TabularDate class, an immutable date bound to
one TabularCalendar and stored internally as a Serial Day Number.
"""

from __future__ import annotations

from tabcal.calendars.gregorian import sdn_to_gregorian
from tabcal.calendars.islamic import TABULAR_ISLAMIC
from tabcal.calendars.julian import sdn_to_julian
from tabcal.calendars.tabular import CalendarDate, TabularCalendar
from tabcal.errors import ValidationError
from tabcal.units.weekday import Weekday, day_of_week


class TabularDate:
    """A date in a tabular calendar.

    TabularDate wraps an SDN together with the calendar used to read it.
    Because every calendar shares the SDN scale, dates from different
    calendars can be ordered against each other and converted with
    ``to_calendar``. Equality, however, also requires the same calendar.

    Attributes:
        year: The year (1 or later).
        month: The month slot (13 is the French "Extra" month).
        day: The day of the month.

    Examples:
        >>> d = TabularDate(1445, 9, 1)
        >>> d.month_name
        'Ramadan'
        >>> d.sdn
        2460381

        >>> from tabcal.calendars import FRENCH_REPUBLICAN
        >>> TabularDate(2, 2, 18, calendar=FRENCH_REPUBLICAN).to_gregorian()
        CalendarDate(year=1793, month=11, day=8)
    """

    __slots__ = ("_sdn", "_calendar")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        calendar: TabularCalendar = TABULAR_ISLAMIC,
    ) -> None:
        """Create a TabularDate from year, month, and day.

        Raises:
            ValidationError: If the calendar does not contain the date.
        """
        sdn = calendar.date_to_sdn(year, month, day)
        if sdn == 0:
            raise ValidationError(
                f"{year}-{month:02d}-{day:02d} is not a valid {calendar.name} date"
            )
        self._sdn = sdn
        self._calendar = calendar

    @classmethod
    def from_sdn(
        cls, sdn: int, calendar: TabularCalendar = TABULAR_ISLAMIC
    ) -> TabularDate:
        """Create a TabularDate from a Serial Day Number.

        Args:
            sdn: The serial day number.
            calendar: The calendar to read the day in.

        Returns:
            The corresponding TabularDate.

        Raises:
            ValidationError: If the SDN is outside the calendar's range.

        Examples:
            >>> TabularDate.from_sdn(1948440)
            TabularDate(1, 1, 1, calendar='islamic')
        """
        year, month, day = calendar.sdn_to_date(sdn)
        if year == 0:
            raise ValidationError(
                f"SDN {sdn} is outside the supported {calendar.name} range"
            )
        return cls(year, month, day, calendar)

    @property
    def sdn(self) -> int:
        """Return the Serial Day Number of this date."""
        return self._sdn

    @property
    def calendar(self) -> TabularCalendar:
        return self._calendar

    def to_tuple(self) -> CalendarDate:
        """Return the (year, month, day) triple."""
        return self._calendar.sdn_to_date(self._sdn)

    @property
    def year(self) -> int:
        return self.to_tuple().year

    @property
    def month(self) -> int:
        return self.to_tuple().month

    @property
    def day(self) -> int:
        return self.to_tuple().day

    @property
    def month_name(self) -> str:
        """Return the display name of this date's month."""
        return self._calendar.month_name(self.month)

    @property
    def weekday(self) -> Weekday:
        return day_of_week(self._sdn)

    @property
    def is_leap_year(self) -> bool:
        return self._calendar.is_leap_year(self.year)

    def to_calendar(self, calendar: TabularCalendar) -> TabularDate:
        """Return the same day read in another tabular calendar.

        Raises:
            ValidationError: If the day is outside the other calendar's
                range.

        Examples:
            >>> from tabcal.calendars import FRENCH_REPUBLICAN
            >>> TabularDate(1207, 2, 5).to_calendar(FRENCH_REPUBLICAN)
            TabularDate(1, 1, 1, calendar='french')
        """
        return TabularDate.from_sdn(self._sdn, calendar)

    def to_gregorian(self) -> CalendarDate:
        """Return this day as a proleptic Gregorian (year, month, day)."""
        return sdn_to_gregorian(self._sdn)

    def to_julian(self) -> CalendarDate:
        """Return this day as a proleptic Julian (year, month, day)."""
        return sdn_to_julian(self._sdn)

    def add_days(self, days: int) -> TabularDate:
        """Return a new date offset by the given number of days.

        Raises:
            ValidationError: If the result is outside the calendar's range.

        Examples:
            >>> TabularDate(1, 1, 30).add_days(1)
            TabularDate(1, 2, 1, calendar='islamic')
        """
        return TabularDate.from_sdn(self._sdn + days, self._calendar)

    def __add__(self, other: object) -> TabularDate:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> TabularDate | int:
        """Subtract a number of days, or another date.

        Subtracting a date returns the number of days between the two,
        whatever calendars they are in.

        Examples:
            >>> TabularDate(2, 1, 1) - TabularDate(1, 1, 1)
            354
        """
        if isinstance(other, TabularDate):
            return self._sdn - other._sdn
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_days(-other)
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TabularDate):
            return NotImplemented
        return self._sdn == other._sdn and self._calendar == other._calendar

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TabularDate):
            return NotImplemented
        return self._sdn < other._sdn

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TabularDate):
            return NotImplemented
        return self._sdn <= other._sdn

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TabularDate):
            return NotImplemented
        return self._sdn > other._sdn

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TabularDate):
            return NotImplemented
        return self._sdn >= other._sdn

    def __hash__(self) -> int:
        return hash((self._calendar.name, self._sdn))

    def __repr__(self) -> str:
        """Return a string like "TabularDate(1445, 9, 1, calendar='islamic')"."""
        year, month, day = self.to_tuple()
        return f"TabularDate({year}, {month}, {day}, calendar={self._calendar.name!r})"


__all__ = ["TabularDate"]
