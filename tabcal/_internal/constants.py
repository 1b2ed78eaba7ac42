"""Internal constants for tabcal.

These constants define the epochs, cycle sizes and boundary tables of the
supported calendars. Boundary tables hold cumulative day totals: entry ``i``
is the number of days elapsed at the end of year (or month) ``i + 1``.
This module is not part of the public API.
"""

from __future__ import annotations

# Tabular Islamic calendar
# SDN of 1 Muharram 1 AH (16 July 622, Julian)
ISLAMIC_EPOCH_SDN: int = 1_948_440
ISLAMIC_CYCLE_YEARS: int = 30
ISLAMIC_MAX_YEAR: int = 9999

# Leap years fall on cycle positions 2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29
ISLAMIC_YEAR_END_DAYS: tuple[int, ...] = (
    354, 709, 1063, 1417, 1772, 2126, 2481, 2835, 3189, 3544,
    3898, 4252, 4607, 4961, 5315, 5670, 6024, 6379, 6733, 7087,
    7442, 7796, 8150, 8505, 8859, 9214, 9568, 9922, 10277, 10631,
)

# The last entry is the leap-year total; common years end a day earlier
ISLAMIC_MONTH_END_DAYS: tuple[int, ...] = (
    30, 59, 89, 118, 148, 177, 207, 236, 266, 295, 325, 355,
)

ISLAMIC_MONTH_NAMES: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "Muharram",
    "Safar",
    "Rabi' al-Awwal",
    "Rabi' al-Thani",
    "Jumada al-Ula",
    "Jumada al-Akhirah",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qa'dah",
    "Dhu al-Hijjah",
)

# French Republican calendar
# SDN of 1 Vendemiaire I (22 September 1792, Gregorian)
FRENCH_EPOCH_SDN: int = 2_375_840
FRENCH_CYCLE_YEARS: int = 4
FRENCH_MAX_YEAR: int = 14

# Year 3 of every cycle is the leap year (years 3, 7, 11, ...)
FRENCH_YEAR_END_DAYS: tuple[int, ...] = (365, 730, 1096, 1461)

# Twelve 30-day months, then the complementary days (5, or 6 in leap years)
FRENCH_MONTH_END_DAYS: tuple[int, ...] = (
    30, 60, 90, 120, 150, 180, 210, 240, 270, 300, 330, 360, 366,
)

FRENCH_MONTH_NAMES: tuple[str, ...] = (
    "",
    "Vendemiaire",
    "Brumaire",
    "Frimaire",
    "Nivose",
    "Pluviose",
    "Ventose",
    "Germinal",
    "Floreal",
    "Prairial",
    "Messidor",
    "Thermidor",
    "Fructidor",
    "Extra",
)

# Gregorian and Julian reference calendars
# SDN of 0001-01-01 is 1721426 (Gregorian) and 1721424 (Julian)
GREGORIAN_SDN_OFFSET: int = 1_721_425
JULIAN_SDN_OFFSET: int = 1_721_423

DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461

# Days before each month (cumulative), for common years
# Index 0 is unused, months are 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (common year)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "ISLAMIC_EPOCH_SDN",
    "ISLAMIC_CYCLE_YEARS",
    "ISLAMIC_MAX_YEAR",
    "ISLAMIC_YEAR_END_DAYS",
    "ISLAMIC_MONTH_END_DAYS",
    "ISLAMIC_MONTH_NAMES",
    "FRENCH_EPOCH_SDN",
    "FRENCH_CYCLE_YEARS",
    "FRENCH_MAX_YEAR",
    "FRENCH_YEAR_END_DAYS",
    "FRENCH_MONTH_END_DAYS",
    "FRENCH_MONTH_NAMES",
    "GREGORIAN_SDN_OFFSET",
    "JULIAN_SDN_OFFSET",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_BEFORE_MONTH",
    "DAYS_IN_MONTH",
]
