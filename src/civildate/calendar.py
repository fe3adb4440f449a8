"""Proleptic Gregorian calendar arithmetic on integer day numbers.

Day numbers count days relative to 1970-01-01 (day 0) and are negative before
it. The conversions work for any integer year, including year 0 and negative
years, which the standard library ``datetime`` types cannot represent.
"""

from __future__ import annotations

from typing import Final

DAYS_PER_ERA: Final[int] = 146_097  # days in 400 Gregorian years
EPOCH_SHIFT: Final[int] = 719_468  # days from 0000-03-01 to 1970-01-01
ORDINAL_OFFSET: Final[int] = 719_163  # date(1970, 1, 1).toordinal()

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of ``month`` (1-12) in ``year``."""

    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the day number of ``year-month-day``.

    Out of range months and days are not rejected; they carry into the
    neighbouring months and years, so ``(2020, 1, 32)`` resolves to 2020-02-01
    and ``(2020, 1, 0)`` to 2019-12-31.
    """

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    # Years start in March so the leap day is the last day of the year.
    shifted_year = year - 1 if month <= 2 else year
    era = shifted_year // 400
    year_of_era = shifted_year - era * 400
    day_of_year = (153 * ((month + 9) % 12) + 2) // 5
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - EPOCH_SHIFT + (day - 1)


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Return the ``(year, month, day)`` triple for a day number."""

    days += EPOCH_SHIFT
    era = days // DAYS_PER_ERA
    day_of_era = days - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def weekday_from_days(days: int) -> int:
    """Return the weekday of a day number, Monday is 0."""

    # 1970-01-01 was a Thursday.
    return (days + 3) % 7


def day_of_year(days: int) -> int:
    year, _, _ = civil_from_days(days)
    return days - days_from_civil(year, 1, 1) + 1


__all__ = [
    "ORDINAL_OFFSET",
    "civil_from_days",
    "day_of_year",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "weekday_from_days",
]
