from __future__ import annotations

from datetime import date

import pytest

from civildate.calendar import (
    ORDINAL_OFFSET,
    civil_from_days,
    day_of_year,
    days_from_civil,
    days_in_month,
    is_leap_year,
    weekday_from_days,
)


def test_epoch_is_day_zero() -> None:
    assert days_from_civil(1970, 1, 1) == 0
    assert civil_from_days(0) == (1970, 1, 1)
    assert civil_from_days(-1) == (1969, 12, 31)


@pytest.mark.parametrize(
    ("year", "expected"),
    [(2020, True), (2021, False), (1900, False), (2000, True), (0, True), (-4, True), (-1, False)],
)
def test_is_leap_year(year: int, expected: bool) -> None:
    assert is_leap_year(year) is expected


def test_days_in_month_handles_february() -> None:
    assert days_in_month(2020, 2) == 29
    assert days_in_month(2019, 2) == 28
    assert days_in_month(2019, 4) == 30
    assert days_in_month(2019, 12) == 31


def test_days_in_month_rejects_invalid_month() -> None:
    with pytest.raises(ValueError, match="between 1 and 12"):
        days_in_month(2020, 13)


def test_conversions_agree_with_standard_library() -> None:
    for ordinal in range(1, date.max.toordinal() + 1, 997):
        expected = date.fromordinal(ordinal)
        days = ordinal - ORDINAL_OFFSET

        assert civil_from_days(days) == (expected.year, expected.month, expected.day)
        assert days_from_civil(expected.year, expected.month, expected.day) == days
        assert weekday_from_days(days) == expected.weekday()


def test_days_carry_into_neighbouring_months() -> None:
    assert days_from_civil(2020, 1, 32) == days_from_civil(2020, 2, 1)
    assert days_from_civil(2020, 1, 0) == days_from_civil(2019, 12, 31)
    assert days_from_civil(2020, 1, -1) == days_from_civil(2019, 12, 30)
    assert days_from_civil(2020, 3, 0) == days_from_civil(2020, 2, 29)


def test_months_carry_into_neighbouring_years() -> None:
    assert days_from_civil(2020, 13, 1) == days_from_civil(2021, 1, 1)
    assert days_from_civil(2020, 0, 1) == days_from_civil(2019, 12, 1)
    assert days_from_civil(2020, -11, 1) == days_from_civil(2019, 1, 1)


def test_negative_years_round_trip() -> None:
    for year in (-10_000, -401, -400, -1, 0):
        for month in (1, 2, 3, 12):
            days = days_from_civil(year, month, 1)
            assert civil_from_days(days) == (year, month, 1)

    assert civil_from_days(days_from_civil(0, 3, 1) - 1) == (0, 2, 29)


def test_day_of_year() -> None:
    assert day_of_year(days_from_civil(2020, 1, 1)) == 1
    assert day_of_year(days_from_civil(2020, 12, 31)) == 366
    assert day_of_year(days_from_civil(2021, 12, 31)) == 365
