"""Text rendering for civil dates.

``format_date`` understands a small strftime-like template language:

==========  =====================================================
``%Y``      year, at least four digits, ``-`` prefixed when negative
``%y``      last two digits of the year
``%m``      month, two digits (``%-m`` without padding)
``%d``      day of month, two digits (``%-d`` without padding)
``%e``      day of month, padded with a space to width two
``%B``      full month name (``January``)
``%b``      abbreviated month name (``Jan``)
``%A``      full weekday name (``Monday``)
``%a``      abbreviated weekday name (``Mon``)
``%j``      day of year, three digits
``%u``      ISO weekday number, Monday is 1
``%%``      a literal ``%``
==========  =====================================================

Names are always English; there is no locale support.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from civildate.calendar import civil_from_days, day_of_year, weekday_from_days
from civildate.enums import Month, Weekday
from civildate.errors import DateParseError

if TYPE_CHECKING:
    from collections.abc import Callable

ISO_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_DIRECTIVE: Final[re.Pattern[str]] = re.compile(r"%(-?)(.?)", re.DOTALL)


def format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def format_iso(days: int) -> str:
    year, month, day = civil_from_days(days)
    return f"{format_year(year)}-{month:02d}-{day:02d}"


def _padded(value: int, width: int, *, pad: bool) -> str:
    return f"{value:0{width}d}" if pad else str(value)


def _renderers(days: int) -> dict[str, Callable[[bool], str]]:
    year, month, day = civil_from_days(days)
    month_name = str(Month(month))
    weekday = weekday_from_days(days)
    weekday_name = str(Weekday(weekday))
    return {
        "Y": lambda _pad: format_year(year),
        "y": lambda pad: _padded(abs(year) % 100, 2, pad=pad),
        "m": lambda pad: _padded(month, 2, pad=pad),
        "d": lambda pad: _padded(day, 2, pad=pad),
        "e": lambda pad: f"{day:2d}" if pad else str(day),
        "B": lambda _pad: month_name,
        "b": lambda _pad: month_name[:3],
        "A": lambda _pad: weekday_name,
        "a": lambda _pad: weekday_name[:3],
        "j": lambda pad: _padded(day_of_year(days), 3, pad=pad),
        "u": lambda _pad: str(weekday + 1),
        "%": lambda _pad: "%",
    }


def format_date(days: int, layout: str) -> str:
    """Render the day number ``days`` through ``layout``."""

    renderers = _renderers(days)

    def _substitute(match: re.Match[str]) -> str:
        flag, directive = match.groups()
        renderer = renderers.get(directive)
        if renderer is None:
            raise DateParseError(layout, f"unknown format directive %{flag}{directive}")
        return renderer(not flag)

    return _DIRECTIVE.sub(_substitute, layout)


__all__ = ["ISO_PATTERN", "format_date", "format_iso", "format_year"]
