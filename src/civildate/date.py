"""The ``Date`` value type: a civil date without time of day or timezone.

A ``Date`` stores a single day number (see ``civildate.calendar``). Every way
into the type resolves a ``(year, month, day)`` triple through
``days_from_civil``, so a ``Date`` never carries sub-day fields or an offset.

Construction from numbers normalizes, parsing from text validates::

    >>> Date(2020, 1, 32)
    Date(2020, 2, 1)
    >>> Date.parse("2020-01-32")
    Traceback (most recent call last):
    ...
    civildate.errors.DateParseError: cannot parse '2020-01-32' as date: day out of range
"""

from __future__ import annotations

import operator
from datetime import UTC, date, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final, Self

from pydantic_core import core_schema

from civildate.calendar import (
    ORDINAL_OFFSET,
    civil_from_days,
    day_of_year,
    days_from_civil,
    days_in_month,
    weekday_from_days,
)
from civildate.enums import Month, Weekday
from civildate.errors import DateError, DateParseError, DateRangeError, DateTypeError
from civildate.formatting import ISO_PATTERN, format_date, format_iso

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

log = getLogger(__name__)

_ZERO_DAYS: Final[int] = days_from_civil(1, 1, 1)


def _parse_days(text: str) -> int:
    match = ISO_PATTERN.fullmatch(text)
    if match is None:
        raise DateParseError(text, "expected layout YYYY-MM-DD")
    year, month, day = (int(group) for group in match.groups())
    if not 1 <= month <= 12:
        raise DateParseError(text, "month out of range")
    if not 1 <= day <= days_in_month(year, month):
        raise DateParseError(text, "day out of range")
    return days_from_civil(year, month, day)


def _days_from_value(value: object) -> int:
    if value is None:
        return _ZERO_DAYS
    if isinstance(value, Date):
        return value._days
    if isinstance(value, bytes | bytearray | memoryview):
        raw = bytes(value)
        if not raw:
            return _ZERO_DAYS
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as exc:
            raise DateParseError(repr(raw), "not ASCII text") from exc
        return _parse_days(text)
    if isinstance(value, str):
        if not value:
            return _ZERO_DAYS
        return _parse_days(value)
    # datetime is a date subclass; only its civil fields are kept.
    if isinstance(value, date):
        return days_from_civil(value.year, value.month, value.day)
    raise DateTypeError(value)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    ``Date()`` is the zero value ``0001-01-01``. Years may be zero or negative.
    """

    __slots__ = ("_days",)

    _days: int

    def __init__(self, year: int = 1, month: int = 1, day: int = 1) -> None:
        self._days = days_from_civil(
            operator.index(year), operator.index(month), operator.index(day)
        )

    @classmethod
    def _from_days(cls, days: int) -> Self:
        instance = cls.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an ISO 8601 extended date (``YYYY-MM-DD``).

        The layout is strict: four digit unsigned year, no time component and
        no offset. Unlike the constructor, out of range months and days are
        rejected instead of normalized.
        """

        if not isinstance(text, str):
            raise DateTypeError(text)
        return cls._from_days(_parse_days(text))

    @classmethod
    def from_value(cls, value: object) -> Self:
        """Return a new ``Date`` converted from ``value`` following ``scan``."""

        instance = cls()
        instance.scan(value)
        return instance

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Create a date from a proleptic ordinal, 1 is ``0001-01-01``."""

        return cls._from_days(operator.index(ordinal) - ORDINAL_OFFSET)

    def to_ordinal(self) -> int:
        return self._days + ORDINAL_OFFSET

    # -- conversion hooks -------------------------------------------------

    def scan(self, value: object) -> None:
        """Overwrite this date from an external value (usually a database cell).

        Accepts ``None``, ``str``, ``bytes``-like objects, ``datetime.date`` and
        ``datetime.datetime`` (time of day and offset are dropped). ``None``
        and empty text reset to the zero value. On failure the date is reset
        to the zero value before the error propagates.
        """

        try:
            self._days = _days_from_value(value)
        except DateError:
            self._days = _ZERO_DAYS
            log.debug("Reset date after failed scan of %r", value)
            raise

    def value(self) -> datetime:
        """Return the date as an aware UTC ``datetime`` at midnight.

        Raises ``DateRangeError`` outside years 1..9999, which ``datetime`` cannot
        represent.
        """

        year, month, day = civil_from_days(self._days)
        try:
            return datetime(year, month, day, tzinfo=UTC)
        except ValueError as exc:
            raise DateRangeError(f"{self} is outside the datetime range") from exc

    def to_date(self) -> date:
        year, month, day = civil_from_days(self._days)
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise DateRangeError(f"{self} is outside the datetime range") from exc

    def marshal_text(self) -> bytes:
        return str(self).encode("ascii")

    def unmarshal_text(self, data: bytes | str | None) -> None:
        self.scan(data)

    # -- accessors --------------------------------------------------------

    @property
    def year(self) -> int:
        return civil_from_days(self._days)[0]

    @property
    def month(self) -> Month:
        return Month(civil_from_days(self._days)[1])

    @property
    def day(self) -> int:
        return civil_from_days(self._days)[2]

    @property
    def weekday(self) -> Weekday:
        return Weekday(weekday_from_days(self._days))

    @property
    def year_day(self) -> int:
        """Day of the year, 1 for January 1st."""
        return day_of_year(self._days)

    def is_zero(self) -> bool:
        """Report whether this is the zero value ``0001-01-01``."""
        return self._days == _ZERO_DAYS

    # -- comparison and arithmetic ----------------------------------------

    def before(self, other: Date) -> bool:
        return self._days < other._days

    def after(self, other: Date) -> bool:
        return self._days > other._days

    def equal(self, other: Date) -> bool:
        return civil_from_days(self._days) == civil_from_days(other._days)

    def sub(self, other: Date) -> float:
        """Return ``self - other`` in whole days."""
        return float(self._days - other._days)

    def add_days(self, days: int) -> Self:
        return self._from_days(self._days + operator.index(days))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self._days)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.before(other)

    def __add__(self, days: int) -> Self:
        if not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    __radd__ = __add__

    def __sub__(self, other: Date | int) -> float | Self:
        if isinstance(other, Date):
            return self.sub(other)
        if isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented

    # -- text -------------------------------------------------------------

    def isoformat(self) -> str:
        return format_iso(self._days)

    def format(self, layout: str) -> str:
        """Render the date through a template, see ``civildate.formatting``."""
        return format_date(self._days, layout)

    def __str__(self) -> str:
        return self.isoformat()

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return self.format(spec)

    def __repr__(self) -> str:
        year, month, day = civil_from_days(self._days)
        return f"{type(self).__name__}({year}, {month}, {day})"

    # -- pydantic ---------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        _ = source_type, handler
        return core_schema.no_info_plain_validator_function(
            _validate_for_pydantic,
            serialization=core_schema.to_string_ser_schema(when_used="json-unless-none"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema, handler
        return {"type": "string", "format": "date"}


def _validate_for_pydantic(value: object) -> Date:
    try:
        return Date.from_value(value)
    except DateTypeError as exc:
        # pydantic only turns ValueError into validation errors
        raise ValueError(str(exc)) from exc


__all__ = ["Date"]
