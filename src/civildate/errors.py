"""Error definitions for civil date handling."""

from __future__ import annotations


class DateError(Exception):
    """Base class for every error raised by civildate."""


class DateParseError(DateError, ValueError):
    """Raised when text does not encode a date in the expected layout."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"cannot parse {text!r} as date: {reason}")
        self.text = text
        self.reason = reason


class DateTypeError(DateError, TypeError):
    """Raised when a value of an unsupported type is converted to a date."""

    def __init__(self, value: object) -> None:
        super().__init__(f"{type(value).__name__} {value!r} is not a meaningful date")
        self.value = value


class DateRangeError(DateError, OverflowError):
    """Raised when a date cannot be represented by the standard library types."""
