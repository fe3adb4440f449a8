from __future__ import annotations

from importlib import metadata

from .date import Date
from .enums import Month, Weekday
from .errors import DateError, DateParseError, DateRangeError, DateTypeError

try:
    __version__ = metadata.version("civildate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Date",
    "DateError",
    "DateParseError",
    "DateRangeError",
    "DateTypeError",
    "Month",
    "Weekday",
    "__version__",
]
