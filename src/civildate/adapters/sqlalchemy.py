"""SQLAlchemy column type storing ``Date`` values as UTC midnight timestamps."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import DateTime, Dialect, TypeDecorator

from civildate.date import Date
from civildate.errors import DateError

log = logging.getLogger(__name__)


class CivilDate(TypeDecorator[Date]):
    """Persist ``Date`` through ``Date.value`` and load it through ``Date.from_value``.

    Bind parameters accept anything ``Date.from_value`` accepts, so ISO strings
    and ``datetime`` objects can be used in filters as well. SQL ``NULL`` maps
    to ``None`` in both directions.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    @property
    def python_type(self) -> type[Date]:
        return Date

    def process_bind_param(self, value: object | None, dialect: Dialect) -> object | None:
        _ = dialect
        if value is None:
            return None
        return Date.from_value(value).value()

    def process_result_value(self, value: object | None, dialect: Dialect) -> Date | None:
        _ = dialect
        if value is None:
            return None
        # Stored values are UTC midnight whatever the session zone.
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(UTC)
        try:
            return Date.from_value(value)
        except DateError:
            log.warning("Stored value %r cannot be read as a date", value)
            raise


__all__ = ["CivilDate"]
