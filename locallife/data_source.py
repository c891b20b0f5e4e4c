"""
LocalLife Data Sources

Read-only suppliers of daily records. The engine takes one snapshot
per analysis run via ``fetch_all()``.
"""

from typing import Callable, Iterable, List, Protocol, Tuple

from sqlalchemy.orm import Session

from .models import DayRecordRow
from .records import DailyRecord


class DataSource(Protocol):
    """Anything that can hand over the full set of daily records."""

    def fetch_all(self) -> Iterable[DailyRecord]:
        ...


class InMemoryDataSource:
    """Data source backed by an immutable tuple of records."""

    def __init__(self, records: Iterable[DailyRecord] = ()):
        self._records: Tuple[DailyRecord, ...] = tuple(records)

    def fetch_all(self) -> List[DailyRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


class DatabaseDataSource:
    """
    Data source reading the ``day_records`` table.

    A fresh session is opened from the injected factory for every
    fetch, so concurrent analysis runs never share a session.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def fetch_all(self) -> List[DailyRecord]:
        db = self.session_factory()
        try:
            rows = db.query(DayRecordRow).order_by(DayRecordRow.date).all()
            return [DailyRecord.from_row(row) for row in rows]
        finally:
            db.close()
