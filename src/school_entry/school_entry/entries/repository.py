from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import EntryView


class EntryRepository(Protocol):
    def create_entry(
        self,
        *,
        student_id: str,
        entry_time: datetime,
        entry_date: date,
        scanned_by: Optional[int],
    ) -> int:
        raise NotImplementedError

    def list_by_date(self, entry_date: date) -> Sequence[EntryView]:
        """Entries of one day, most recent first."""
        raise NotImplementedError
