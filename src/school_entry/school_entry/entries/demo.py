"""Canned entries served in demo mode. They only ever describe today."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from .model import EntryView

# (id, student_id, student_name, class, grade, scanned_by_name, hours before now)
_DEMO_ENTRIES = (
    (1, "STU001", "Alice Johnson", "10A", "10th", "Mr. John Smith", 2.0),
    (2, "STU003", "Charlie Brown", "10B", "10th", "Ms. Emily Davis", 1.5),
    (3, "STU005", "Edward Wilson", "11A", "11th", "Mr. John Smith", 1.0),
)


def demo_entries(now: datetime) -> List[EntryView]:
    """The fixed sample entries relative to ``now``, most recent first."""
    out = [
        EntryView(
            id=entry_id,
            student_id=student_id,
            entry_time=now - timedelta(hours=hours_ago),
            entry_date=now.date(),
            scanned_by=None,
            student_name=name,
            class_name=class_name,
            grade=grade,
            scanned_by_name=scanned_by_name,
        )
        for entry_id, student_id, name, class_name, grade, scanned_by_name, hours_ago in _DEMO_ENTRIES
    ]
    out.sort(key=lambda e: e.entry_time, reverse=True)
    return out
