from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..students.model import Student


@dataclass(frozen=True)
class EntryView:
    """Read model for the dashboard: entry joined with student and recorder."""

    id: int
    student_id: str
    entry_time: datetime
    entry_date: date
    scanned_by: Optional[int]
    student_name: str
    class_name: str
    grade: str
    scanned_by_name: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "entry_time": self.entry_time.isoformat(),
            "entry_date": self.entry_date.isoformat(),
            "scanned_by": self.scanned_by,
            "student_name": self.student_name,
            "class": self.class_name,
            "grade": self.grade,
            "scanned_by_name": self.scanned_by_name,
        }


@dataclass(frozen=True)
class EntryConfirmation:
    student: Student
    entry_time: datetime
    scanned_by: str
    mode: Optional[str] = None

    @property
    def is_demo(self) -> bool:
        return self.mode is not None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "success": True,
            "message": "Entry recorded successfully (Demo Mode)" if self.is_demo else "Entry recorded successfully",
            "student": self.student.to_dict(),
            "entryTime": self.entry_time.isoformat(),
            "scannedBy": self.scanned_by,
        }
        if self.mode:
            body["mode"] = self.mode
        return body


@dataclass(frozen=True)
class EntryListing:
    entries: Sequence[EntryView]
    entry_date: date
    mode: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "success": True,
            "entries": [e.to_dict() for e in self.entries],
            "date": self.entry_date.isoformat(),
        }
        if self.mode:
            body["mode"] = self.mode
        return body
