from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..common.fallback import demo_fallback
from ..core.constants import DEMO_MODE
from .demo import DEMO_STUDENTS
from .model import Student
from .repository import StudentRepository


@dataclass(frozen=True)
class StudentListing:
    students: Sequence[Student]
    mode: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": True, "students": [s.to_dict() for s in self.students]}
        if self.mode:
            body["mode"] = self.mode
        return body


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def _list_demo(self) -> StudentListing:
        return StudentListing(
            students=sorted(DEMO_STUDENTS, key=lambda s: s.name),
            mode=DEMO_MODE,
        )

    @demo_fallback(_list_demo)
    def list_all(self) -> StudentListing:
        return StudentListing(students=list(self._students.list_all()))
