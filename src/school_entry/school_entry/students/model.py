from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Student:
    student_id: str
    name: str
    class_name: str
    grade: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.student_id, "name": self.name, "class": self.class_name, "grade": self.grade}
