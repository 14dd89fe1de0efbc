from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


def _to_student(row: Dict[str, Any]) -> Student:
    return Student(
        student_id=row["student_id"],
        name=row["name"],
        class_name=row["class"],
        grade=row["grade"],
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                "SELECT student_id, name, class, grade FROM students WHERE student_id=%s",
                (student_id,),
            )
            row = fetchone(cur)
            # The column collation may match case or trailing-space variants.
            if not row or row["student_id"] != student_id:
                return None
            return _to_student(row)

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT student_id, name, class, grade FROM students ORDER BY name")
            return [_to_student(r) for r in fetchall(cur)]
