from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall
from .model import EntryView
from .repository import EntryRepository


class MySQLEntryRepository(EntryRepository):
    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def create_entry(
        self,
        *,
        student_id: str,
        entry_time: datetime,
        entry_date: date,
        scanned_by: Optional[int],
    ) -> int:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                INSERT INTO entries(student_id, entry_time, entry_date, scanned_by)
                VALUES(%s,%s,%s,%s)
                """,
                (student_id, entry_time, entry_date, scanned_by),
            )
            return int(cur.lastrowid)

    def list_by_date(self, entry_date: date) -> Sequence[EntryView]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.student_id, e.entry_time, e.entry_date, e.scanned_by,
                       s.name AS student_name, s.class, s.grade,
                       u.name AS scanned_by_name
                FROM entries e
                JOIN students s ON e.student_id = s.student_id
                LEFT JOIN users u ON e.scanned_by = u.id
                WHERE e.entry_date=%s
                ORDER BY e.entry_time DESC
                """,
                (entry_date,),
            )
            rows = fetchall(cur)
            return [
                EntryView(
                    id=int(r["id"]),
                    student_id=r["student_id"],
                    entry_time=r["entry_time"],
                    entry_date=r["entry_date"],
                    scanned_by=r.get("scanned_by"),
                    student_name=r["student_name"],
                    class_name=r["class"],
                    grade=r["grade"],
                    scanned_by_name=r.get("scanned_by_name"),
                )
                for r in rows
            ]
