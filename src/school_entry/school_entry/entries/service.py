from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..auth.model import Principal
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.fallback import demo_fallback
from ..common.validators import require_present
from ..core.constants import DEMO_MODE
from ..core.exceptions import NotFoundError
from ..students.demo import find_demo_student
from ..students.repository import StudentRepository
from .demo import demo_entries
from .model import EntryConfirmation, EntryListing
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Use cases: record a student's entry and list the entries of a day.

    Both degrade to the canned demo data when the store fails, and mark the
    result with ``mode="demo"`` whenever they do.
    """

    def __init__(
        self,
        entries: EntryRepository,
        students: StudentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._entries = entries
        self._students = students
        self._clock = clock

    def _record_demo(self, principal: Principal, student_id: Any) -> EntryConfirmation:
        # Demo acknowledgements are never persisted.
        student = find_demo_student(student_id)
        if student is None:
            raise NotFoundError("Student not found")
        return EntryConfirmation(
            student=student,
            entry_time=self._clock(),
            scanned_by=principal.name,
            mode=DEMO_MODE,
        )

    @demo_fallback(_record_demo)
    def record(self, principal: Principal, student_id: Any) -> EntryConfirmation:
        student_id = require_present(student_id, "Student ID is required")

        student = self._students.get_by_student_id(student_id)
        if student is None:
            return self._record_demo(principal, student_id)

        now = self._clock()
        entry_id = self._entries.create_entry(
            student_id=student.student_id,
            entry_time=now,
            entry_date=now.date(),
            scanned_by=principal.id,
        )
        logger.info("Entry %s recorded for %s by user %s", entry_id, student.student_id, principal.id)
        return EntryConfirmation(student=student, entry_time=now, scanned_by=principal.name)

    def _list_demo(self, principal: Principal, date_str: Optional[str] = None) -> EntryListing:
        now = self._clock()
        target = parse_iso_date(date_str) if date_str else now.date()
        entries = demo_entries(now) if target == now.date() else []
        return EntryListing(entries=entries, entry_date=target, mode=DEMO_MODE)

    @demo_fallback(_list_demo)
    def list_for_date(self, principal: Principal, date_str: Optional[str] = None) -> EntryListing:
        target = parse_iso_date(date_str) if date_str else self._clock().date()
        return EntryListing(entries=list(self._entries.list_by_date(target)), entry_date=target)
