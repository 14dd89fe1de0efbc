from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from src.school_entry.school_entry.auth.model import Principal
from src.school_entry.school_entry.auth.tokens import TokenService
from src.school_entry.school_entry.container import wire
from src.school_entry.school_entry.core.enums import Role
from src.school_entry.school_entry.core.exceptions import StorageError
from src.school_entry.school_entry.entries.model import EntryView
from src.school_entry.school_entry.entries.service import EntryService
from src.school_entry.school_entry.main import create_app
from src.school_entry.school_entry.students.model import Student
from src.school_entry.school_entry.users.model import User
from src.school_entry.school_entry.users.passwords import encode_password

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


@dataclass
class InMemoryUsers:
    users: dict[str, User]
    fail: bool = False

    def get_by_email(self, email: str) -> Optional[User]:
        if self.fail:
            raise StorageError("Database connection failed")
        return self.users.get(email)

    def find_by_id(self, user_id: int) -> Optional[User]:
        if self.fail:
            raise StorageError("Database connection failed")
        return next((u for u in self.users.values() if u.id == user_id), None)


@dataclass
class InMemoryStudents:
    students: dict[str, Student]
    fail: bool = False

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        if self.fail:
            raise StorageError("Database connection failed")
        return self.students.get(student_id)

    def list_all(self):
        if self.fail:
            raise StorageError("Database connection failed")
        return sorted(self.students.values(), key=lambda s: s.name)


@dataclass
class InMemoryEntries:
    students: InMemoryStudents
    users: InMemoryUsers
    rows: list[dict] = field(default_factory=list)
    fail_reads: bool = False
    fail_writes: bool = False

    def create_entry(self, *, student_id: str, entry_time: datetime, entry_date: date, scanned_by: Optional[int]) -> int:
        if self.fail_writes:
            raise StorageError("Database operation failed")
        entry_id = len(self.rows) + 1
        self.rows.append(
            {
                "id": entry_id,
                "student_id": student_id,
                "entry_time": entry_time,
                "entry_date": entry_date,
                "scanned_by": scanned_by,
            }
        )
        return entry_id

    def list_by_date(self, entry_date: date):
        if self.fail_reads:
            raise StorageError("Database operation failed")
        out = []
        for r in self.rows:
            if r["entry_date"] != entry_date:
                continue
            s = self.students.students[r["student_id"]]
            u = self.users.find_by_id(r["scanned_by"]) if r["scanned_by"] is not None else None
            out.append(
                EntryView(
                    id=r["id"],
                    student_id=r["student_id"],
                    entry_time=r["entry_time"],
                    entry_date=r["entry_date"],
                    scanned_by=r["scanned_by"],
                    student_name=s.name,
                    class_name=s.class_name,
                    grade=s.grade,
                    scanned_by_name=u.name if u else None,
                )
            )
        out.sort(key=lambda e: e.entry_time, reverse=True)
        return out


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 15, 0)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers(
        {
            # Plain-text and encoded passwords are both accepted.
            "principal@school.edu": User(1, "principal@school.edu", "principal123", Role.PRINCIPAL, "Dr. Sarah Johnson"),
            "teacher1@school.edu": User(2, "teacher1@school.edu", encode_password("teacher123"), Role.TEACHER, "Mr. John Smith"),
        }
    )


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents(
        {
            "STU001": Student("STU001", "Alice Johnson", "10A", "10th"),
            "STU003": Student("STU003", "Charlie Brown", "10B", "10th"),
            # Only in the store, not in the demo roster.
            "STU100": Student("STU100", "Zoe Quinn", "9C", "9th"),
        }
    )


@pytest.fixture
def entries_repo(students_repo, users_repo) -> InMemoryEntries:
    return InMemoryEntries(students_repo, users_repo)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def entry_service(entries_repo, students_repo, fixed_now) -> EntryService:
    return EntryService(entries_repo, students_repo, clock=lambda: fixed_now)


@pytest.fixture
def teacher() -> Principal:
    return Principal(id=2, email="teacher1@school.edu", role=Role.TEACHER, name="Mr. John Smith")


@pytest.fixture
def principal() -> Principal:
    return Principal(id=1, email="principal@school.edu", role=Role.PRINCIPAL, name="Dr. Sarah Johnson")


@pytest.fixture
def container(users_repo, students_repo, entries_repo, token_service, entry_service):
    return wire(
        users_repo=users_repo,
        students_repo=students_repo,
        entries_repo=entries_repo,
        token_service=token_service,
        entry_service=entry_service,
    )


@pytest.fixture
def app(container):
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_header(token_service, teacher):
    return {"Authorization": f"Bearer {token_service.issue(teacher)}"}
