"""Canned roster served in demo mode and used to seed a fresh database."""

from __future__ import annotations

from typing import Optional

from .model import Student

DEMO_STUDENTS = (
    Student("STU001", "Alice Johnson", "10A", "10th"),
    Student("STU002", "Bob Smith", "10A", "10th"),
    Student("STU003", "Charlie Brown", "10B", "10th"),
    Student("STU004", "Diana Prince", "11A", "11th"),
    Student("STU005", "Edward Wilson", "11A", "11th"),
    Student("STU006", "Fiona Green", "11B", "11th"),
    Student("STU007", "George Miller", "12A", "12th"),
    Student("STU008", "Hannah Lee", "12A", "12th"),
)

_BY_ID = {s.student_id: s for s in DEMO_STUDENTS}


def find_demo_student(student_id: str) -> Optional[Student]:
    return _BY_ID.get(student_id)
