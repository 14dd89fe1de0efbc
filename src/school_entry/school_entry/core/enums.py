from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Staff roles. A principal may do everything a teacher may."""

    TEACHER = "teacher"
    PRINCIPAL = "principal"
