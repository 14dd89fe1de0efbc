from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Staff account as stored in the ``users`` table."""

    id: int
    email: str
    password: str
    role: Role
    name: str
