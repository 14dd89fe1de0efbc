from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        id=int(row["id"]),
        email=row["email"],
        password=row["password"],
        role=Role(row["role"]),
        name=row["name"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT id, email, password, role, name FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None
