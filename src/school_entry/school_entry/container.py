from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from .auth.tokens import TokenService
from .core.constants import DEFAULT_JWT_SECRET, DEFAULT_TOKEN_TTL_HOURS
from .database.connection import DatabasePool, DBConfig
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    pool: DatabasePool | None

    users_repo: UserRepository
    students_repo: StudentRepository
    entries_repo: EntryRepository

    token_service: TokenService
    auth_service: AuthService
    student_service: StudentService
    entry_service: EntryService


def wire(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    entries_repo: EntryRepository,
    token_service: TokenService,
    pool: DatabasePool | None = None,
    entry_service: EntryService | None = None,
) -> Container:
    """Assemble services over the given repositories (MySQL or in-memory)."""
    return Container(
        pool=pool,
        users_repo=users_repo,
        students_repo=students_repo,
        entries_repo=entries_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        student_service=StudentService(students_repo),
        entry_service=entry_service or EntryService(entries_repo, students_repo),
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str | None = None,
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
) -> Container:
    if not jwt_secret:
        logger.warning("JWT_SECRET is not set; falling back to the built-in default secret")
        jwt_secret = DEFAULT_JWT_SECRET

    pool = DatabasePool(DBConfig.from_dict(db_config))

    return wire(
        users_repo=MySQLUserRepository(pool),
        students_repo=MySQLStudentRepository(pool),
        entries_repo=MySQLEntryRepository(pool),
        token_service=TokenService(jwt_secret, ttl=timedelta(hours=int(token_ttl_hours))),
        pool=pool,
    )
