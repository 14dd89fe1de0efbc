from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabasePool


@contextmanager
def db_cursor(pool: DatabasePool, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success.

    mysql-connector errors surface as StorageError so services can tell an
    unreachable store apart from an empty result.
    """
    with pool.connection() as conn:
        try:
            cur = conn.cursor(dictionary=dictionary)
            try:
                yield conn, cur
                conn.commit()
            finally:
                cur.close()
        except mysql.connector.Error as e:
            raise StorageError("Database operation failed") from e
        except Exception:
            conn.rollback()
            raise


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
