from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_QUEUE_LIMIT
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    # 0 = callers wait for a free connection without limit.
    queue_limit: int = DEFAULT_QUEUE_LIMIT

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "school_system")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            queue_limit=int(db_config.get("queue_limit", DEFAULT_QUEUE_LIMIT)),
        )


class DatabasePool:
    """Shared, bounded connection pool.

    The underlying mysql-connector pool is built on first use. At most
    ``pool_size`` connections are handed out at once; further callers block
    until one is returned (no timeout). With a positive ``queue_limit``,
    callers beyond that many waiters get a StorageError instead of waiting.
    """

    def __init__(self, config: DBConfig, *, pool_factory: Optional[Callable[..., Any]] = None):
        if not 1 <= config.pool_size <= pooling.CNX_POOL_MAXSIZE:
            raise ValueError(f"pool_size must be between 1 and {pooling.CNX_POOL_MAXSIZE}")
        self._config = config
        self._pool_factory = pool_factory or pooling.MySQLConnectionPool
        self._pool = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(config.pool_size)
        self._waiting = 0

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self):
        with self._lock:
            if self._pool is None:
                logger.info(
                    "Creating connection pool %s@%s:%s/%s (size=%s)",
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                    self._config.pool_size,
                )
                self._pool = self._pool_factory(
                    pool_name="school_entry",
                    pool_size=self._config.pool_size,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
            return self._pool

    def _acquire_slot(self) -> None:
        if self._slots.acquire(blocking=False):
            return

        with self._lock:
            if self._config.queue_limit and self._waiting >= self._config.queue_limit:
                raise StorageError("Database connection queue is full")
            self._waiting += 1
        try:
            self._slots.acquire()
        finally:
            with self._lock:
                self._waiting -= 1

    @contextmanager
    def connection(self) -> Iterator[Any]:
        self._acquire_slot()
        try:
            try:
                conn = self._get_pool().get_connection()
            except mysql.connector.Error as e:
                raise StorageError("Database connection failed") from e
            try:
                yield conn
            finally:
                # Returns the connection to the pool.
                conn.close()
        finally:
            self._slots.release()
