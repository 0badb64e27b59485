"""Bounded SQLite connection pool on top of SQLAlchemy's ``QueuePool``.

``pool_size`` connections at most (no overflow); a checkout waits up to
``timeout`` seconds and then raises ``PoolTimeout``. ``connection()`` is the
only sanctioned way to use one: it commits on success, rolls back on error and
always returns the connection to the pool.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import logging
import sqlite3
from typing import Iterator

from sqlalchemy import exc as sa_exc
from sqlalchemy.pool import QueuePool

logger = logging.getLogger("rate_directory.db.pool")

PoolTimeout = sa_exc.TimeoutError


class PoolClosed(Exception):
    pass


class ConnectionPool:
    def __init__(self, db_path: Path, size: int = 10, timeout: float = 5.0):
        if size < 1:
            raise ValueError("pool size must be at least 1")
        self.db_path = db_path
        self.size = size
        self.timeout = timeout
        self._pool = QueuePool(
            self._connect,
            pool_size=size,
            max_overflow=0,
            timeout=timeout,
            use_lifo=True,
        )
        self._closed = False

    def _connect(self) -> sqlite3.Connection:
        # Connections move between request threads; each is used by one at a time.
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        logger.debug("opened connection to %s", self.db_path)
        return conn

    @property
    def in_use(self) -> int:
        return self._pool.checkedout()

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        if self._closed:
            raise PoolClosed("connection pool is closed")
        conn = self._pool.connect()
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()  # back to the pool, not a real close

    def close(self) -> None:
        self._closed = True
        self._pool.dispose()
        logger.debug("pool disposed (%s connections still checked out)", self.in_use)
