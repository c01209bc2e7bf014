"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so request threads can borrow
and return connections concurrently.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool
from psycopg2.extensions import connection as Connection

from errors import PoolError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """
    A bounded source of reusable database connections.

    Instances are passed explicitly to whoever needs a connection; there is
    no module-level pool. Borrow with :meth:`connection`.
    """

    def __init__(self, raw_pool: pool.AbstractConnectionPool, timeout: float = 30.0) -> None:
        self._pool = raw_pool
        self._timeout = timeout
        # One slot per connection the raw pool may hand out; callers wait here.
        self._slots = threading.BoundedSemaphore(raw_pool.maxconn)

    @classmethod
    def from_settings(
        cls, dsn: str, min_size: int = 1, max_size: int = 16, timeout: float = 30.0
    ) -> "ConnectionPool":
        """
        Open a new pool against ``dsn``.

        Args:
            dsn: libpq connection string or URL.
            min_size: Connections opened eagerly.
            max_size: Maximum number of connections borrowed at once.
            timeout: Seconds a caller waits for a free connection.

        Raises:
            PoolError: If the database is unreachable or the bounds are invalid.
        """
        try:
            raw_pool = pool.ThreadedConnectionPool(min_size, max_size, dsn)
        except (psycopg2.Error, pool.PoolError) as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise PoolError(str(e)) from e
        # putconn closes returned connections once minconn are idle; keep up to max_size.
        raw_pool.minconn = max_size
        logger.info(
            f"Database connection pool initialized "
            f"(min={min_size}, max={max_size}, timeout={timeout}s)."
        )
        return cls(raw_pool, timeout)

    def acquire(self) -> Connection:
        """
        Borrow a connection, waiting up to the pool timeout for a free one.

        Raises:
            PoolError: If no connection frees up in time or a new one cannot be opened.
        """
        if not self._slots.acquire(timeout=self._timeout):
            logger.warning(f"No free connection after {self._timeout}s")
            raise PoolError(f"timed out after {self._timeout}s waiting for a free connection")
        try:
            conn = self._pool.getconn()
        except pool.PoolError as e:
            self._slots.release()
            logger.warning(f"Could not borrow a connection: {e}")
            raise PoolError(str(e)) from e
        except psycopg2.Error as e:
            self._slots.release()
            logger.error(f"Could not open a database connection: {e}")
            raise PoolError(str(e).strip()) from e
        conn.autocommit = True
        return conn

    def release(self, conn: Connection) -> None:
        """Return a connection; broken ones are discarded rather than reused."""
        try:
            self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            self._slots.release()

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """
        Scoped acquisition: the connection goes back to the pool on every
        exit path, including exceptions raised inside the block.
        """
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")
