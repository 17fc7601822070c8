"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for connection reuse and exposes a
small provider object that repositories use to acquire and release
connections.
"""

from typing import Optional

import psycopg2
from psycopg2 import pool
from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
    dsn: Optional[str] = None,
) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        dsn: Connection string; defaults to ``config.DATABASE_URL``.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    The pool rolls back any transaction still open on the connection.
    """
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


class PoolConnectionProvider:
    """
    Connection provider backed by the module-level pool.

    Repositories only talk to this object, so tests can hand them a
    provider that returns fake connections instead.
    """

    def acquire(self):
        """Borrow a connection; may raise a connectivity error."""
        return get_connection()

    def release(self, conn) -> None:
        """Give a borrowed connection back to the pool."""
        release_connection(conn)

    def last_insert_id(self, conn, table: str, id_column: str) -> int:
        """
        Identity value produced by the last insert into `table` on `conn`.

        Uses the column's backing sequence. ``currval`` is scoped to the
        session, so concurrent inserts on other connections do not leak in.
        """
        sql = "SELECT currval(pg_get_serial_sequence(%s, %s));"
        with conn.cursor() as cur:
            cur.execute(sql, (table, id_column))
            return cur.fetchone()[0]
