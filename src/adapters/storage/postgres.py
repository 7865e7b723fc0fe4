"""
PostgreSQL storage adapter - Implements KeyValueStore protocol.

This module provides the PostgreSQL implementation of the domain's
key-value store port using psycopg3 with raw SQL.

Every registry operation runs in transaction(): one connection, one
database transaction. Transaction-scoped advisory locks on the lock
keys serialize operations touching the same entries across workers,
and staged writes are upserted just before commit, so a failure leaves
no partial state behind.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from psycopg import Connection
from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)

GET_SQL = "SELECT value FROM kv_store WHERE key = %s"

UPSERT_SQL = """
    INSERT INTO kv_store (key, value, updated_at)
    VALUES (%s, %s, NOW())
    ON CONFLICT (key) DO UPDATE
    SET value = EXCLUDED.value,
        updated_at = NOW()
"""

# Blocks until no other open transaction holds the same key's lock
LOCK_SQL = "SELECT pg_advisory_xact_lock(hashtextextended(%s, 0))"


class PostgresTransaction:
    """Implements StoreTransaction protocol on one open connection."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn
        self._staged: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self._staged:
            return self._staged[key]

        with self._conn.cursor() as cursor:
            cursor.execute(GET_SQL, (key,))
            row = cursor.fetchone()
            return None if row is None else row[0]

    def write(self, batch: Mapping[str, str]) -> None:
        self._staged.update(batch)

    def flush(self) -> None:
        """Upsert staged entries; the caller commits."""
        if not self._staged:
            return

        with self._conn.cursor() as cursor:
            cursor.executemany(UPSERT_SQL, list(self._staged.items()))


class PostgresKeyValueStore:
    """
    Implements KeyValueStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def get(self, key: str) -> str | None:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(GET_SQL, (key,))
            row = cursor.fetchone()
            return None if row is None else row[0]

    @contextmanager
    def transaction(self, *lock_keys: str) -> Iterator[PostgresTransaction]:
        """
        Run a read-modify-write transaction holding advisory locks on lock_keys.

        Locks are taken in sorted order so that two transactions with
        overlapping keys cannot deadlock. They are released by the
        commit or by the rollback the pool performs when the block raises.

        Args:
            lock_keys: Keys the operation reads and writes

        Yields:
            PostgresTransaction bound to the locked connection
        """
        with self._pool.connection() as conn:
            for key in sorted(set(lock_keys)):
                conn.execute(LOCK_SQL, (key,))

            txn = PostgresTransaction(conn)
            yield txn
            txn.flush()
            conn.commit()


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/storage/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
