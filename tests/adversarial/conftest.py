"""
Shared fixtures for adversarial tests.

Provides registries over a deliberately slow in-memory store, which
widens the window between reads and writes, and over PostgreSQL when
the database configured by DATABASE_URL is reachable.
"""

import time
from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.storage.memory import InMemoryKeyValueStore
from src.adapters.storage.postgres import PostgresKeyValueStore, run_migrations
from src.config.settings import get_settings

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


class SlowKeyValueStore(InMemoryKeyValueStore):
    """In-memory store whose reads yield the GIL before returning."""

    def get(self, key: str) -> str | None:
        value = super().get(key)
        time.sleep(0.01)
        return value


@pytest.fixture
def slow_store() -> SlowKeyValueStore:
    return SlowKeyValueStore()


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for adversarial tests, skipping without a database."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=20,
        open=True,
    )
    try:
        pool.wait(timeout=2.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def pg_store(pool: ConnectionPool) -> PostgresKeyValueStore:
    """Create a store over a clean kv_store table."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM kv_store")
        conn.commit()
    return PostgresKeyValueStore(pool)
