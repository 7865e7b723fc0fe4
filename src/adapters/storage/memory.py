"""
In-memory storage adapter - Implements KeyValueStore protocol.

Keeps entries in a plain dict. Used by tests and by the default
``memory`` storage backend.
"""

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


class InMemoryTransaction:
    """Implements StoreTransaction protocol by staging writes in a dict."""

    def __init__(self, store: "InMemoryKeyValueStore") -> None:
        self._store = store
        self._staged: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self._staged:
            return self._staged[key]
        return self._store.get(key)

    def write(self, batch: Mapping[str, str]) -> None:
        self._staged.update(batch)

    def commit(self) -> None:
        self._store._data.update(self._staged)


class InMemoryKeyValueStore:
    """
    Implements KeyValueStore protocol with a dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Transactions are serialized by one store-wide lock, and a commit is
    a single dict.update(), so readers never observe a partial commit.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    @contextmanager
    def transaction(self, *lock_keys: str) -> Iterator[InMemoryTransaction]:
        with self._lock:
            txn = InMemoryTransaction(self)
            yield txn
            txn.commit()

    def __len__(self) -> int:
        return len(self._data)
