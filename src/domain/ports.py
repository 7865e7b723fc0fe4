"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Protocol


class ReadableStore(Protocol):
    """Read-only view of a key-value store."""

    def get(self, key: str) -> str | None:
        """
        Load the value stored under a key.

        Args:
            key: Fully namespaced key (``"<namespace>:<key>"``)

        Returns:
            Stored value, or None if the key is absent
        """
        ...


class StoreTransaction(ReadableStore, Protocol):
    """Read-modify-write view of the store, open for one operation."""

    def write(self, batch: Mapping[str, str]) -> None:
        """
        Stage every entry of batch for commit.

        Staged entries are visible to get() on this transaction and
        become visible to everyone else together when the transaction
        commits. Existing keys are overwritten.

        Args:
            batch: Mapping of namespaced key to value
        """
        ...


class KeyValueStore(ReadableStore, Protocol):
    """Port interface for registry persistence."""

    def transaction(self, *lock_keys: str) -> AbstractContextManager[StoreTransaction]:
        """
        Open a transaction serialized on lock_keys.

        Two transactions sharing any lock key never overlap, so a value
        read inside the transaction cannot change before the staged
        writes commit. Staged writes are committed together when the
        block exits normally and discarded if it raises.

        Args:
            lock_keys: Keys the operation reads and writes

        Returns:
            Context manager yielding the open transaction
        """
        ...


class Ledger(Protocol):
    """
    Port interface for the external ledger that holds balances.

    The registry only decides whether a balance change is authorized;
    the ledger performs it. Ledger errors propagate to the caller unchanged.
    """

    def mint(self, denom: str, amount: int, recipient: str) -> None:
        """Credit amount of denom to recipient."""
        ...

    def burn(self, denom: str, amount: int, holder: str) -> None:
        """Debit amount of denom from holder."""
        ...

    def transfer(self, denom: str, amount: int, from_address: str, to_address: str) -> None:
        """Move amount of denom from one identity to another."""
        ...


class AddressValidator(Protocol):
    """Port interface for syntactic identity validation."""

    def is_valid(self, address: str) -> bool:
        """
        Check whether address is a syntactically valid identity.

        Args:
            address: Candidate identity string

        Returns:
            True if the address can own balances or administer denoms
        """
        ...
