"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory store and ledger adapters
- Registry and query service wiring
"""

from unittest.mock import Mock

import pytest

from src.adapters.identity.address import SimpleAddressValidator
from src.adapters.ledger.memory import InMemoryLedger
from src.adapters.storage.memory import InMemoryKeyValueStore
from src.domain.queries import QueryService
from src.domain.registry import DenomRegistry


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def ledger() -> InMemoryLedger:
    """Empty in-memory ledger."""
    return InMemoryLedger()


@pytest.fixture
def mock_ledger() -> Mock:
    """Ledger double recording every delegated call."""
    return Mock(spec=InMemoryLedger)


@pytest.fixture
def registry(store: InMemoryKeyValueStore, mock_ledger: Mock) -> DenomRegistry:
    """Registry over an empty store with a mocked ledger."""
    return DenomRegistry(
        store=store, ledger=mock_ledger, address_validator=SimpleAddressValidator()
    )


@pytest.fixture
def query_service(store: InMemoryKeyValueStore) -> QueryService:
    """Query service reading the same store as the registry fixture."""
    return QueryService(store=store)
