"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.identity.address import SimpleAddressValidator
from src.domain.ports import KeyValueStore, Ledger
from src.domain.queries import QueryService
from src.domain.registry import DenomRegistry

# Module-level singleton - SimpleAddressValidator is stateless
_address_validator = SimpleAddressValidator()


def get_store(request: Request) -> KeyValueStore:
    """
    Get key-value store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.store


def get_ledger(request: Request) -> Ledger:
    """Get ledger from app state."""
    return request.app.state.ledger


def get_address_validator() -> SimpleAddressValidator:
    """Get address validator (singleton)."""
    return _address_validator


def get_registry(request: Request) -> DenomRegistry:
    """
    Create denom registry with injected dependencies.

    Wires together the store, ledger and address validator.
    """
    return DenomRegistry(
        store=get_store(request),
        ledger=get_ledger(request),
        address_validator=get_address_validator(),
    )


def get_query_service(request: Request) -> QueryService:
    """Create read-only query service over the app's store."""
    return QueryService(store=get_store(request))
