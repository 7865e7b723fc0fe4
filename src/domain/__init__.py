"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for the token factory
denom registry: denom name validation, the registry state machine, the
read-only query service and the binary reply codec. It defines its own
port interfaces for infrastructure abstraction, ensuring true hexagonal
architecture decoupling.
"""

from .denom import full_denom, validate_denom
from .exceptions import (
    DecodeError,
    DenomAlreadyExists,
    InvalidAddress,
    InvalidDenom,
    NotAdmin,
    TokenFactoryError,
    Unimplemented,
    UnknownDenom,
    ZeroAmount,
)
from .models import DenomUnit, Metadata
from .ports import AddressValidator, KeyValueStore, Ledger, ReadableStore, StoreTransaction
from .queries import QueryService
from .registry import DenomRegistry
from .reply import decode_string_field, denom_from_reply, encode_string_field

__all__ = [
    "AddressValidator",
    "DecodeError",
    "DenomAlreadyExists",
    "DenomRegistry",
    "DenomUnit",
    "InvalidAddress",
    "InvalidDenom",
    "KeyValueStore",
    "Ledger",
    "Metadata",
    "NotAdmin",
    "QueryService",
    "ReadableStore",
    "StoreTransaction",
    "TokenFactoryError",
    "Unimplemented",
    "UnknownDenom",
    "ZeroAmount",
    "decode_string_field",
    "denom_from_reply",
    "encode_string_field",
    "full_denom",
    "validate_denom",
]
