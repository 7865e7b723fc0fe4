"""Ledger adapters - Balance keeping implementations."""

from .memory import InMemoryLedger, InsufficientFunds, LedgerError

__all__ = ["InMemoryLedger", "InsufficientFunds", "LedgerError"]
