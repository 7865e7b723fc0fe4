"""
In-memory ledger adapter - Implements Ledger protocol.

This module provides a stand-in for the bank module that actually holds
balances. The registry decides whether a balance change is authorized;
this adapter only performs it, logging every movement.
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base class for ledger errors."""

    pass


class InsufficientFunds(LedgerError):
    """Holder balance is lower than the requested debit."""

    def __init__(self, address: str, denom: str, balance: int, amount: int) -> None:
        super().__init__(f"insufficient funds: {address} has {balance}{denom}, needs {amount}{denom}")
        self.address = address
        self.denom = denom
        self.balance = balance
        self.amount = amount


class InMemoryLedger:
    """
    Implements Ledger protocol with per-account balance maps.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._balances: defaultdict[str, dict[str, int]] = defaultdict(dict)

    def mint(self, denom: str, amount: int, recipient: str) -> None:
        self._credit(recipient, denom, amount)
        logger.info("[LEDGER] Mint %d%s to %s", amount, denom, recipient)

    def burn(self, denom: str, amount: int, holder: str) -> None:
        self._debit(holder, denom, amount)
        logger.info("[LEDGER] Burn %d%s from %s", amount, denom, holder)

    def transfer(self, denom: str, amount: int, from_address: str, to_address: str) -> None:
        self._debit(from_address, denom, amount)
        self._credit(to_address, denom, amount)
        logger.info("[LEDGER] Transfer %d%s from %s to %s", amount, denom, from_address, to_address)

    def balance(self, address: str, denom: str) -> int:
        """Return the balance of denom held by address (0 if none)."""
        return self._balances.get(address, {}).get(denom, 0)

    def all_balances(self, address: str) -> dict[str, int]:
        """Return every non-zero balance of address, keyed by denom."""
        return dict(sorted(self._balances.get(address, {}).items()))

    def _credit(self, address: str, denom: str, amount: int) -> None:
        account = self._balances[address]
        account[denom] = account.get(denom, 0) + amount

    def _debit(self, address: str, denom: str, amount: int) -> None:
        balance = self.balance(address, denom)
        if balance < amount:
            raise InsufficientFunds(address, denom, balance, amount)
        remaining = balance - amount
        if remaining:
            self._balances[address][denom] = remaining
        else:
            del self._balances[address][denom]
