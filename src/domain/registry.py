"""
Denom registry domain service - permissioned denom issuance.

This module contains the core business logic of the token factory:
who may create a denom, who administers it, and which balance changes
the admin is allowed to request from the ledger.

Denom Lifecycle
===============

A denom enters existence only through create_denom():
    1. name is validated (factory/<creator>/<subdenom>)
    2. rejected if an admin entry already exists
    3. creator is installed as admin
    4. denom is appended to the creator's list
    5. metadata is installed if supplied

No operation removes a denom. ChangeAdmin may set the admin to the
empty string, after which nobody can administer the denom.

Atomicity
=========

Every operation that writes registry state runs inside one store
transaction locked on the entries it reads and writes. Operations on
the same denom or creator are serialized, so a duplicate create cannot
slip past the existence check and no append to a creator list is lost.
A raised exception discards the staged writes.
"""

import logging
from dataclasses import dataclass

from .denom import full_denom, validate_denom
from .exceptions import DenomAlreadyExists, InvalidAddress, NotAdmin, UnknownDenom, ZeroAmount
from .models import Metadata
from .ports import AddressValidator, KeyValueStore, Ledger, ReadableStore
from .state import (
    admin_key,
    creator_key,
    encode,
    load_admin,
    load_denoms_by_creator,
    metadata_key,
)

logger = logging.getLogger(__name__)

# Admin value meaning "no admin"
NO_ADMIN = ""


@dataclass
class DenomRegistry:
    """
    Domain service for denom administration.

    Owns the admin, metadata and denoms-by-creator mappings stored in
    the key-value store, and delegates balance changes to the ledger.
    """

    store: KeyValueStore
    ledger: Ledger
    address_validator: AddressValidator

    def create_denom(self, sender: str, subdenom: str, metadata: Metadata | None = None) -> str:
        """
        Create a new denom administered by sender.

        Args:
            sender: Creator identity, becomes the admin
            subdenom: Creator-chosen suffix
            metadata: Optional metadata installed with the denom

        Returns:
            Canonical denom string

        Raises:
            InvalidDenom: If the name violates the denom rules
            DenomAlreadyExists: If (sender, subdenom) was already created
        """
        denom = full_denom(sender, subdenom)

        with self.store.transaction(admin_key(denom), creator_key(sender)) as txn:
            if load_admin(txn, denom) is not None:
                raise DenomAlreadyExists(denom)

            denoms = load_denoms_by_creator(txn, sender)
            denoms.append(denom)

            batch = {
                admin_key(denom): encode(sender),
                creator_key(sender): encode(denoms),
            }
            if metadata is not None:
                batch[metadata_key(denom)] = encode(metadata.to_dict())
            txn.write(batch)

        logger.info("Created denom %s (admin %s)", denom, sender)
        return denom

    def change_admin(self, sender: str, denom: str, new_admin: str) -> None:
        """
        Transfer administration of denom to new_admin.

        An empty new_admin clears the admin; the denom can no longer
        be administered afterwards.

        Raises:
            InvalidDenom: If denom is malformed
            UnknownDenom: If denom was never created
            NotAdmin: If sender is not the current admin
            InvalidAddress: If new_admin is neither empty nor a valid identity
        """
        denom = validate_denom(denom)
        with self.store.transaction(admin_key(denom)) as txn:
            self._authorize(txn, sender, denom)
            if new_admin != NO_ADMIN:
                self._check_address(new_admin)
            txn.write({admin_key(denom): encode(new_admin)})

        logger.info("Changed admin of %s from %s to %r", denom, sender, new_admin)

    def mint_tokens(self, sender: str, denom: str, amount: int, recipient: str) -> None:
        """
        Mint amount of denom to recipient.

        Raises:
            ZeroAmount: If amount is zero
            InvalidDenom, UnknownDenom, NotAdmin: See change_admin()
            InvalidAddress: If recipient is not a valid identity
        """
        self._check_amount(amount)
        denom = validate_denom(denom)
        self._authorize(self.store, sender, denom)
        self._check_address(recipient)

        self.ledger.mint(denom, amount, recipient)
        logger.info("Minted %d %s to %s", amount, denom, recipient)

    def burn_tokens(self, sender: str, denom: str, amount: int, burn_from: str = "") -> None:
        """
        Burn amount of denom from the admin's balance.

        Burning from an arbitrary account is disabled: burn_from must be
        empty or the admin itself.

        Raises:
            ZeroAmount: If amount is zero
            InvalidDenom, UnknownDenom, NotAdmin: See change_admin()
            InvalidAddress: If burn_from names an account other than the admin
        """
        self._check_amount(amount)
        denom = validate_denom(denom)
        self._authorize(self.store, sender, denom)
        if burn_from not in ("", sender):
            raise InvalidAddress(burn_from, "burn from address must be the denom admin")

        self.ledger.burn(denom, amount, sender)
        logger.info("Burned %d %s from %s", amount, denom, sender)

    def force_transfer(
        self, sender: str, denom: str, amount: int, from_address: str, to_address: str
    ) -> None:
        """
        Move amount of denom between two accounts without their consent.

        Raises:
            ZeroAmount: If amount is zero
            InvalidDenom, UnknownDenom, NotAdmin: See change_admin()
            InvalidAddress: If either address is not a valid identity
        """
        self._check_amount(amount)
        denom = validate_denom(denom)
        self._authorize(self.store, sender, denom)
        self._check_address(from_address)
        self._check_address(to_address)

        self.ledger.transfer(denom, amount, from_address, to_address)
        logger.info("Force transferred %d %s from %s to %s", amount, denom, from_address, to_address)

    def set_metadata(self, sender: str, denom: str, metadata: Metadata) -> None:
        """
        Replace the metadata of denom.

        Raises:
            InvalidDenom, UnknownDenom, NotAdmin: See change_admin()
        """
        denom = validate_denom(denom)
        with self.store.transaction(admin_key(denom), metadata_key(denom)) as txn:
            self._authorize(txn, sender, denom)
            txn.write({metadata_key(denom): encode(metadata.to_dict())})

        logger.info("Set metadata of %s", denom)

    def _authorize(self, store: ReadableStore, sender: str, denom: str) -> None:
        """Check that sender administers the canonical denom."""
        admin = load_admin(store, denom)
        if admin is None:
            raise UnknownDenom(denom)
        if admin == NO_ADMIN or admin != sender:
            logger.warning("Rejected %s acting on %s (admin is %r)", sender, denom, admin)
            raise NotAdmin(denom, sender)

    def _check_amount(self, amount: int) -> None:
        if amount == 0:
            raise ZeroAmount()
        if amount < 0:
            raise ValueError(f"amount must be unsigned, got {amount}")

    def _check_address(self, address: str) -> None:
        if not self.address_validator.is_valid(address):
            raise InvalidAddress(address)
