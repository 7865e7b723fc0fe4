"""
Query service - read-only projections over registry state.

The service is given a ReadableStore only, so it cannot mutate the
registry mappings. Every read reflects the latest committed write.
"""

from dataclasses import dataclass
from typing import NoReturn

from .denom import full_denom, validate_denom
from .exceptions import Unimplemented, UnknownDenom
from .models import Metadata
from .ports import ReadableStore
from .state import load_admin, load_denoms_by_creator, load_metadata


@dataclass
class QueryService:
    """Read-only queries over the denom registry."""

    store: ReadableStore

    def full_denom(self, creator: str, subdenom: str) -> str:
        """
        Compute the denom for (creator, subdenom).

        Pure computation, no existence check.

        Raises:
            InvalidDenom: If the pair violates the denom rules
        """
        return full_denom(creator, subdenom)

    def metadata(self, denom: str) -> Metadata | None:
        """Return the metadata of denom, or None if none was set."""
        return load_metadata(self.store, validate_denom(denom))

    def admin(self, denom: str) -> str:
        """
        Return the current admin of denom.

        An empty string means the denom has no admin.

        Raises:
            UnknownDenom: If denom was never created
        """
        denom = validate_denom(denom)
        admin = load_admin(self.store, denom)
        if admin is None:
            raise UnknownDenom(denom)
        return admin

    def denoms_by_creator(self, creator: str) -> list[str]:
        """Return denoms created by creator in creation order."""
        return load_denoms_by_creator(self.store, creator)

    def params(self) -> NoReturn:
        """Module parameters (denom creation fee) are not modeled."""
        raise Unimplemented("params query")
