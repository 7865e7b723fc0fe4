"""
Denom name validation.

A factory denom has the canonical form ``factory/<creator>/<subdenom>``.
Two validation paths exist:

- full_denom() builds the canonical string from its parts and checks
  the length rules. Used when creating denoms and for the FullDenom query.
- validate_denom() takes an already assembled string (as received in
  ChangeAdmin, MintTokens, ...), checks its shape and confirms it by
  rebuilding it through a full-denom lookup.

Prefix policy: validate_denom() accepts the prefix in any case but
returns the canonical lowercase form produced by the lookup, so stored
keys are always case-sensitive ``factory/...`` strings.
"""

from collections.abc import Callable

from .exceptions import InvalidDenom, TokenFactoryError

DENOM_PREFIX = "factory"

MIN_DENOM_LENGTH = 3
MAX_DENOM_LENGTH = 128
MAX_CREATOR_LENGTH = 75
MAX_SUBDENOM_LENGTH = 44


def full_denom(creator: str, subdenom: str) -> str:
    """
    Build the canonical denom for a (creator, subdenom) pair.

    Does not check whether the denom was ever created.

    Args:
        creator: Identity of the creating account
        subdenom: Creator-chosen suffix

    Returns:
        ``factory/{creator}/{subdenom}``

    Raises:
        InvalidDenom: If the candidate violates a length or separator rule
    """
    denom = f"{DENOM_PREFIX}/{creator}/{subdenom}"

    denom_length = len(denom.encode())
    if denom_length < MIN_DENOM_LENGTH or denom_length > MAX_DENOM_LENGTH:
        raise InvalidDenom(
            denom,
            f"length must be between {MIN_DENOM_LENGTH} and {MAX_DENOM_LENGTH}, was {denom_length}",
        )
    if "/" in creator:
        raise InvalidDenom(denom, "creator must not contain '/'")
    if len(subdenom.encode()) > MAX_SUBDENOM_LENGTH:
        raise InvalidDenom(denom, f"subdenom longer than {MAX_SUBDENOM_LENGTH} bytes")
    if len(creator.encode()) > MAX_CREATOR_LENGTH:
        raise InvalidDenom(denom, f"creator longer than {MAX_CREATOR_LENGTH} bytes")

    return denom


def validate_denom(denom: str, lookup: Callable[[str, str], str] = full_denom) -> str:
    """
    Validate a pre-formed denom string.

    Args:
        denom: Candidate denom, e.g. ``factory/alice/coin``
        lookup: Full-denom resolver used to confirm the parts

    Returns:
        Canonical denom as returned by lookup

    Raises:
        InvalidDenom: If the shape, prefix or lookup check fails
    """
    parts = denom.split("/")
    if len(parts) != 3:
        raise InvalidDenom(denom, f"denom must have 3 parts separated by /, had {len(parts)}")

    prefix, creator, subdenom = parts
    if not prefix.isascii() or prefix.lower() != DENOM_PREFIX:
        raise InvalidDenom(denom, f"prefix must be '{DENOM_PREFIX}', was {prefix}")

    try:
        return lookup(creator, subdenom)
    except InvalidDenom as e:
        raise InvalidDenom(denom, e.message) from e
    except TokenFactoryError as e:
        raise InvalidDenom(denom, str(e)) from e
