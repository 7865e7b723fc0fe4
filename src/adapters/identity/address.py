"""
Address validator adapter - Implements AddressValidator protocol.

Syntactic checks only, in the spirit of a mock chain API: an address is
3 to 90 characters of lowercase ASCII letters, digits, '-', '_' or '.'.
No checksum or prefix is verified.
"""

import re

MIN_ADDRESS_LENGTH = 3
MAX_ADDRESS_LENGTH = 90

_ADDRESS_PATTERN = re.compile(r"[a-z0-9._-]+")


class SimpleAddressValidator:
    """
    Implements AddressValidator protocol with length and charset rules.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def is_valid(self, address: str) -> bool:
        if not MIN_ADDRESS_LENGTH <= len(address) <= MAX_ADDRESS_LENGTH:
            return False
        return _ADDRESS_PATTERN.fullmatch(address) is not None
