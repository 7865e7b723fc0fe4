"""
Domain exceptions - Semantic error types for the denom registry.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Every registry and reply-decoder failure is one of these types; a
raised exception always means no state was written.
"""


class TokenFactoryError(Exception):
    """Base class for denom registry domain errors."""

    pass


class InvalidDenom(TokenFactoryError):
    """Denom string is malformed or violates the length rules."""

    def __init__(self, denom: str, message: str) -> None:
        super().__init__(f"invalid denom '{denom}': {message}")
        self.denom = denom
        self.message = message


class DenomAlreadyExists(TokenFactoryError):
    """Denom was already created, cannot create again."""

    def __init__(self, denom: str) -> None:
        super().__init__(f"denom already exists: {denom}")
        self.denom = denom


class UnknownDenom(TokenFactoryError):
    """Denom was never created."""

    def __init__(self, denom: str) -> None:
        super().__init__(f"denom was never created: {denom}")
        self.denom = denom


class NotAdmin(TokenFactoryError):
    """Sender is not the admin of the denom."""

    def __init__(self, denom: str, sender: str) -> None:
        super().__init__(f"{sender} is not admin of {denom}")
        self.denom = denom
        self.sender = sender


class InvalidAddress(TokenFactoryError):
    """Address is not a syntactically valid identity."""

    def __init__(self, address: str, reason: str = "invalid address") -> None:
        super().__init__(f"{reason}: '{address}'")
        self.address = address
        self.reason = reason


class ZeroAmount(TokenFactoryError):
    """Amount must be greater than zero."""

    def __init__(self) -> None:
        super().__init__("amount must be greater than zero")


class Unimplemented(TokenFactoryError):
    """Feature is deliberately not implemented."""

    def __init__(self, feature: str) -> None:
        super().__init__(f"{feature} is not implemented")
        self.feature = feature


class DecodeError(Exception):
    """Base class for binary reply decoding errors."""

    def __init__(self, field_number: int, message: str) -> None:
        super().__init__(f"failed to decode reply: field #{field_number}: {message}")
        self.field_number = field_number
        self.message = message


class FieldMismatch(DecodeError):
    """Tag byte names a different field than the one requested."""

    pass


class WireTypeMismatch(DecodeError):
    """Field is not length-delimited."""

    pass


class VarintTooShort(DecodeError):
    """Buffer ended before the varint terminator byte."""

    pass


class VarintTooLong(DecodeError):
    """No varint terminator within the maximum varint width."""

    pass


class PayloadTooShort(DecodeError):
    """Fewer bytes remain than the decoded length prefix."""

    pass


class InvalidUtf8(DecodeError):
    """Payload bytes are not valid UTF-8."""

    pass
