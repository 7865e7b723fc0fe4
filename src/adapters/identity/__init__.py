"""Identity adapters - Address validation."""

from .address import SimpleAddressValidator

__all__ = ["SimpleAddressValidator"]
