"""
Denom metadata records.

Plain dataclasses describing how a denom is presented to clients
(display unit, symbol, sub-units). Stored as JSON by the registry.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class DenomUnit:
    """
    One unit of a denom.

    exponent is the power of 10 relating this unit to the base unit,
    e.g. 1 atom = 10^6 uatom gives DenomUnit("atom", 6).
    """

    denom: str
    exponent: int = 0
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class Metadata:
    """Descriptive record attached to a denom."""

    description: str | None = None
    denom_units: tuple[DenomUnit, ...] = field(default_factory=tuple)
    base: str | None = None
    display: str | None = None
    name: str | None = None
    symbol: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["denom_units"] = [
            {"denom": unit.denom, "exponent": unit.exponent, "aliases": list(unit.aliases)}
            for unit in self.denom_units
        ]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metadata":
        """Build a Metadata record from its dict form."""
        units = tuple(
            DenomUnit(
                denom=unit["denom"],
                exponent=unit.get("exponent", 0),
                aliases=tuple(unit.get("aliases", ())),
            )
            for unit in data.get("denom_units", ())
        )
        return cls(
            description=data.get("description"),
            denom_units=units,
            base=data.get("base"),
            display=data.get("display"),
            name=data.get("name"),
            symbol=data.get("symbol"),
        )
