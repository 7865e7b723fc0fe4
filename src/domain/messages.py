"""
Command and query variants.

Closed set of message types accepted by the dispatcher. Each execute
variant maps to one DenomRegistry operation and each query variant to
one QueryService operation.
"""

from dataclasses import dataclass, field

from .models import Metadata


@dataclass(frozen=True)
class CreateDenom:
    subdenom: str
    metadata: Metadata | None = None


@dataclass(frozen=True)
class ChangeAdmin:
    denom: str
    new_admin_address: str


@dataclass(frozen=True)
class MintTokens:
    denom: str
    amount: int
    mint_to_address: str


@dataclass(frozen=True)
class BurnTokens:
    denom: str
    amount: int
    burn_from_address: str = ""


@dataclass(frozen=True)
class ForceTransfer:
    denom: str
    amount: int
    from_address: str
    to_address: str


@dataclass(frozen=True)
class SetMetadata:
    denom: str
    metadata: Metadata


ExecuteMsg = CreateDenom | ChangeAdmin | MintTokens | BurnTokens | ForceTransfer | SetMetadata


@dataclass(frozen=True)
class FullDenom:
    creator_addr: str
    subdenom: str


@dataclass(frozen=True)
class GetMetadata:
    denom: str


@dataclass(frozen=True)
class GetAdmin:
    denom: str


@dataclass(frozen=True)
class DenomsByCreator:
    creator: str


@dataclass(frozen=True)
class GetParams:
    pass


QueryMsg = FullDenom | GetMetadata | GetAdmin | DenomsByCreator | GetParams


@dataclass(frozen=True)
class ExecuteResult:
    """
    Outcome of a successful execute call.

    data holds the binary reply; only CreateDenom produces one.
    """

    method: str
    attributes: dict[str, str] = field(default_factory=dict)
    data: bytes | None = None


@dataclass(frozen=True)
class FullDenomResponse:
    denom: str


@dataclass(frozen=True)
class MetadataResponse:
    metadata: Metadata | None


@dataclass(frozen=True)
class AdminResponse:
    admin: str


@dataclass(frozen=True)
class DenomsByCreatorResponse:
    denoms: list[str]


QueryResponse = FullDenomResponse | MetadataResponse | AdminResponse | DenomsByCreatorResponse
