"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Execute and query messages are tagged by operation name, exactly one tag
per message, e.g. ``{"mint_tokens": {"denom": ..., "amount": ...}}``.
"""

import base64
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain import messages
from src.domain.models import DenomUnit, Metadata

# Amounts are unsigned 128-bit integers
MAX_AMOUNT = 2**128 - 1


class DenomUnitModel(BaseModel):
    """One unit of a denom (e.g. atom = 10^6 uatom)."""

    denom: str
    exponent: int = Field(0, ge=0, le=2**32 - 1)
    aliases: list[str] = Field(default_factory=list)


class MetadataModel(BaseModel):
    """Descriptive metadata attached to a denom."""

    description: str | None = None
    denom_units: list[DenomUnitModel] = Field(default_factory=list)
    base: str | None = None
    display: str | None = None
    name: str | None = None
    symbol: str | None = None

    def to_domain(self) -> Metadata:
        return Metadata(
            description=self.description,
            denom_units=tuple(
                DenomUnit(denom=u.denom, exponent=u.exponent, aliases=tuple(u.aliases))
                for u in self.denom_units
            ),
            base=self.base,
            display=self.display,
            name=self.name,
            symbol=self.symbol,
        )

    @classmethod
    def from_domain(cls, metadata: Metadata) -> "MetadataModel":
        return cls.model_validate(metadata.to_dict())


class CreateDenomArgs(BaseModel):
    subdenom: str
    metadata: MetadataModel | None = None


class ChangeAdminArgs(BaseModel):
    denom: str
    new_admin_address: str = Field(..., description="New admin; empty string removes the admin")


class MintTokensArgs(BaseModel):
    denom: str
    amount: int = Field(..., ge=0, le=MAX_AMOUNT)
    mint_to_address: str


class BurnTokensArgs(BaseModel):
    denom: str
    amount: int = Field(..., ge=0, le=MAX_AMOUNT)
    burn_from_address: str = Field("", description="Must be empty or the denom admin")


class ForceTransferArgs(BaseModel):
    denom: str
    amount: int = Field(..., ge=0, le=MAX_AMOUNT)
    from_address: str
    to_address: str


class SetMetadataArgs(BaseModel):
    denom: str
    metadata: MetadataModel


class _TaggedMessage(BaseModel):
    """Base for messages that carry exactly one operation tag."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def exactly_one_tag(self) -> "_TaggedMessage":
        tags = [name for name, value in self if value is not None]
        if len(tags) != 1:
            raise ValueError(f"exactly one operation must be given, got {len(tags)}")
        return self

    def tag(self) -> tuple[str, Any]:
        return next((name, value) for name, value in self if value is not None)


class ExecuteMsgModel(_TaggedMessage):
    """Tagged execute message."""

    create_denom: CreateDenomArgs | None = None
    change_admin: ChangeAdminArgs | None = None
    mint_tokens: MintTokensArgs | None = None
    burn_tokens: BurnTokensArgs | None = None
    force_transfer: ForceTransferArgs | None = None
    set_metadata: SetMetadataArgs | None = None

    def to_domain(self) -> messages.ExecuteMsg:
        name, args = self.tag()
        if name == "create_denom":
            metadata = args.metadata.to_domain() if args.metadata is not None else None
            return messages.CreateDenom(subdenom=args.subdenom, metadata=metadata)
        if name == "change_admin":
            return messages.ChangeAdmin(
                denom=args.denom, new_admin_address=args.new_admin_address
            )
        if name == "mint_tokens":
            return messages.MintTokens(
                denom=args.denom, amount=args.amount, mint_to_address=args.mint_to_address
            )
        if name == "burn_tokens":
            return messages.BurnTokens(
                denom=args.denom, amount=args.amount, burn_from_address=args.burn_from_address
            )
        if name == "force_transfer":
            return messages.ForceTransfer(
                denom=args.denom,
                amount=args.amount,
                from_address=args.from_address,
                to_address=args.to_address,
            )
        return messages.SetMetadata(denom=args.denom, metadata=args.metadata.to_domain())


class ExecuteRequest(BaseModel):
    """Request model for executing a registry operation."""

    sender: str = Field(..., min_length=1, description="Authenticated sender identity")
    msg: ExecuteMsgModel


class ExecuteResponse(BaseModel):
    """Response model for a successful execute call."""

    method: str
    attributes: dict[str, str] = Field(default_factory=dict)
    data: str | None = Field(None, description="Base64-encoded binary reply")

    @classmethod
    def from_domain(cls, result: messages.ExecuteResult) -> "ExecuteResponse":
        data = base64.b64encode(result.data).decode() if result.data is not None else None
        return cls(method=result.method, attributes=result.attributes, data=data)


class FullDenomArgs(BaseModel):
    creator_addr: str
    subdenom: str


class DenomArgs(BaseModel):
    denom: str


class CreatorArgs(BaseModel):
    creator: str


class ParamsArgs(BaseModel):
    pass


class QueryMsgModel(_TaggedMessage):
    """Tagged query message."""

    full_denom: FullDenomArgs | None = None
    metadata: DenomArgs | None = None
    admin: DenomArgs | None = None
    denoms_by_creator: CreatorArgs | None = None
    params: ParamsArgs | None = None

    def to_domain(self) -> messages.QueryMsg:
        name, args = self.tag()
        if name == "full_denom":
            return messages.FullDenom(creator_addr=args.creator_addr, subdenom=args.subdenom)
        if name == "metadata":
            return messages.GetMetadata(denom=args.denom)
        if name == "admin":
            return messages.GetAdmin(denom=args.denom)
        if name == "denoms_by_creator":
            return messages.DenomsByCreator(creator=args.creator)
        return messages.GetParams()


class FullDenomQueryResponse(BaseModel):
    denom: str


class MetadataQueryResponse(BaseModel):
    metadata: MetadataModel | None


class AdminQueryResponse(BaseModel):
    admin: str


class DenomsByCreatorQueryResponse(BaseModel):
    denoms: list[str]


QueryResponse = (
    FullDenomQueryResponse
    | MetadataQueryResponse
    | AdminQueryResponse
    | DenomsByCreatorQueryResponse
)


def query_response_from_domain(response: messages.QueryResponse) -> QueryResponse:
    """Convert a domain query response to its API model."""
    if isinstance(response, messages.FullDenomResponse):
        return FullDenomQueryResponse(denom=response.denom)
    if isinstance(response, messages.MetadataResponse):
        metadata = response.metadata
        return MetadataQueryResponse(
            metadata=MetadataModel.from_domain(metadata) if metadata is not None else None
        )
    if isinstance(response, messages.AdminResponse):
        return AdminQueryResponse(admin=response.admin)
    return DenomsByCreatorQueryResponse(denoms=response.denoms)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
