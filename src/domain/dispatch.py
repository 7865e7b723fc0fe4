"""
Message dispatch - routes tagged messages to the registry.

execute() and query() match exhaustively over the closed variant sets
in messages.py. Domain errors propagate unchanged.
"""

from .messages import (
    AdminResponse,
    BurnTokens,
    ChangeAdmin,
    CreateDenom,
    DenomsByCreator,
    DenomsByCreatorResponse,
    ExecuteMsg,
    ExecuteResult,
    ForceTransfer,
    FullDenom,
    FullDenomResponse,
    GetAdmin,
    GetMetadata,
    GetParams,
    MetadataResponse,
    MintTokens,
    QueryMsg,
    QueryResponse,
    SetMetadata,
)
from .queries import QueryService
from .registry import DenomRegistry
from .reply import encode_string_field


def execute(registry: DenomRegistry, sender: str, msg: ExecuteMsg) -> ExecuteResult:
    """
    Execute msg on behalf of sender.

    Args:
        registry: Registry the message is applied to
        sender: Authenticated sender identity
        msg: One of the execute variants

    Returns:
        ExecuteResult with the method attribute and, for CreateDenom,
        the encoded reply data
    """
    match msg:
        case CreateDenom(subdenom=subdenom, metadata=metadata):
            denom = registry.create_denom(sender, subdenom, metadata)
            return ExecuteResult(
                method="create_denom",
                attributes={"denom": denom},
                data=encode_string_field(denom),
            )
        case ChangeAdmin(denom=denom, new_admin_address=new_admin):
            registry.change_admin(sender, denom, new_admin)
            return ExecuteResult(method="change_admin")
        case MintTokens(denom=denom, amount=amount, mint_to_address=recipient):
            registry.mint_tokens(sender, denom, amount, recipient)
            return ExecuteResult(method="mint_tokens")
        case BurnTokens(denom=denom, amount=amount, burn_from_address=burn_from):
            registry.burn_tokens(sender, denom, amount, burn_from)
            return ExecuteResult(method="burn_tokens")
        case ForceTransfer(
            denom=denom, amount=amount, from_address=from_address, to_address=to_address
        ):
            registry.force_transfer(sender, denom, amount, from_address, to_address)
            return ExecuteResult(method="force_transfer_tokens")
        case SetMetadata(denom=denom, metadata=metadata):
            registry.set_metadata(sender, denom, metadata)
            return ExecuteResult(method="set_metadata")
        case _:
            raise TypeError(f"unsupported execute message: {msg!r}")


def query(service: QueryService, msg: QueryMsg) -> QueryResponse:
    """Answer msg from the query service."""
    match msg:
        case FullDenom(creator_addr=creator, subdenom=subdenom):
            return FullDenomResponse(denom=service.full_denom(creator, subdenom))
        case GetMetadata(denom=denom):
            return MetadataResponse(metadata=service.metadata(denom))
        case GetAdmin(denom=denom):
            return AdminResponse(admin=service.admin(denom))
        case DenomsByCreator(creator=creator):
            return DenomsByCreatorResponse(denoms=service.denoms_by_creator(creator))
        case GetParams():
            return service.params()
        case _:
            raise TypeError(f"unsupported query message: {msg!r}")
