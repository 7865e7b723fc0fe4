"""
API v1 routes.

Defines REST endpoints for the token factory registry:
- POST /v1/execute - Run a registry operation on behalf of a sender
- POST /v1/query - Answer a read-only query
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.adapters.ledger.memory import LedgerError
from src.api.dependencies import get_query_service, get_registry
from src.api.models import (
    ErrorResponse,
    ExecuteRequest,
    ExecuteResponse,
    QueryMsgModel,
    QueryResponse,
    query_response_from_domain,
)
from src.domain import dispatch
from src.domain.exceptions import (
    DenomAlreadyExists,
    InvalidAddress,
    InvalidDenom,
    NotAdmin,
    TokenFactoryError,
    Unimplemented,
    UnknownDenom,
    ZeroAmount,
)
from src.domain.queries import QueryService
from src.domain.registry import DenomRegistry

router = APIRouter(tags=["v1"])

_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (InvalidDenom, status.HTTP_400_BAD_REQUEST),
    (InvalidAddress, status.HTTP_400_BAD_REQUEST),
    (ZeroAmount, status.HTTP_400_BAD_REQUEST),
    (NotAdmin, status.HTTP_403_FORBIDDEN),
    (UnknownDenom, status.HTTP_404_NOT_FOUND),
    (DenomAlreadyExists, status.HTTP_409_CONFLICT),
    (LedgerError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (Unimplemented, status.HTTP_501_NOT_IMPLEMENTED),
]


def _http_error(error: Exception) -> HTTPException:
    """Translate a domain or ledger error into an HTTP error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid denom, address or amount"},
        403: {"model": ErrorResponse, "description": "Sender is not the denom admin"},
        404: {"model": ErrorResponse, "description": "Denom was never created"},
        409: {"model": ErrorResponse, "description": "Denom already exists"},
        422: {"description": "Validation error or ledger rejection"},
    },
    summary="Execute a registry operation",
    description="Run one tagged operation (create_denom, change_admin, mint_tokens, "
    "burn_tokens, force_transfer, set_metadata) on behalf of the sender.",
)
async def execute(
    request_data: ExecuteRequest,
    registry: DenomRegistry = Depends(get_registry),
) -> ExecuteResponse:
    """
    Execute a registry operation.

    - **sender**: Authenticated sender identity
    - **msg**: Exactly one tagged operation

    CreateDenom returns the created denom as base64 encoded reply data.
    """
    try:
        result = dispatch.execute(registry, request_data.sender, request_data.msg.to_domain())
    except (TokenFactoryError, LedgerError) as e:
        raise _http_error(e) from None
    return ExecuteResponse.from_domain(result)


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid denom"},
        404: {"model": ErrorResponse, "description": "Denom was never created"},
        501: {"model": ErrorResponse, "description": "Query not implemented"},
    },
    summary="Query registry state",
    description="Answer one tagged query (full_denom, metadata, admin, "
    "denoms_by_creator, params).",
)
async def query(
    request_data: QueryMsgModel,
    service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """Answer a read-only registry query."""
    try:
        response = dispatch.query(service, request_data.to_domain())
    except TokenFactoryError as e:
        raise _http_error(e) from None
    return query_response_from_domain(response)
