"""
Unit tests for message dispatch.

Tests verify:
- Every execute variant reaches its registry operation
- CreateDenom replies carry the encoded denom
- Every query variant reaches its query operation
- End-to-end scenario against the in-memory ledger
"""

from unittest.mock import MagicMock

import pytest

from src.adapters.identity.address import SimpleAddressValidator
from src.adapters.ledger.memory import InMemoryLedger
from src.adapters.storage.memory import InMemoryKeyValueStore
from src.domain import dispatch
from src.domain.exceptions import NotAdmin, Unimplemented
from src.domain.messages import (
    AdminResponse,
    BurnTokens,
    ChangeAdmin,
    CreateDenom,
    DenomsByCreator,
    DenomsByCreatorResponse,
    ForceTransfer,
    FullDenom,
    FullDenomResponse,
    GetAdmin,
    GetMetadata,
    GetParams,
    MetadataResponse,
    MintTokens,
    SetMetadata,
)
from src.domain.models import Metadata
from src.domain.queries import QueryService
from src.domain.registry import DenomRegistry
from src.domain.reply import denom_from_reply

DENOM = "factory/creator/mydenom"


class TestExecute:
    """Tests for execute() routing."""

    def test_create_denom_reply(self, registry: DenomRegistry) -> None:
        """CreateDenom result carries the denom as encoded reply data."""
        result = dispatch.execute(registry, "creator", CreateDenom(subdenom="mydenom"))

        assert result.method == "create_denom"
        assert result.attributes == {"denom": DENOM}
        assert denom_from_reply(result.data) == DENOM

    @pytest.mark.parametrize(
        ("msg", "method", "call"),
        [
            (
                ChangeAdmin(denom=DENOM, new_admin_address="newadmin"),
                "change_admin",
                ("change_admin", ("creator", DENOM, "newadmin")),
            ),
            (
                MintTokens(denom=DENOM, amount=100, mint_to_address="newadmin"),
                "mint_tokens",
                ("mint_tokens", ("creator", DENOM, 100, "newadmin")),
            ),
            (
                BurnTokens(denom=DENOM, amount=100),
                "burn_tokens",
                ("burn_tokens", ("creator", DENOM, 100, "")),
            ),
            (
                ForceTransfer(denom=DENOM, amount=100, from_address="a1b", to_address="c2d"),
                "force_transfer_tokens",
                ("force_transfer", ("creator", DENOM, 100, "a1b", "c2d")),
            ),
            (
                SetMetadata(denom=DENOM, metadata=Metadata(display="MYD")),
                "set_metadata",
                ("set_metadata", ("creator", DENOM, Metadata(display="MYD"))),
            ),
        ],
    )
    def test_routes_to_registry(self, msg, method: str, call: tuple) -> None:  # type: ignore[no-untyped-def]
        registry = MagicMock(spec=DenomRegistry)

        result = dispatch.execute(registry, "creator", msg)

        assert result.method == method
        assert result.data is None
        operation, args = call
        getattr(registry, operation).assert_called_once_with(*args)

    def test_unknown_message_rejected(self, registry: DenomRegistry) -> None:
        with pytest.raises(TypeError):
            dispatch.execute(registry, "creator", "create_denom")  # type: ignore[arg-type]


class TestQuery:
    """Tests for query() routing."""

    def test_full_denom(self, query_service: QueryService) -> None:
        response = dispatch.query(query_service, FullDenom(creator_addr="creator", subdenom="x"))
        assert response == FullDenomResponse(denom="factory/creator/x")

    def test_metadata_absent(self, query_service: QueryService) -> None:
        response = dispatch.query(query_service, GetMetadata(denom=DENOM))
        assert response == MetadataResponse(metadata=None)

    def test_admin(self, registry: DenomRegistry, query_service: QueryService) -> None:
        registry.create_denom("creator", "mydenom")
        response = dispatch.query(query_service, GetAdmin(denom=DENOM))
        assert response == AdminResponse(admin="creator")

    def test_denoms_by_creator(self, registry: DenomRegistry, query_service: QueryService) -> None:
        registry.create_denom("creator", "mydenom")
        response = dispatch.query(query_service, DenomsByCreator(creator="creator"))
        assert response == DenomsByCreatorResponse(denoms=[DENOM])

    def test_params_unimplemented(self, query_service: QueryService) -> None:
        with pytest.raises(Unimplemented):
            dispatch.query(query_service, GetParams())

    def test_unknown_query_rejected(self, query_service: QueryService) -> None:
        with pytest.raises(TypeError):
            dispatch.query(query_service, object())  # type: ignore[arg-type]


class TestMintScenario:
    """Create, mint and query end to end with a real in-memory ledger."""

    def test_govner_mints_fundz_to_townies(self) -> None:
        store = InMemoryKeyValueStore()
        ledger = InMemoryLedger()
        registry = DenomRegistry(
            store=store, ledger=ledger, address_validator=SimpleAddressValidator()
        )
        service = QueryService(store=store)

        result = dispatch.execute(
            registry,
            "govner",
            CreateDenom(subdenom="fundz", metadata=Metadata(display="FUNDZ")),
        )
        denom = denom_from_reply(result.data)
        assert denom == "factory/govner/fundz"

        # no tokens before minting
        assert ledger.all_balances("townies") == {}

        dispatch.execute(
            registry, "govner", MintTokens(denom=denom, amount=1234567, mint_to_address="townies")
        )

        assert ledger.balance("townies", denom) == 1234567
        # but no minting of the unprefixed subdenom
        assert ledger.balance("townies", "fundz") == 0

        metadata = dispatch.query(service, GetMetadata(denom=denom))
        assert metadata.metadata.display == "FUNDZ"
        assert dispatch.query(service, GetAdmin(denom=denom)) == AdminResponse(admin="govner")

        with pytest.raises(NotAdmin):
            dispatch.execute(
                registry,
                "townies",
                MintTokens(denom=denom, amount=1234567, mint_to_address="townies"),
            )
        assert ledger.balance("townies", denom) == 1234567
