"""
Unit tests for denom name validation.

Tests verify:
- Canonical denom construction from (creator, subdenom)
- Length and separator rules
- Validation of pre-formed denom strings
"""

import pytest

from src.domain.denom import full_denom, validate_denom
from src.domain.exceptions import InvalidDenom, InvalidAddress


class TestFullDenom:
    """Tests for full_denom()."""

    def test_builds_canonical_denom(self) -> None:
        """Valid parts produce factory/{creator}/{subdenom} verbatim."""
        assert full_denom("govner", "fundz") == "factory/govner/fundz"

    @pytest.mark.parametrize(
        ("creator", "subdenom"),
        [
            ("a", "b"),
            ("cosmos1xyz", "uatom"),
            ("x" * 75, "y" * 44),
            ("creator", ""),
            ("", "coin"),
        ],
    )
    def test_accepts_pairs_within_limits(self, creator: str, subdenom: str) -> None:
        """Pairs within every limit are returned unchanged."""
        assert full_denom(creator, subdenom) == f"factory/{creator}/{subdenom}"

    def test_creator_with_slash_rejected(self) -> None:
        """Creator containing '/' is rejected."""
        with pytest.raises(InvalidDenom) as exc_info:
            full_denom("bad/creator", "coin")
        assert exc_info.value.denom == "factory/bad/creator/coin"
        assert "/" in exc_info.value.message

    def test_subdenom_too_long_rejected(self) -> None:
        """Subdenom longer than 44 bytes is rejected."""
        with pytest.raises(InvalidDenom) as exc_info:
            full_denom("creator", "s" * 45)
        assert "subdenom" in exc_info.value.message

    def test_creator_too_long_rejected(self) -> None:
        """Creator longer than 75 bytes is rejected."""
        with pytest.raises(InvalidDenom) as exc_info:
            full_denom("c" * 76, "coin")
        assert "creator" in exc_info.value.message

    def test_subdenom_length_counted_in_bytes(self) -> None:
        """Multi-byte characters count by their UTF-8 length."""
        # 23 two-byte characters = 46 bytes
        with pytest.raises(InvalidDenom):
            full_denom("creator", "é" * 23)

    def test_error_carries_candidate_denom(self) -> None:
        """InvalidDenom carries the offending candidate string."""
        with pytest.raises(InvalidDenom) as exc_info:
            full_denom("creator", "s" * 50)
        assert exc_info.value.denom == f"factory/creator/{'s' * 50}"
        assert exc_info.value.denom in str(exc_info.value)


class TestValidateDenom:
    """Tests for validate_denom() on pre-formed strings."""

    def test_valid_denom_passes(self) -> None:
        """Well-formed denom is returned unchanged."""
        assert validate_denom("factory/creator/mydenom") == "factory/creator/mydenom"

    def test_too_many_parts(self) -> None:
        """Four parts are rejected with the part count in the message."""
        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom("factory/creator/mydenom/invalid")
        assert exc_info.value.denom == "factory/creator/mydenom/invalid"
        assert exc_info.value.message == "denom must have 3 parts separated by /, had 4"

    def test_not_enough_parts(self) -> None:
        """Two parts are rejected."""
        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom("factory/creator")
        assert exc_info.value.message == "denom must have 3 parts separated by /, had 2"

    def test_bare_name_rejected(self) -> None:
        """A subdenom alone is not a denom."""
        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom("mydenom")
        assert exc_info.value.message == "denom must have 3 parts separated by /, had 1"

    def test_invalid_prefix(self) -> None:
        """Prefix other than factory is rejected."""
        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom("invalid/creator/mydenom")
        assert exc_info.value.message == "prefix must be 'factory', was invalid"

    def test_prefix_case_insensitive(self) -> None:
        """Prefix is matched ignoring case and normalized to lowercase."""
        assert validate_denom("FACTORY/creator/mydenom") == "factory/creator/mydenom"
        assert validate_denom("Factory/creator/mydenom") == "factory/creator/mydenom"

    def test_creator_case_preserved(self) -> None:
        """Only the prefix is normalized; other parts stay verbatim."""
        assert validate_denom("factory/Creator/MyDenom") == "factory/Creator/MyDenom"

    def test_lookup_failure_reported(self) -> None:
        """A failing lookup turns into InvalidDenom with the lookup's message."""

        def lookup(creator: str, subdenom: str) -> str:
            if creator == "":
                raise InvalidAddress(creator, "invalid creator address")
            return full_denom(creator, subdenom)

        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom("factory//mydenom", lookup=lookup)
        assert exc_info.value.denom == "factory//mydenom"
        assert "invalid creator address" in exc_info.value.message

    def test_length_rules_applied_through_lookup(self) -> None:
        """Default lookup applies the full_denom length rules."""
        denom = f"factory/creator/{'s' * 45}"
        with pytest.raises(InvalidDenom) as exc_info:
            validate_denom(denom)
        assert exc_info.value.denom == denom
        assert "subdenom" in exc_info.value.message

    def test_lookup_receives_parts(self) -> None:
        """Lookup is called with the creator and subdenom parts."""
        calls = []

        def lookup(creator: str, subdenom: str) -> str:
            calls.append((creator, subdenom))
            return f"factory/{creator}/{subdenom}"

        validate_denom("factory/alice/coin", lookup=lookup)
        assert calls == [("alice", "coin")]
