"""Tests for relayer chained references."""

import pytest

from route_compiler.errors import InvalidAmount
from route_compiler.relayer.chained_reference import (
    MAX_CHAINED_REFERENCE_KEY,
    ChainedReference,
    from_chained_reference,
    is_chained_reference,
    resolve_amount,
    to_chained_reference,
)

TEMP_ZERO = int("0xba10" + "0" * 60, 16)
READONLY_ZERO = int("0xba11" + "0" * 60, 16)


class TestToChainedReference:
    """Tests for reference construction."""

    def test_temporary_prefix(self):
        """Temporary references carry the 0xba10 prefix in the top 16 bits."""
        assert to_chained_reference(0) == TEMP_ZERO
        assert to_chained_reference(7) == TEMP_ZERO + 7

    def test_read_only_prefix(self):
        """Read-only references carry the 0xba11 prefix."""
        assert to_chained_reference(3, temporary=False) == READONLY_ZERO + 3

    def test_deterministic(self):
        """Equal key and flavor always give the same value."""
        assert to_chained_reference(42) == to_chained_reference(42)
        assert to_chained_reference(42) != to_chained_reference(42, temporary=False)

    def test_fits_in_uint256(self):
        ref = to_chained_reference(MAX_CHAINED_REFERENCE_KEY, temporary=False)
        assert ref < 2**256

    def test_key_out_of_range_raises(self):
        with pytest.raises(ValueError):
            to_chained_reference(-1)
        with pytest.raises(ValueError):
            to_chained_reference(MAX_CHAINED_REFERENCE_KEY + 1)


class TestFromChainedReference:
    """Tests for key recovery."""

    def test_round_trips_key(self):
        assert from_chained_reference(to_chained_reference(9)) == 9
        assert from_chained_reference(to_chained_reference(9, False), temporary=False) == 9

    def test_wrong_flavor_raises(self):
        with pytest.raises(ValueError):
            from_chained_reference(to_chained_reference(1), temporary=False)


class TestIsChainedReference:
    """Tests for distinguishing references from real amounts."""

    def test_references_detected(self):
        assert is_chained_reference(to_chained_reference(0))
        assert is_chained_reference(to_chained_reference(12, temporary=False))

    @pytest.mark.parametrize(
        "amount",
        [0, 1, 10**18, 10**30 * 10**18, 2**255, 2**256 - 1],
    )
    def test_amounts_not_detected(self, amount):
        """Realistic amounts, and values outside the tag range, are not references."""
        assert not is_chained_reference(amount)

    def test_out_of_range_not_detected(self):
        assert not is_chained_reference(-1)
        assert not is_chained_reference(2**256)


class TestChainedReferenceValue:
    """Tests for the ChainedReference value type."""

    def test_value(self):
        assert ChainedReference(4).value == to_chained_reference(4)
        assert ChainedReference(4, temporary=False).value == to_chained_reference(4, False)

    def test_read_only_keeps_key(self):
        assert ChainedReference(2).read_only() == ChainedReference(2, temporary=False)

    def test_from_value(self):
        assert ChainedReference.from_value(to_chained_reference(5)) == ChainedReference(5)
        assert ChainedReference.from_value(to_chained_reference(5, False)) == ChainedReference(
            5, temporary=False
        )

    def test_from_value_rejects_amount(self):
        with pytest.raises(ValueError):
            ChainedReference.from_value(10**18)


class TestResolveAmount:
    """Tests for the encoding boundary check."""

    def test_literal_passes_through(self):
        assert resolve_amount(10**18) == 10**18

    def test_reference_becomes_value(self):
        assert resolve_amount(ChainedReference(1)) == to_chained_reference(1)

    def test_literal_in_tag_range_rejected(self):
        """A literal that looks like a reference would be misread by the relayer."""
        with pytest.raises(InvalidAmount):
            resolve_amount(to_chained_reference(1))

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmount):
            resolve_amount(-1)
