"""Tests for PoolRegistry and pool metadata parsing."""

import pytest

from route_compiler.errors import UnknownPool
from route_compiler.models.route import PoolInfo
from route_compiler.pools.registry import PoolRegistry, build_registry, parse_pool
from route_compiler.pools.types import get_pool_address
from tests.helpers import BPT_A, BPT_B, DAI, USDC, make_pool, make_pool_id


class TestGetPoolAddress:
    def test_first_twenty_bytes(self):
        assert get_pool_address(make_pool_id(BPT_A, nonce=7)) == BPT_A

    def test_lowercases(self):
        assert get_pool_address(make_pool_id(BPT_A).upper().replace("0X", "0x")) == BPT_A

    def test_invalid_length_raises(self):
        with pytest.raises(ValueError):
            get_pool_address(BPT_A)


class TestPoolRegistry:
    """Tests for pool lookup."""

    def test_get(self, pool_a):
        registry = PoolRegistry([pool_a])
        assert registry.get(pool_a.id) is pool_a

    def test_get_is_case_insensitive(self, pool_a):
        registry = PoolRegistry([pool_a])
        assert registry.get(pool_a.id.upper().replace("0X", "0x")) is pool_a

    def test_unknown_pool_raises(self, pool_a, pool_b):
        registry = PoolRegistry([pool_a])
        with pytest.raises(UnknownPool) as exc_info:
            registry.get(pool_b.id)
        assert exc_info.value.pool_id == pool_b.id

    def test_contains_and_len(self, pool_a, pool_b):
        registry = PoolRegistry([pool_a, pool_b])
        assert len(registry) == 2
        assert pool_a.id in registry
        assert make_pool_id(USDC) not in registry

    def test_share_tokens(self, pool_a, pool_b):
        registry = PoolRegistry([pool_a, pool_b])
        assert registry.share_tokens == frozenset({BPT_A, BPT_B})
        assert registry.is_share_token(BPT_A.upper().replace("0X", "0x"))
        assert not registry.is_share_token(DAI)

    def test_duplicate_id_replaced(self, pool_a):
        replacement = make_pool(BPT_A, [DAI])
        registry = PoolRegistry([pool_a, replacement])
        assert len(registry) == 1
        assert registry.get(pool_a.id) is replacement

    def test_empty(self):
        registry = PoolRegistry()
        assert len(registry) == 0
        assert registry.share_tokens == frozenset()


class TestParsing:
    """Tests for building the registry from request pool info."""

    def test_address_derived_from_id(self):
        info = PoolInfo(id=make_pool_id(BPT_A), tokensList=[USDC, DAI])
        assert parse_pool(info).address == BPT_A

    def test_explicit_address_and_tokens_normalized(self):
        info = PoolInfo(
            id=make_pool_id(BPT_A),
            address="0x" + "AA" * 20,
            tokens=["0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", DAI],
        )
        pool = parse_pool(info)
        assert pool.address == BPT_A
        assert pool.tokens == (USDC, DAI)

    def test_build_registry(self):
        registry = build_registry(
            [
                PoolInfo(id=make_pool_id(BPT_A), tokens=[USDC, DAI]),
                PoolInfo(id=make_pool_id(BPT_B), tokens=[DAI, BPT_A]),
            ]
        )
        assert len(registry) == 2
        assert registry.get(make_pool_id(BPT_B)).has_token(BPT_A)
