"""Pytest configuration and fixtures.

Pool layout used across tests:
- pool_a: DAI/USDC, share token BPT_A
- pool_b: BPT_A/DAI, share token BPT_B
- pool_c: USDC/BPT_B, share token BPT_C
- usdc_weth: USDC/WETH swap pool
- weth_dai: WETH/DAI swap pool
"""

import pytest

from route_compiler.config import CompilerConfig
from route_compiler.pools.types import PoolMetadata
from tests.helpers import BPT_A, BPT_B, BPT_C, DAI, RELAYER, USDC, WETH, make_pool


@pytest.fixture
def pool_a() -> PoolMetadata:
    return make_pool(BPT_A, [USDC, DAI])


@pytest.fixture
def pool_b() -> PoolMetadata:
    return make_pool(BPT_B, [DAI, BPT_A])


@pytest.fixture
def pool_c() -> PoolMetadata:
    return make_pool(BPT_C, [BPT_B, USDC])


@pytest.fixture
def usdc_weth() -> PoolMetadata:
    return make_pool("0x" + "d1" * 20, [WETH, USDC])


@pytest.fixture
def weth_dai() -> PoolMetadata:
    return make_pool("0x" + "d2" * 20, [WETH, DAI])


@pytest.fixture
def all_pools(pool_a, pool_b, pool_c, usdc_weth, weth_dai) -> list[PoolMetadata]:
    return [pool_a, pool_b, pool_c, usdc_weth, weth_dai]


@pytest.fixture
def config() -> CompilerConfig:
    """Default configuration with the relayer pinned."""
    return CompilerConfig(relayer_address=RELAYER)
