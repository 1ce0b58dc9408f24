"""Test helpers module for shared test utilities.

- constants: Token, pool and account addresses
- factories: Pool, hop, action and request factory functions
- calldata: Decoders for relayer call data
"""

from tests.helpers.calldata import decode_call, decode_multicall, selector
from tests.helpers.constants import (
    BPT_A,
    BPT_B,
    BPT_C,
    DAI,
    DEADLINE,
    RELAYER,
    USDC,
    USER,
    WETH,
)
from tests.helpers.factories import (
    make_action,
    make_hop,
    make_pool,
    make_pool_id,
    make_registry,
    make_request,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "BPT_A",
    "BPT_B",
    "BPT_C",
    "USER",
    "RELAYER",
    "DEADLINE",
    # Factories
    "make_action",
    "make_hop",
    "make_pool",
    "make_pool_id",
    "make_registry",
    "make_request",
    # Calldata
    "decode_call",
    "decode_multicall",
    "selector",
]
