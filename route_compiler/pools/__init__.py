"""Pool metadata package.

Provides PoolRegistry, canonical token ordering and weighted pool user data.
"""

from .registry import PoolRegistry, build_registry, parse_pool
from .sorting import sort_tokens, token_index
from .types import PoolMetadata, get_pool_address

__all__ = [
    "PoolMetadata",
    "PoolRegistry",
    "build_registry",
    "get_pool_address",
    "parse_pool",
    "sort_tokens",
    "token_index",
]
