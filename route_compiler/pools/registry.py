"""Pool registry for the pools participating in a route.

The registry is built once per compile from the request's pool metadata and
passed explicitly to every compiler stage. It is never mutated after
construction, so concurrent compiles never share state through it.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from route_compiler.errors import UnknownPool
from route_compiler.models.route import PoolInfo
from route_compiler.models.types import normalize_address
from route_compiler.pools.types import PoolMetadata, get_pool_address

logger = structlog.get_logger()


class PoolRegistry:
    """Read-only lookup from pool id to pool metadata.

    Pool ids are matched case-insensitively. The set of pool addresses
    doubles as the set of known share tokens (BPTs).
    """

    def __init__(self, pools: Iterable[PoolMetadata] | None = None) -> None:
        """Initialize the registry.

        Args:
            pools: Pool metadata. A later entry with an id already seen
                replaces the earlier one.
        """
        by_id: dict[str, PoolMetadata] = {}
        for pool in pools or ():
            key = pool.id.lower()
            if key in by_id:
                logger.debug("pool_replaced", pool_id=pool.id[:10])
            by_id[key] = pool
        self._pools = by_id
        self._share_tokens = frozenset(normalize_address(p.address) for p in by_id.values())

    def __len__(self) -> int:
        return len(self._pools)

    def __contains__(self, pool_id: object) -> bool:
        return isinstance(pool_id, str) and pool_id.lower() in self._pools

    def get(self, pool_id: str) -> PoolMetadata:
        """Get the metadata of a pool.

        Raises:
            UnknownPool: If the pool id is not registered
        """
        pool = self._pools.get(pool_id.lower())
        if pool is None:
            raise UnknownPool(pool_id)
        return pool

    @property
    def share_tokens(self) -> frozenset[str]:
        """Addresses of every registered pool's share token (lowercase)."""
        return self._share_tokens

    def is_share_token(self, token: str) -> bool:
        """Whether `token` is the share token of any registered pool."""
        return normalize_address(token) in self._share_tokens


def parse_pool(info: PoolInfo) -> PoolMetadata:
    """Convert registry pool info into PoolMetadata.

    The address defaults to the one embedded in the pool id.
    """
    address = info.address if info.address is not None else get_pool_address(info.id)
    return PoolMetadata(
        id=info.id.lower(),
        address=normalize_address(address),
        tokens=tuple(normalize_address(t) for t in info.tokens),
    )


def build_registry(pools: Iterable[PoolInfo]) -> PoolRegistry:
    """Build a PoolRegistry from request pool metadata."""
    registry = PoolRegistry(parse_pool(p) for p in pools)
    logger.debug("pool_registry_built", pool_count=len(registry))
    return registry


__all__ = ["PoolRegistry", "build_registry", "parse_pool"]
