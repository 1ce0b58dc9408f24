"""Pool metadata dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from route_compiler.models.types import normalize_address, same_address


def get_pool_address(pool_id: str) -> str:
    """Extract the pool address from a Balancer pool id.

    The 32-byte id is the 20-byte pool address followed by a 2-byte
    specialization and a 10-byte nonce.
    """
    pool_id = pool_id if pool_id.startswith("0x") else "0x" + pool_id
    if len(pool_id) != 66:
        raise ValueError(f"Invalid pool id length: {pool_id}")
    return normalize_address(pool_id[:42])


@dataclass(frozen=True)
class PoolMetadata:
    """Static pool data needed to encode joins and exits.

    Attributes:
        id: Balancer pool id (32-byte hex string)
        address: Pool contract address, which is also its share token (BPT)
        tokens: Pool tokens as listed by the registry (any order)
    """

    id: str
    address: str
    tokens: tuple[str, ...]

    def has_token(self, token: str) -> bool:
        return any(same_address(t, token) for t in self.tokens)
