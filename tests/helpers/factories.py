"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_hop, make_pool

    pool = make_pool(BPT_A, [DAI, USDC])
    hop = make_hop(pool, 0, 1, amount=10**18)
"""

from route_compiler.compiler.types import Action, ActionKind, Hop, OutputReference
from route_compiler.models.route import PoolInfo, RouteRequest, SwapStep, SwapType
from route_compiler.pools.registry import PoolRegistry
from route_compiler.pools.types import PoolMetadata
from route_compiler.relayer.chained_reference import ChainedReference
from tests.helpers.constants import USER


def make_pool_id(address: str, nonce: int = 1, specialization: int = 0) -> str:
    """Balancer pool id: address + 2-byte specialization + 10-byte nonce."""
    return address + f"{specialization:04x}" + f"{nonce:020x}"


def make_pool(address: str, tokens: list[str], nonce: int = 1) -> PoolMetadata:
    """Create pool metadata whose id embeds its address."""
    return PoolMetadata(id=make_pool_id(address, nonce), address=address, tokens=tuple(tokens))


def make_registry(*pools: PoolMetadata) -> PoolRegistry:
    return PoolRegistry(pools)


def make_hop(pool: PoolMetadata, asset_in: int, asset_out: int, amount: int = 0) -> Hop:
    return Hop(pool_id=pool.id, asset_in_index=asset_in, asset_out_index=asset_out, amount=amount)


def make_action(
    kind: ActionKind,
    pool: PoolMetadata,
    asset_in: int,
    asset_out: int,
    writes: int | None = None,
    min_out: int = 0,
) -> Action:
    """Create a single-hop action, optionally writing chained key `writes`."""
    refs = ()
    if writes is not None:
        refs = (OutputReference(index=asset_out, key=ChainedReference(writes)),)
    return Action(
        kind=kind,
        hops=(make_hop(pool, asset_in, asset_out),),
        output_references=refs,
        min_out=min_out,
    )


def make_request(
    token_in: str,
    token_out: str,
    assets: list[str],
    pools: list[PoolMetadata],
    hops: list[tuple[PoolMetadata, int, int, int]],
    swap_amount: int = 1_000 * 10**6,
    return_amount: int = 990 * 10**18,
    swap_type: SwapType = SwapType.EXACT_IN,
    authorisation: str | None = None,
) -> RouteRequest:
    """Create a RouteRequest from (pool, asset_in, asset_out, amount) hop tuples."""
    return RouteRequest(
        token_in=token_in,
        token_out=token_out,
        token_addresses=assets,
        swaps=[
            SwapStep(
                pool_id=pool.id,
                asset_in_index=asset_in,
                asset_out_index=asset_out,
                amount=amount,
            )
            for pool, asset_in, asset_out, amount in hops
        ],
        swap_amount=swap_amount,
        return_amount=return_amount,
        user=USER,
        authorisation=authorisation,
        swap_type=swap_type,
        pools=[PoolInfo(id=p.id, address=p.address, tokens=list(p.tokens)) for p in pools],
    )
