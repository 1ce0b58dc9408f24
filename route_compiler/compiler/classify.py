"""Hop classification: swap, pool join or pool exit.

A hop whose output token is its own pool's share token mints shares (a
join); one whose input token is its own pool's share token burns them (an
exit). Everything else is a plain swap.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from route_compiler.compiler.types import ActionKind, Hop
from route_compiler.errors import InvalidHopClassification
from route_compiler.models.types import same_address
from route_compiler.pools.types import get_pool_address


def classify_hop(hop: Hop, assets: Sequence[str], pool_address: str) -> ActionKind:
    """Classify a hop against the share token of its own pool.

    Args:
        hop: The hop to classify
        assets: Route token addresses the hop's indices refer to
        pool_address: Address of the hop's pool (its share token)

    Returns:
        DEPOSIT, WITHDRAWAL or EXCHANGE

    Raises:
        InvalidHopClassification: If the share token is both input and output
    """
    token_in = assets[hop.asset_in_index]
    token_out = assets[hop.asset_out_index]
    joins = same_address(token_out, pool_address)
    exits = same_address(token_in, pool_address)
    if joins and exits:
        raise InvalidHopClassification(
            f"Hop through {hop.pool_id} has the pool share token as both input and output"
        )
    if joins:
        return ActionKind.DEPOSIT
    if exits:
        return ActionKind.WITHDRAWAL
    return ActionKind.EXCHANGE


def is_deposit(hop: Hop, assets: Sequence[str]) -> bool:
    """token -> share token of the hop's pool."""
    return same_address(assets[hop.asset_out_index], get_pool_address(hop.pool_id))


def is_withdrawal(hop: Hop, assets: Sequence[str]) -> bool:
    """share token of the hop's pool -> token."""
    return same_address(assets[hop.asset_in_index], get_pool_address(hop.pool_id))


def has_deposit_or_withdrawal(hop: Hop, assets: Sequence[str]) -> bool:
    return is_deposit(hop, assets) or is_withdrawal(hop, assets)


def some_deposit_or_withdrawal(hops: Iterable[Hop], assets: Sequence[str]) -> bool:
    """Whether a route needs the relayer at all.

    Routes made only of swaps can go straight to the Vault's batchSwap.
    """
    return any(has_deposit_or_withdrawal(hop, assets) for hop in hops)
