"""Action building: one Action per hop, wired with chained references.

Walks the hops once, left to right. Each hop that does not end the route
stores its output under a fresh key; the next hop reads that key instead of
a literal amount, so intermediate amounts never have to be known up front.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import structlog

from route_compiler.compiler.classify import classify_hop
from route_compiler.compiler.types import Action, Hop, OutputReference
from route_compiler.errors import DanglingReference, EmptyRoute, UnknownToken
from route_compiler.pools.registry import PoolRegistry
from route_compiler.pools.sorting import token_index
from route_compiler.relayer.chained_reference import ChainedReference

logger = structlog.get_logger()


def route_token_indices(assets: Sequence[str], token_in: str, token_out: str) -> tuple[int, int]:
    """Indices of the route's input and output tokens in its asset list.

    Raises:
        UnknownToken: If either token is missing
    """
    in_index = token_index(assets, token_in)
    if in_index < 0:
        raise UnknownToken(token_in)
    out_index = token_index(assets, token_out)
    if out_index < 0:
        raise UnknownToken(token_out)
    return in_index, out_index


def build_actions(
    hops: Sequence[Hop],
    assets: Sequence[str],
    token_in: str,
    token_out: str,
    min_out: int,
    registry: PoolRegistry,
) -> tuple[Action, ...]:
    """Create an Action for each hop.

    Args:
        hops: Route legs in optimizer order
        assets: Route token addresses the hop indices refer to
        token_in: Overall input token
        token_out: Overall output token
        min_out: Minimum acceptable overall output
        registry: Metadata of the pools the route uses

    Returns:
        One action per hop, in the same order. Hops funded by the route
        input keep their literal amount; every other hop reads the chained
        reference written by the hop before it.

    Raises:
        EmptyRoute: If there are no hops
        UnknownPool: If a hop references an unregistered pool
        UnknownToken: If token_in or token_out is not in assets
        InvalidHopClassification: If a hop both joins and exits its pool
        DanglingReference: If a hop needs a chained amount before any hop produced one
    """
    if not hops:
        raise EmptyRoute("Route has no hops")

    in_index, out_index = route_token_indices(assets, token_in, token_out)

    actions: list[Action] = []
    next_key = 0
    producer: ChainedReference | None = None

    for i, hop in enumerate(hops):
        pool = registry.get(hop.pool_id)
        kind = classify_hop(hop, assets, pool.address)

        if hop.asset_in_index != in_index:
            if producer is None:
                raise DanglingReference(f"Hop {i} has no earlier hop to read its amount from")
            hop = dataclasses.replace(hop, amount=producer)

        if hop.asset_out_index == out_index:
            actions.append(Action(kind=kind, hops=(hop,), min_out=min_out))
            continue

        producer = ChainedReference(next_key)
        next_key += 1
        actions.append(
            Action(
                kind=kind,
                hops=(hop,),
                output_references=(OutputReference(index=hop.asset_out_index, key=producer),),
            )
        )

    logger.debug(
        "actions_built",
        hop_count=len(hops),
        kinds=[a.kind.value for a in actions],
        chained_keys=next_key,
    )
    return tuple(actions)


__all__ = ["build_actions", "route_token_indices"]
