"""Action ordering: minimise the number of relayer calls.

Swaps next to each other can share one batchSwap call, so joins and exits
that can safely move are pulled out of the way:
- joins/exits funded by the route input depend on nothing and go first
- joins/exits producing the route output feed nothing and go last
- everything else keeps its relative order, since later actions read
  chained values written by earlier ones
Adjacent swaps in the resulting order are then merged.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from route_compiler.compiler.actions import route_token_indices
from route_compiler.compiler.types import Action, ActionKind, Hop, OutputReference

logger = structlog.get_logger()


def partition_actions(
    actions: Sequence[Action], in_index: int, out_index: int
) -> tuple[list[Action], list[Action], list[Action]]:
    """Stable split into (enter, middle, exit) actions."""
    enter: list[Action] = []
    middle: list[Action] = []
    exit_: list[Action] = []
    for action in actions:
        if action.kind.is_pool_operation and action.first_hop.asset_in_index == in_index:
            enter.append(action)
        elif action.kind.is_pool_operation and action.first_hop.asset_out_index == out_index:
            exit_.append(action)
        else:
            middle.append(action)
    return enter, middle, exit_


def _batch(run: Sequence[Action]) -> Action:
    hops: list[Hop] = []
    refs: list[OutputReference] = []
    for action in run:
        hops.extend(action.hops)
        refs.extend(action.output_references)
    return Action(
        kind=ActionKind.BATCHED_EXCHANGE,
        hops=tuple(hops),
        output_references=tuple(refs),
        min_out=run[-1].min_out,
    )


def batch_exchanges(actions: Sequence[Action]) -> tuple[Action, ...]:
    """Collapse each maximal run of consecutive exchanges into one batched exchange.

    A lone exchange still becomes a (single hop) batched exchange, since
    swaps are always issued through batchSwap.
    """
    ordered: list[Action] = []
    run: list[Action] = []
    for action in actions:
        if action.kind in (ActionKind.EXCHANGE, ActionKind.BATCHED_EXCHANGE):
            run.append(action)
            continue
        if run:
            ordered.append(_batch(run))
            run = []
        ordered.append(action)
    if run:
        ordered.append(_batch(run))
    return tuple(ordered)


def order_actions(
    actions: Sequence[Action],
    token_in: str,
    token_out: str,
    assets: Sequence[str],
) -> tuple[Action, ...]:
    """Reorder and batch actions so the relayer multicall needs as few calls as possible.

    Args:
        actions: Actions in hop order, as returned by build_actions
        token_in: Overall input token
        token_out: Overall output token
        assets: Route token addresses

    Returns:
        New tuple of actions: enter joins/exits, then middle actions with
        swaps batched, then exit joins/exits
    """
    in_index, out_index = route_token_indices(assets, token_in, token_out)
    enter, middle, exit_ = partition_actions(actions, in_index, out_index)
    ordered = batch_exchanges([*enter, *middle, *exit_])

    logger.debug(
        "actions_ordered",
        enter=len(enter),
        middle=len(middle),
        exit=len(exit_),
        calls=len(ordered),
    )
    return ordered


__all__ = ["batch_exchanges", "order_actions", "partition_actions"]
