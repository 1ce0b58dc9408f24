"""Type definitions for the route compiler pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from route_compiler.models.route import SwapStep
from route_compiler.relayer.chained_reference import Amount, ChainedReference
from route_compiler.relayer.library import hex_bytes


class ActionKind(str, Enum):
    """What a compiled action does on-chain."""

    EXCHANGE = "exchange"  # plain swap between two pool tokens
    DEPOSIT = "deposit"  # pool join: token in, pool share token out
    WITHDRAWAL = "withdrawal"  # pool exit: pool share token in, token out
    BATCHED_EXCHANGE = "batched_exchange"  # consecutive swaps in one batchSwap

    @property
    def is_pool_operation(self) -> bool:
        """Joins and exits, which cannot be batched with swaps."""
        return self in (ActionKind.DEPOSIT, ActionKind.WITHDRAWAL)


@dataclass(frozen=True)
class Hop:
    """One leg of a route through a single pool.

    Attributes:
        pool_id: Balancer pool id (32-byte hex string)
        asset_in_index: Index of the input token in the route's assets
        asset_out_index: Index of the output token in the route's assets
        amount: Literal amount, or a chained reference for legs whose
            amount is produced by an earlier leg
        user_data: Extra pool-specific data for the swap
    """

    pool_id: str
    asset_in_index: int
    asset_out_index: int
    amount: Amount
    user_data: bytes = b""

    @classmethod
    def from_swap_step(cls, step: SwapStep) -> Hop:
        return cls(
            pool_id=step.pool_id.lower(),
            asset_in_index=step.asset_in_index,
            asset_out_index=step.asset_out_index,
            amount=int(step.amount),
            user_data=hex_bytes(step.user_data),
        )


@dataclass(frozen=True)
class OutputReference:
    """Store the output of an action under a chained reference.

    Attributes:
        index: Route asset index of the token whose amount is stored
        key: Reference the amount is stored under
    """

    index: int
    key: ChainedReference


@dataclass(frozen=True)
class Action:
    """A single relayer call to be emitted, before encoding.

    Attributes:
        kind: Exchange, deposit, withdrawal or batched exchange
        hops: The legs this action executes; only batched exchanges hold more than one
        output_references: Chained values this action writes
        min_out: Minimum acceptable output (0 when unconstrained)
    """

    kind: ActionKind
    hops: tuple[Hop, ...]
    output_references: tuple[OutputReference, ...] = ()
    min_out: int = 0

    def __post_init__(self) -> None:
        if not self.hops:
            raise ValueError("Action must hold at least one hop")
        if len(self.hops) > 1 and self.kind is not ActionKind.BATCHED_EXCHANGE:
            raise ValueError(f"{self.kind.value} action cannot hold {len(self.hops)} hops")

    @property
    def first_hop(self) -> Hop:
        return self.hops[0]

    @property
    def last_hop(self) -> Hop:
        return self.hops[-1]


__all__ = ["Action", "ActionKind", "Hop", "OutputReference"]
