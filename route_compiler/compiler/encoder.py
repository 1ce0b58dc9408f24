"""Relayer call encoding for scheduled actions.

Each action becomes one relayer call (two for a batch swap that spends a
pool share token when share token approvals are enabled). Funds move either
through the user's wallet or through the relayer's Vault internal balance;
the choice depends on the call type:

- join: pulls from internal balance unless the join token is the route
  input; mints to the relayer unless the pool's share token is the route
  output
- exit: always burns from the user; pays to internal balance unless the
  exit token is the route output
- batch swap: pays to the user when the output is the route output or any
  pool share token (share tokens cannot be joined or exited from internal
  balance); pulls from the user when the input is the route input, from
  the relayer's token balance when it is a share token, and from internal
  balance otherwise
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from route_compiler.compiler.types import Action, ActionKind
from route_compiler.config import CompilerConfig
from route_compiler.constants import MAX_INT256, WEIGHTED_POOL_KIND
from route_compiler.errors import InvalidAmount, UnknownToken
from route_compiler.models.route import SwapType
from route_compiler.models.types import same_address
from route_compiler.pools import weighted_encoder
from route_compiler.pools.registry import PoolRegistry
from route_compiler.pools.sorting import sort_tokens, token_index
from route_compiler.relayer.chained_reference import ChainedReference, resolve_amount
from route_compiler.relayer.library import (
    FundManagement,
    encode_approve_vault,
    encode_batch_swap,
    encode_exit_pool,
    encode_join_pool,
)


@dataclass(frozen=True)
class RouteContext:
    """Read-only route parameters shared by every call encoder.

    Attributes:
        assets: Route token addresses the hop indices refer to
        token_in: Overall input token
        token_out: Overall output token
        swap_amount: Overall input amount
        user: Account funding the route and receiving its output
        swap_type: Exact input or exact output
        registry: Metadata of the pools the route uses
        config: Relayer and wrapped native addresses
        deadline: Batch swap deadline (unix seconds)
    """

    assets: tuple[str, ...]
    token_in: str
    token_out: str
    swap_amount: int
    user: str
    swap_type: SwapType
    registry: PoolRegistry
    config: CompilerConfig
    deadline: int

    @property
    def relayer(self) -> str:
        return self.config.relayer_address


def join_routing(join_token: str, pool_address: str, ctx: RouteContext) -> FundManagement:
    """Funds for a pool join."""
    from_internal = not same_address(join_token, ctx.token_in)
    to_internal = not same_address(pool_address, ctx.token_out)
    return FundManagement(
        sender=ctx.relayer if from_internal else ctx.user,
        from_internal_balance=from_internal,
        recipient=ctx.relayer if to_internal else ctx.user,
        to_internal_balance=to_internal,
    )


def exit_routing(exit_token: str, ctx: RouteContext) -> FundManagement:
    """Funds for a pool exit."""
    to_internal = not same_address(exit_token, ctx.token_out)
    return FundManagement(
        sender=ctx.user,
        from_internal_balance=False,
        recipient=ctx.relayer if to_internal else ctx.user,
        to_internal_balance=to_internal,
    )


def batch_swap_routing(batch_in: str, batch_out: str, ctx: RouteContext) -> FundManagement:
    """Funds for a batch swap from `batch_in` to `batch_out`."""
    to_internal = not (
        same_address(batch_out, ctx.token_out) or ctx.registry.is_share_token(batch_out)
    )
    if same_address(batch_in, ctx.token_in):
        sender, from_internal = ctx.user, False
    elif ctx.registry.is_share_token(batch_in):
        sender, from_internal = ctx.relayer, False
    else:
        sender, from_internal = ctx.relayer, True
    return FundManagement(
        sender=sender,
        from_internal_balance=from_internal,
        recipient=ctx.relayer if to_internal else ctx.user,
        to_internal_balance=to_internal,
    )


def _pool_token_index(sorted_tokens: Sequence[str], token: str) -> int:
    index = token_index(sorted_tokens, token)
    if index < 0:
        raise UnknownToken(token)
    return index


def build_join(action: Action, ctx: RouteContext) -> bytes:
    """Encode a deposit as a relayer joinPool call."""
    hop = action.first_hop
    pool = ctx.registry.get(hop.pool_id)
    # tokens must have the same order as the pool's registered tokens
    sorted_tokens = sort_tokens(pool.tokens, ctx.config.wrapped_native_asset)
    join_token = ctx.assets[hop.asset_in_index]
    join_index = _pool_token_index(sorted_tokens, join_token)

    amount = resolve_amount(hop.amount)
    min_out = resolve_amount(action.min_out)
    max_amounts_in = [0] * len(sorted_tokens)
    if ctx.swap_type is SwapType.EXACT_IN:
        # exact token in, variable BPT out
        max_amounts_in[join_index] = amount
        user_data = weighted_encoder.join_exact_tokens_in_for_bpt_out(max_amounts_in, min_out)
    else:
        # variable token in, exact BPT out
        max_amounts_in[join_index] = min_out
        user_data = weighted_encoder.join_token_in_for_exact_bpt_out(amount, join_index)

    funds = join_routing(join_token, pool.address, ctx)
    output_reference = action.output_references[0].key.value if action.output_references else 0
    return encode_join_pool(
        pool_id=pool.id,
        kind=WEIGHTED_POOL_KIND,
        sender=funds.sender,
        recipient=funds.recipient,
        assets=sorted_tokens,
        max_amounts_in=max_amounts_in,
        user_data=user_data,
        from_internal_balance=funds.from_internal_balance,
        value=0,
        output_reference=output_reference,
    )


def build_exit(action: Action, ctx: RouteContext) -> bytes:
    """Encode a withdrawal as a relayer exitPool call."""
    hop = action.first_hop
    pool = ctx.registry.get(hop.pool_id)
    sorted_tokens = sort_tokens(pool.tokens, ctx.config.wrapped_native_asset)
    exit_token = ctx.assets[hop.asset_out_index]
    exit_index = _pool_token_index(sorted_tokens, exit_token)

    amount = resolve_amount(hop.amount)
    min_out = resolve_amount(action.min_out)
    min_amounts_out = [0] * len(sorted_tokens)
    if ctx.swap_type is SwapType.EXACT_IN:
        # exact BPT in, variable token out
        min_amounts_out[exit_index] = min_out
        user_data = weighted_encoder.exit_exact_bpt_in_for_one_token_out(amount, exit_index)
    else:
        # variable BPT in, exact token out
        min_amounts_out[exit_index] = amount
        user_data = weighted_encoder.exit_bpt_in_for_exact_tokens_out(min_amounts_out, min_out)

    funds = exit_routing(exit_token, ctx)
    # exitPool output references index into the request's (sorted) assets
    output_references = [(exit_index, ref.key.value) for ref in action.output_references]
    return encode_exit_pool(
        pool_id=pool.id,
        kind=WEIGHTED_POOL_KIND,
        sender=funds.sender,
        recipient=funds.recipient,
        assets=sorted_tokens,
        min_amounts_out=min_amounts_out,
        user_data=user_data,
        to_internal_balance=funds.to_internal_balance,
        output_references=output_references,
    )


def build_batch_swap(action: Action, ctx: RouteContext) -> list[bytes]:
    """Encode a batched exchange as relayer calls.

    Returns the batchSwap call, preceded by an approveVault call when the
    batch spends a pool share token held by the relayer and the config asks
    for share token approvals.
    """
    in_index = action.first_hop.asset_in_index
    out_index = action.last_hop.asset_out_index
    batch_in = ctx.assets[in_index]
    batch_out = ctx.assets[out_index]
    funds = batch_swap_routing(batch_in, batch_out, ctx)

    calls: list[bytes] = []
    # positive limits for tokens going into the Vault, negative for tokens out
    limits = [0] * len(ctx.assets)
    if not funds.to_internal_balance:
        limits[out_index] = -resolve_amount(action.min_out)

    if same_address(batch_in, ctx.token_in):
        limits[in_index] = resolve_amount(ctx.swap_amount)
    else:
        if ctx.config.approve_share_tokens and ctx.registry.is_share_token(batch_in):
            # older pools lack the automatic Vault allowance for their share token
            amount = action.first_hop.amount
            if not isinstance(amount, ChainedReference):
                raise InvalidAmount(f"Share token input {batch_in} must come from an earlier call")
            calls.append(encode_approve_vault(batch_in, amount.read_only().value))
        limits[in_index] = MAX_INT256

    swaps = [
        (
            hop.pool_id,
            hop.asset_in_index,
            hop.asset_out_index,
            resolve_amount(hop.amount),
            hop.user_data,
        )
        for hop in action.hops
    ]
    calls.append(
        encode_batch_swap(
            kind=int(ctx.swap_type),
            swaps=swaps,
            assets=ctx.assets,
            funds=funds,
            limits=limits,
            deadline=ctx.deadline,
            value=0,
            output_references=[(ref.index, ref.key.value) for ref in action.output_references],
        )
    )
    return calls


def encode_action(action: Action, ctx: RouteContext) -> list[bytes]:
    """Encode one scheduled action into its relayer call(s)."""
    if action.kind is ActionKind.DEPOSIT:
        return [build_join(action, ctx)]
    if action.kind is ActionKind.WITHDRAWAL:
        return [build_exit(action, ctx)]
    if action.kind is ActionKind.BATCHED_EXCHANGE:
        return build_batch_swap(action, ctx)
    raise ValueError(f"Unscheduled {action.kind.value} action; run order_actions first")


__all__ = [
    "RouteContext",
    "batch_swap_routing",
    "build_batch_swap",
    "build_exit",
    "build_join",
    "encode_action",
    "exit_routing",
    "join_routing",
]
