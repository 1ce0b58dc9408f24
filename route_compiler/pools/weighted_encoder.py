"""User data encoding for weighted pool joins and exits.

The Vault passes `userData` through to the pool untouched; weighted pools
decode a leading kind enum followed by kind-specific arguments. Amounts
may be chained references, which the relayer replaces before calling the
Vault.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from eth_abi import encode  # type: ignore[attr-defined]


class WeightedPoolJoinKind(IntEnum):
    INIT = 0
    EXACT_TOKENS_IN_FOR_BPT_OUT = 1
    TOKEN_IN_FOR_EXACT_BPT_OUT = 2
    ALL_TOKENS_IN_FOR_EXACT_BPT_OUT = 3


class WeightedPoolExitKind(IntEnum):
    EXACT_BPT_IN_FOR_ONE_TOKEN_OUT = 0
    EXACT_BPT_IN_FOR_TOKENS_OUT = 1
    BPT_IN_FOR_EXACT_TOKENS_OUT = 2


def join_exact_tokens_in_for_bpt_out(amounts_in: Sequence[int], minimum_bpt: int) -> bytes:
    """Join with exact token amounts, receiving at least `minimum_bpt`."""
    return encode(
        ["uint256", "uint256[]", "uint256"],
        [int(WeightedPoolJoinKind.EXACT_TOKENS_IN_FOR_BPT_OUT), list(amounts_in), minimum_bpt],
    )


def join_token_in_for_exact_bpt_out(bpt_amount_out: int, enter_token_index: int) -> bytes:
    """Join with a single token, receiving exactly `bpt_amount_out`."""
    return encode(
        ["uint256", "uint256", "uint256"],
        [int(WeightedPoolJoinKind.TOKEN_IN_FOR_EXACT_BPT_OUT), bpt_amount_out, enter_token_index],
    )


def exit_exact_bpt_in_for_one_token_out(bpt_amount_in: int, exit_token_index: int) -> bytes:
    """Exit burning exactly `bpt_amount_in` for a single token."""
    return encode(
        ["uint256", "uint256", "uint256"],
        [int(WeightedPoolExitKind.EXACT_BPT_IN_FOR_ONE_TOKEN_OUT), bpt_amount_in, exit_token_index],
    )


def exit_bpt_in_for_exact_tokens_out(amounts_out: Sequence[int], max_bpt_amount_in: int) -> bytes:
    """Exit for exact token amounts, burning at most `max_bpt_amount_in`."""
    return encode(
        ["uint256", "uint256[]", "uint256"],
        [int(WeightedPoolExitKind.BPT_IN_FOR_EXACT_TOKENS_OUT), list(amounts_out), max_bpt_amount_in],
    )
