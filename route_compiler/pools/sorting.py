"""Canonical pool token ordering.

The Vault expects join/exit asset lists in the same order as the pool's
registered tokens, which is ascending by address. Native ETH (the zero
address) takes the position of the wrapped native token.
"""

from __future__ import annotations

from collections.abc import Sequence

from route_compiler.constants import NATIVE_ASSET, WETH
from route_compiler.models.types import normalize_address, same_address


def sort_tokens(tokens: Sequence[str], wrapped_native: str = WETH) -> tuple[str, ...]:
    """Sort tokens into the pool's canonical order.

    Args:
        tokens: Token addresses in any order
        wrapped_native: Wrapped native token whose slot native ETH takes

    Returns:
        Lowercase addresses, ascending by address
    """

    def sort_key(token: str) -> int:
        if same_address(token, NATIVE_ASSET):
            token = wrapped_native
        return int(normalize_address(token), 16)

    return tuple(normalize_address(t) for t in sorted(tokens, key=sort_key))


def token_index(tokens: Sequence[str], token: str) -> int:
    """Position of `token` in `tokens` (case-insensitive), or -1."""
    for i, t in enumerate(tokens):
        if same_address(t, token):
            return i
    return -1
