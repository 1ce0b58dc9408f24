"""Route compiler: turns optimizer routes into relayer multicalls.

Pipeline:
- classify: swap, join or exit per hop
- actions: one Action per hop, chained through relayer references
- scheduler: reorder joins/exits and batch adjacent swaps
- encoder: render each action as relayer call data
"""

from route_compiler.compiler.actions import build_actions
from route_compiler.compiler.classify import (
    classify_hop,
    has_deposit_or_withdrawal,
    is_deposit,
    is_withdrawal,
    some_deposit_or_withdrawal,
)
from route_compiler.compiler.encoder import RouteContext, encode_action
from route_compiler.compiler.pipeline import build_calls, compile_route
from route_compiler.compiler.scheduler import order_actions
from route_compiler.compiler.types import Action, ActionKind, Hop, OutputReference

__all__ = [
    # Types
    "Action",
    "ActionKind",
    "Hop",
    "OutputReference",
    "RouteContext",
    # Stages
    "classify_hop",
    "build_actions",
    "order_actions",
    "encode_action",
    # Entry points
    "build_calls",
    "compile_route",
    # Route inspection
    "is_deposit",
    "is_withdrawal",
    "has_deposit_or_withdrawal",
    "some_deposit_or_withdrawal",
]
