"""Route compilation pipeline: hops -> actions -> ordered actions -> multicall.

Each stage is a pure function over immutable inputs. A compile allocates
its own chained reference keys starting from 0 and shares no state with any
other compile, so independent routes can be compiled concurrently.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

import structlog

from route_compiler.compiler.actions import build_actions
from route_compiler.compiler.encoder import RouteContext, encode_action
from route_compiler.compiler.scheduler import order_actions
from route_compiler.compiler.types import Hop
from route_compiler.config import DEFAULT_COMPILER_CONFIG, CompilerConfig
from route_compiler.models.route import CompiledRoute, RouteRequest, SwapType
from route_compiler.models.types import normalize_address
from route_compiler.pools.registry import PoolRegistry, build_registry
from route_compiler.relayer.library import encode_multicall, encode_set_relayer_approval

logger = structlog.get_logger()


def build_calls(
    hops: Sequence[Hop],
    assets: Sequence[str],
    token_in: str,
    token_out: str,
    swap_amount: int,
    min_out: int,
    user: str,
    registry: PoolRegistry,
    swap_type: SwapType = SwapType.EXACT_IN,
    authorisation: str | None = None,
    config: CompilerConfig = DEFAULT_COMPILER_CONFIG,
    deadline: int | None = None,
) -> CompiledRoute:
    """Compile route hops into a single relayer multicall.

    Args:
        hops: Route legs in optimizer order
        assets: Route token addresses the hop indices refer to
        token_in: Overall input token
        token_out: Overall output token
        swap_amount: Overall input amount
        min_out: Minimum acceptable overall output
        user: Account funding the route and receiving the output
        registry: Metadata of every pool the hops use
        swap_type: Exact input or exact output
        authorisation: Pre-signed relayer approval, prepended as a
            setRelayerApproval call when given
        config: Relayer and wrapped native addresses
        deadline: Batch swap deadline; defaults to now + config.deadline_seconds

    Returns:
        CompiledRoute targeting the relayer

    Raises:
        RouteCompilerError: On any malformed route; nothing partial is returned
    """
    if deadline is None:
        deadline = int(time.time()) + config.deadline_seconds

    actions = build_actions(hops, assets, token_in, token_out, min_out, registry)
    ordered = order_actions(actions, token_in, token_out, assets)

    ctx = RouteContext(
        assets=tuple(normalize_address(a) for a in assets),
        token_in=normalize_address(token_in),
        token_out=normalize_address(token_out),
        swap_amount=swap_amount,
        user=normalize_address(user),
        swap_type=swap_type,
        registry=registry,
        config=config,
        deadline=deadline,
    )

    calls: list[bytes] = []
    if authorisation:
        calls.append(encode_set_relayer_approval(config.relayer_address, True, authorisation))
    for action in ordered:
        calls.extend(encode_action(action, ctx))

    data = encode_multicall(calls)
    logger.info(
        "route_compiled",
        hops=len(hops),
        actions=len(ordered),
        calls=len(calls),
        swap_type=swap_type.name,
        relayer=config.relayer_address,
    )
    return CompiledRoute(to=config.relayer_address, data="0x" + data.hex())


def compile_route(
    request: RouteRequest,
    config: CompilerConfig = DEFAULT_COMPILER_CONFIG,
    deadline: int | None = None,
) -> CompiledRoute:
    """Compile an optimizer route request into a relayer multicall."""
    return build_calls(
        hops=[Hop.from_swap_step(step) for step in request.swaps],
        assets=request.token_addresses,
        token_in=request.token_in,
        token_out=request.token_out,
        swap_amount=int(request.swap_amount),
        min_out=int(request.return_amount),
        user=request.user,
        registry=build_registry(request.pools),
        swap_type=request.swap_type,
        authorisation=request.authorisation,
        config=config,
        deadline=deadline,
    )


__all__ = ["build_calls", "compile_route"]
