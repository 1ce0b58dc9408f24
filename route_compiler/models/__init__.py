"""Pydantic models for route compiler inputs and outputs."""

from route_compiler.models.route import CompiledRoute, PoolInfo, RouteRequest, SwapStep, SwapType
from route_compiler.models.types import Address, Bytes, PoolId, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes",
    "PoolId",
    "Uint256",
    # Request models
    "RouteRequest",
    "SwapStep",
    "SwapType",
    "PoolInfo",
    # Result
    "CompiledRoute",
]
