"""Pydantic models for route compilation requests and results.

Field names follow the route optimizer's swap info (camelCase on the wire).
"""

from enum import IntEnum

from pydantic import BaseModel, Field

from route_compiler.models.types import Address, Bytes, PoolId, Uint256


class SwapType(IntEnum):
    """Whether the route fixes its input or its output amount.

    Values match the Vault's SwapKind (GIVEN_IN = 0, GIVEN_OUT = 1).
    """

    EXACT_IN = 0
    EXACT_OUT = 1


class SwapStep(BaseModel):
    """One hop as produced by the route optimizer.

    Asset indices refer to the request's `tokenAddresses`.
    """

    pool_id: PoolId = Field(alias="poolId", description="Balancer pool id (bytes32).")
    asset_in_index: int = Field(alias="assetInIndex", ge=0)
    asset_out_index: int = Field(alias="assetOutIndex", ge=0)
    amount: Uint256 = Field(description="Exact amount for this hop (0 for chained hops).")
    user_data: Bytes = Field(default="0x", alias="userData")

    model_config = {"populate_by_name": True, "frozen": True}


class PoolInfo(BaseModel):
    """Pool metadata supplied by the pool registry collaborator."""

    id: PoolId
    address: Address | None = Field(
        default=None,
        description="Pool (and share token) address. Derived from the pool id when omitted.",
    )
    tokens: list[Address] = Field(
        alias="tokensList",
        min_length=1,
        description="Pool tokens; the share token is included for composable pools.",
    )

    model_config = {"populate_by_name": True, "frozen": True}


class RouteRequest(BaseModel):
    """A fully priced route to compile into a relayer multicall."""

    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")
    token_addresses: list[Address] = Field(alias="tokenAddresses", min_length=1)
    swaps: list[SwapStep] = Field(default_factory=list)
    swap_amount: Uint256 = Field(alias="swapAmount", description="Overall input amount.")
    return_amount: Uint256 = Field(
        alias="returnAmount",
        description="Minimum acceptable output (already slippage-adjusted).",
    )
    user: Address = Field(description="Account that funds the route and receives the output.")
    authorisation: Bytes | None = Field(
        default=None,
        description="Pre-signed relayer approval; adds a setRelayerApproval call when present.",
    )
    swap_type: SwapType = Field(default=SwapType.EXACT_IN, alias="swapType")
    pools: list[PoolInfo] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class CompiledRoute(BaseModel):
    """A single call ready for submission."""

    to: Address = Field(description="Contract to call (the relayer).")
    data: Bytes = Field(description="multicall call data.")

    model_config = {"populate_by_name": True, "frozen": True}
