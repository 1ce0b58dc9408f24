"""Compiler configuration."""

import os
from dataclasses import dataclass

from route_compiler.constants import DEFAULT_DEADLINE_SECONDS, RELAYER_V4, WETH
from route_compiler.models.types import normalize_address


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class CompilerConfig:
    """Centralized configuration for route compilation.

    Attributes:
        relayer_address: Batch relayer that receives the multicall and acts
            on the user's behalf (default: mainnet relayer V4)
        wrapped_native_asset: Wrapped native token, used to place native ETH
            in a pool's canonical token order (default: mainnet WETH)
        deadline_seconds: Validity window for batch swaps when no explicit
            deadline is given (default: 3600)
        approve_share_tokens: Emit an approveVault call before a batch swap
            that spends a pool share token held by the relayer. Only pools
            without the automatic Vault allowance need it (default: False)
    """

    relayer_address: str = RELAYER_V4
    wrapped_native_asset: str = WETH
    deadline_seconds: int = DEFAULT_DEADLINE_SECONDS
    approve_share_tokens: bool = False

    @classmethod
    def from_env(cls) -> "CompilerConfig":
        """Build a configuration from environment variables.

        - ROUTE_COMPILER_RELAYER: relayer address
        - ROUTE_COMPILER_WRAPPED_NATIVE: wrapped native token address
        - ROUTE_COMPILER_DEADLINE_SECONDS: batch swap validity window
        - ROUTE_COMPILER_APPROVE_SHARE_TOKENS: approve the Vault for share token inputs
        """
        return cls(
            relayer_address=normalize_address(
                os.environ.get("ROUTE_COMPILER_RELAYER", RELAYER_V4), validate=True
            ),
            wrapped_native_asset=normalize_address(
                os.environ.get("ROUTE_COMPILER_WRAPPED_NATIVE", WETH), validate=True
            ),
            deadline_seconds=int(
                os.environ.get("ROUTE_COMPILER_DEADLINE_SECONDS", str(DEFAULT_DEADLINE_SECONDS))
            ),
            approve_share_tokens=_env_flag("ROUTE_COMPILER_APPROVE_SHARE_TOKENS"),
        )


# Default configuration instance
DEFAULT_COMPILER_CONFIG = CompilerConfig()
