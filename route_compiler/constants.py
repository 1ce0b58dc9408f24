"""Protocol constants for the Balancer relayer route compiler.

Centralizes well-known addresses and relayer parameters.
"""

from route_compiler.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return a contract or token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Balancer batch relayer V4 (mainnet)
RELAYER_V4 = _validate_address("RELAYER_V4", "0x2536dfeecb7a0397cf98edada8486254533b1afa")

# Wrapped native token used when sorting pool tokens (mainnet WETH)
WETH = _validate_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")

# Native ETH is represented by the zero address in Vault asset lists
NATIVE_ASSET = "0x0000000000000000000000000000000000000000"

# Default validity window for batch swaps (1 hour)
DEFAULT_DEADLINE_SECONDS = 3600

# Relayer pool kind for joins/exits; the relayer only supports WEIGHTED (0)
WEIGHTED_POOL_KIND = 0

# Vault batchSwap limits are int256
MAX_INT256 = 2**255 - 1
