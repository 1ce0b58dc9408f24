"""Balancer batch relayer primitives.

Chained references (placeholder amounts resolved inside one multicall)
and BatchRelayerLibrary calldata encoders.
"""

from .chained_reference import (
    CHAINED_REFERENCE_READONLY_PREFIX,
    CHAINED_REFERENCE_TEMP_PREFIX,
    Amount,
    ChainedReference,
    from_chained_reference,
    is_chained_reference,
    resolve_amount,
    to_chained_reference,
)
from .library import (
    FundManagement,
    encode_approve_vault,
    encode_batch_swap,
    encode_exit_pool,
    encode_join_pool,
    encode_multicall,
    encode_peek_chained_reference_value,
    encode_set_relayer_approval,
)

__all__ = [
    # Chained references
    "CHAINED_REFERENCE_TEMP_PREFIX",
    "CHAINED_REFERENCE_READONLY_PREFIX",
    "Amount",
    "ChainedReference",
    "to_chained_reference",
    "from_chained_reference",
    "is_chained_reference",
    "resolve_amount",
    # Call encoding
    "FundManagement",
    "encode_batch_swap",
    "encode_join_pool",
    "encode_exit_pool",
    "encode_set_relayer_approval",
    "encode_approve_vault",
    "encode_peek_chained_reference_value",
    "encode_multicall",
]
