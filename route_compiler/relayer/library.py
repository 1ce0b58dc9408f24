"""BatchRelayerLibrary calldata encoding.

Each encoder returns the raw call data (selector + ABI-encoded arguments)
for one relayer function. Calls are later wrapped in `multicall`, which the
relayer executes atomically: a revert in any inner call reverts them all.

Argument order and types are fixed by the relayer ABI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import function_signature_to_4byte_selector

from route_compiler.models.types import normalize_address

# (bytes32 poolId, uint256 assetInIndex, uint256 assetOutIndex, uint256 amount, bytes userData)
BATCH_SWAP_STEP_TYPE = "(bytes32,uint256,uint256,uint256,bytes)"
# (address sender, bool fromInternalBalance, address recipient, bool toInternalBalance)
FUND_MANAGEMENT_TYPE = "(address,bool,address,bool)"
# (uint256 index, uint256 key)
OUTPUT_REFERENCE_TYPE = "(uint256,uint256)"
# (address[] assets, uint256[] maxAmountsIn, bytes userData, bool fromInternalBalance)
JOIN_POOL_REQUEST_TYPE = "(address[],uint256[],bytes,bool)"
# (address[] assets, uint256[] minAmountsOut, bytes userData, bool toInternalBalance)
EXIT_POOL_REQUEST_TYPE = "(address[],uint256[],bytes,bool)"

BATCH_SWAP_TYPES = [
    "uint8",
    f"{BATCH_SWAP_STEP_TYPE}[]",
    "address[]",
    FUND_MANAGEMENT_TYPE,
    "int256[]",
    "uint256",
    "uint256",
    f"{OUTPUT_REFERENCE_TYPE}[]",
]
JOIN_POOL_TYPES = [
    "bytes32",
    "uint8",
    "address",
    "address",
    JOIN_POOL_REQUEST_TYPE,
    "uint256",
    "uint256",
]
EXIT_POOL_TYPES = [
    "bytes32",
    "uint8",
    "address",
    "address",
    EXIT_POOL_REQUEST_TYPE,
    f"{OUTPUT_REFERENCE_TYPE}[]",
]
SET_RELAYER_APPROVAL_TYPES = ["address", "bool", "bytes"]
APPROVE_VAULT_TYPES = ["address", "uint256"]
PEEK_CHAINED_REFERENCE_VALUE_TYPES = ["uint256"]
MULTICALL_TYPES = ["bytes[]"]


def _signature(name: str, types: Sequence[str]) -> str:
    return f"{name}({','.join(types)})"


BATCH_SWAP_SELECTOR = function_signature_to_4byte_selector(
    _signature("batchSwap", BATCH_SWAP_TYPES)
)
JOIN_POOL_SELECTOR = function_signature_to_4byte_selector(_signature("joinPool", JOIN_POOL_TYPES))
EXIT_POOL_SELECTOR = function_signature_to_4byte_selector(_signature("exitPool", EXIT_POOL_TYPES))
SET_RELAYER_APPROVAL_SELECTOR = function_signature_to_4byte_selector(
    _signature("setRelayerApproval", SET_RELAYER_APPROVAL_TYPES)
)
APPROVE_VAULT_SELECTOR = function_signature_to_4byte_selector(
    _signature("approveVault", APPROVE_VAULT_TYPES)
)
PEEK_CHAINED_REFERENCE_VALUE_SELECTOR = function_signature_to_4byte_selector(
    _signature("peekChainedReferenceValue", PEEK_CHAINED_REFERENCE_VALUE_TYPES)
)
MULTICALL_SELECTOR = function_signature_to_4byte_selector(_signature("multicall", MULTICALL_TYPES))


@dataclass(frozen=True)
class FundManagement:
    """Where a Vault call takes funds from and sends them to.

    Attributes:
        sender: Account whose balance is debited (user or relayer)
        from_internal_balance: Debit the sender's Vault internal balance
            instead of its token balance
        recipient: Account credited with the output (user or relayer)
        to_internal_balance: Credit the recipient's Vault internal balance
            instead of transferring tokens out
    """

    sender: str
    from_internal_balance: bool
    recipient: str
    to_internal_balance: bool

    def as_abi_tuple(self) -> tuple[bytes, bool, bytes, bool]:
        return (
            address_bytes(self.sender),
            self.from_internal_balance,
            address_bytes(self.recipient),
            self.to_internal_balance,
        )


def address_bytes(address: str) -> bytes:
    """Convert a 0x-prefixed address to its 20 raw bytes."""
    return bytes.fromhex(normalize_address(address, validate=True)[2:])


def hex_bytes(value: str) -> bytes:
    """Convert 0x-prefixed hex (pool id, user data, signatures) to raw bytes."""
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)


def encode_batch_swap(
    kind: int,
    swaps: Sequence[tuple[str, int, int, int, bytes]],
    assets: Sequence[str],
    funds: FundManagement,
    limits: Sequence[int],
    deadline: int,
    value: int,
    output_references: Sequence[tuple[int, int]],
) -> bytes:
    """Encode BatchRelayerLibrary.batchSwap.

    Args:
        kind: Vault swap kind (0 = GIVEN_IN, 1 = GIVEN_OUT)
        swaps: (pool_id, asset_in_index, asset_out_index, amount, user_data) per step;
            amounts may be chained references
        assets: Token addresses the step indices refer to
        funds: Sender/recipient and internal balance flags
        limits: Per-asset limits; positive for tokens in, negative for tokens out
        deadline: Unix timestamp after which the swap reverts
        value: ETH sent with the call
        output_references: (asset index, reference) pairs to store asset deltas under

    Returns:
        Call data bytes
    """
    encoded = encode(
        BATCH_SWAP_TYPES,
        [
            kind,
            [
                (hex_bytes(pool_id), asset_in, asset_out, amount, user_data)
                for pool_id, asset_in, asset_out, amount, user_data in swaps
            ],
            [address_bytes(a) for a in assets],
            funds.as_abi_tuple(),
            list(limits),
            deadline,
            value,
            list(output_references),
        ],
    )
    return BATCH_SWAP_SELECTOR + encoded


def encode_join_pool(
    pool_id: str,
    kind: int,
    sender: str,
    recipient: str,
    assets: Sequence[str],
    max_amounts_in: Sequence[int],
    user_data: bytes,
    from_internal_balance: bool,
    value: int,
    output_reference: int,
) -> bytes:
    """Encode BatchRelayerLibrary.joinPool.

    `output_reference` is the chained reference the minted BPT amount is
    stored under, or 0 for none.
    """
    encoded = encode(
        JOIN_POOL_TYPES,
        [
            hex_bytes(pool_id),
            kind,
            address_bytes(sender),
            address_bytes(recipient),
            (
                [address_bytes(a) for a in assets],
                list(max_amounts_in),
                user_data,
                from_internal_balance,
            ),
            value,
            output_reference,
        ],
    )
    return JOIN_POOL_SELECTOR + encoded


def encode_exit_pool(
    pool_id: str,
    kind: int,
    sender: str,
    recipient: str,
    assets: Sequence[str],
    min_amounts_out: Sequence[int],
    user_data: bytes,
    to_internal_balance: bool,
    output_references: Sequence[tuple[int, int]],
) -> bytes:
    """Encode BatchRelayerLibrary.exitPool.

    Output reference indices refer to positions in `assets`.
    """
    encoded = encode(
        EXIT_POOL_TYPES,
        [
            hex_bytes(pool_id),
            kind,
            address_bytes(sender),
            address_bytes(recipient),
            (
                [address_bytes(a) for a in assets],
                list(min_amounts_out),
                user_data,
                to_internal_balance,
            ),
            list(output_references),
        ],
    )
    return EXIT_POOL_SELECTOR + encoded


def encode_set_relayer_approval(relayer: str, approved: bool, authorisation: str) -> bytes:
    """Encode BatchRelayerLibrary.setRelayerApproval with a pre-signed authorisation."""
    encoded = encode(
        SET_RELAYER_APPROVAL_TYPES,
        [address_bytes(relayer), approved, hex_bytes(authorisation)],
    )
    return SET_RELAYER_APPROVAL_SELECTOR + encoded


def encode_approve_vault(token: str, amount: int) -> bytes:
    """Encode BatchRelayerLibrary.approveVault (amount may be a chained reference)."""
    encoded = encode(APPROVE_VAULT_TYPES, [address_bytes(token), amount])
    return APPROVE_VAULT_SELECTOR + encoded


def encode_peek_chained_reference_value(reference: int) -> bytes:
    """Encode BatchRelayerLibrary.peekChainedReferenceValue."""
    return PEEK_CHAINED_REFERENCE_VALUE_SELECTOR + encode(
        PEEK_CHAINED_REFERENCE_VALUE_TYPES, [reference]
    )


def encode_multicall(calls: Sequence[bytes]) -> bytes:
    """Encode BalancerRelayer.multicall over already encoded inner calls."""
    return MULTICALL_SELECTOR + encode(MULTICALL_TYPES, [list(calls)])


__all__ = [
    "APPROVE_VAULT_SELECTOR",
    "BATCH_SWAP_SELECTOR",
    "EXIT_POOL_SELECTOR",
    "JOIN_POOL_SELECTOR",
    "MULTICALL_SELECTOR",
    "PEEK_CHAINED_REFERENCE_VALUE_SELECTOR",
    "SET_RELAYER_APPROVAL_SELECTOR",
    "FundManagement",
    "address_bytes",
    "encode_approve_vault",
    "encode_batch_swap",
    "encode_exit_pool",
    "encode_join_pool",
    "encode_multicall",
    "encode_peek_chained_reference_value",
    "encode_set_relayer_approval",
    "hex_bytes",
]
