"""Relayer chained references.

A chained reference is a uint256 that stands in for an amount only known
once an earlier call in the same multicall has executed. The relayer stores
call outputs under a reference and substitutes the stored value whenever it
finds a reference in an amount field.

Layout: the top 16 bits hold the type prefix and the low 240 bits hold the
caller-chosen key.
- 0xba10: temporary, the slot is cleared after the first read
- 0xba11: read-only, the slot can be read any number of times
"""

from __future__ import annotations

from dataclasses import dataclass

from route_compiler.errors import InvalidAmount
from route_compiler.models.types import UINT256_MAX

CHAINED_REFERENCE_TEMP_PREFIX = 0xBA10
CHAINED_REFERENCE_READONLY_PREFIX = 0xBA11

_PREFIX_SHIFT = 240
MAX_CHAINED_REFERENCE_KEY = 2**_PREFIX_SHIFT - 1


def _prefix(temporary: bool) -> int:
    return CHAINED_REFERENCE_TEMP_PREFIX if temporary else CHAINED_REFERENCE_READONLY_PREFIX


def to_chained_reference(key: int, temporary: bool = True) -> int:
    """Build the chained reference for a key.

    Equal (key, temporary) pairs always give the same value, which is what
    lets a producing call and a consuming call agree on a storage slot.

    Raises:
        ValueError: If key does not fit in the low 240 bits
    """
    if key < 0 or key > MAX_CHAINED_REFERENCE_KEY:
        raise ValueError(f"Chained reference key out of range: {key}")
    return (_prefix(temporary) << _PREFIX_SHIFT) | key


def from_chained_reference(ref: int, temporary: bool = True) -> int:
    """Recover the key of a chained reference of the given flavor.

    Raises:
        ValueError: If ref does not carry the expected prefix
    """
    if ref >> _PREFIX_SHIFT != _prefix(temporary):
        raise ValueError(f"Not a {'temporary' if temporary else 'read-only'} reference: {ref:#x}")
    return ref & MAX_CHAINED_REFERENCE_KEY


def is_chained_reference(amount: int) -> bool:
    """Return True if `amount` is not actually an amount, but a chained reference."""
    if amount < 0 or amount > UINT256_MAX:
        return False
    return amount >> _PREFIX_SHIFT in (
        CHAINED_REFERENCE_TEMP_PREFIX,
        CHAINED_REFERENCE_READONLY_PREFIX,
    )


@dataclass(frozen=True)
class ChainedReference:
    """Placeholder amount resolved by the relayer at execution time.

    Attributes:
        key: Caller-chosen key (allocated per compile, starting at 0)
        temporary: True for a single-read reference, False for read-only
    """

    key: int
    temporary: bool = True

    @property
    def value(self) -> int:
        """The uint256 written into call data."""
        return to_chained_reference(self.key, self.temporary)

    def read_only(self) -> ChainedReference:
        """The persistent flavor of the same key."""
        return ChainedReference(self.key, temporary=False)

    @classmethod
    def from_value(cls, ref: int) -> ChainedReference:
        """Parse a raw reference of either flavor."""
        if not is_chained_reference(ref):
            raise ValueError(f"Not a chained reference: {ref:#x}")
        temporary = ref >> _PREFIX_SHIFT == CHAINED_REFERENCE_TEMP_PREFIX
        return cls(from_chained_reference(ref, temporary), temporary)


# An amount field is either a literal integer or a placeholder
Amount = int | ChainedReference


def resolve_amount(amount: Amount) -> int:
    """Turn an amount field into the uint256 placed in call data.

    Literal amounts are checked here, once, at the encoding boundary: a
    literal that lands in the reference tag range would be read by the
    relayer as a reference.

    Raises:
        InvalidAmount: If a literal is negative, exceeds uint256, or collides
            with the chained reference tag range
    """
    if isinstance(amount, ChainedReference):
        return amount.value
    if amount < 0 or amount > UINT256_MAX:
        raise InvalidAmount(f"Amount outside uint256: {amount}")
    if is_chained_reference(amount):
        raise InvalidAmount(f"Literal amount collides with chained reference range: {amount:#x}")
    return amount


__all__ = [
    "CHAINED_REFERENCE_TEMP_PREFIX",
    "CHAINED_REFERENCE_READONLY_PREFIX",
    "MAX_CHAINED_REFERENCE_KEY",
    "Amount",
    "ChainedReference",
    "from_chained_reference",
    "is_chained_reference",
    "resolve_amount",
    "to_chained_reference",
]
