"""Bit counting and transition counting on integers and bitsets."""

from __future__ import annotations

from typing import Union

from .bitset import DynamicBitset

_WORD_MASK = (1 << 64) - 1

Bits = Union[int, DynamicBitset]


def popcount(value: Bits) -> int:
    """Number of set bits; integers are taken as 64-bit words."""
    if isinstance(value, DynamicBitset):
        return value.count()
    return bin(value & _WORD_MASK).count("1")


def _invert(value: Bits) -> Bits:
    if isinstance(value, DynamicBitset):
        return ~value
    return ~value & _WORD_MASK


def zero_to_ones(p: Bits, q: Bits) -> int:
    """Bits that are 0 in ``p`` and 1 in ``q``."""
    return popcount(_invert(p) & q)


def one_to_zeroes(p: Bits, q: Bits) -> int:
    """Bits that are 1 in ``p`` and 0 in ``q``."""
    return popcount(p & _invert(q))


def bit_changes(p: Bits, q: Bits) -> int:
    """Bits that differ between ``p`` and ``q``."""
    return popcount(p ^ q)


def to_string(bits: DynamicBitset) -> str:
    """Render the bits most significant first, in brackets."""
    return "[" + "".join("1" if bit else "0" for bit in reversed(list(bits))) + "]"