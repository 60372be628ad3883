"""A growable sequence of bits with bitwise operators."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_WORD_MASK = (1 << 64) - 1


class DynamicBitset:
    """Bits indexed from the least significant position (index 0)."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num_bits: int = 0, value: int = 0) -> None:
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        value &= _WORD_MASK
        self._bits: list[bool] = [bool((value >> i) & 1) for i in range(num_bits)]

    @classmethod
    def from_bits(cls, bits: Iterable[bool]) -> DynamicBitset:
        """Build a bitset from an iterable of bits, index 0 first."""
        bitset = cls()
        bitset._bits = [bool(bit) for bit in bits]
        return bitset

    def copy(self) -> DynamicBitset:
        return DynamicBitset.from_bits(self._bits)

    def append(self, bit: bool) -> None:
        self._bits.append(bool(bit))

    def clear(self) -> None:
        self._bits.clear()

    def flip(self, n: int) -> None:
        self[n] = not self[n]

    def count(self) -> int:
        """Number of set bits."""
        return sum(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def _check_index(self, n: int) -> None:
        if not 0 <= n < len(self._bits):
            raise IndexError(f"bit index {n} out of range for size {len(self._bits)}")

    def __getitem__(self, n: int) -> bool:
        self._check_index(n)
        return self._bits[n]

    def __setitem__(self, n: int, value: bool) -> None:
        self._check_index(n)
        self._bits[n] = bool(value)

    def __int__(self) -> int:
        return sum(1 << i for i, bit in enumerate(self._bits) if bit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicBitset):
            return self._bits == other._bits
        if isinstance(other, int):
            return self == DynamicBitset(len(self), other)
        return NotImplemented

    def __invert__(self) -> DynamicBitset:
        return DynamicBitset.from_bits(not bit for bit in self._bits)

    def _combine(self, other: DynamicBitset, op) -> DynamicBitset:
        if not isinstance(other, DynamicBitset):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError(
                f"bitset sizes differ: {len(self)} and {len(other)}"
            )
        return DynamicBitset.from_bits(op(a, b) for a, b in zip(self._bits, other._bits))

    def __xor__(self, other: DynamicBitset) -> DynamicBitset:
        return self._combine(other, lambda a, b: a != b)

    def __and__(self, other: DynamicBitset) -> DynamicBitset:
        return self._combine(other, lambda a, b: a and b)

    def __or__(self, other: DynamicBitset) -> DynamicBitset:
        return self._combine(other, lambda a, b: a or b)

    def __repr__(self) -> str:
        text = "".join("1" if bit else "0" for bit in reversed(self._bits))
        return f"DynamicBitset('{text}')"