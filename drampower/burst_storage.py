"""Storage that splits a stream of bits into fixed-width bursts."""

from __future__ import annotations

from collections.abc import Sequence

from .bitset import DynamicBitset


class BurstStorage:
    """Collects bits into bursts of ``width`` bits each."""

    def __init__(self, width: int) -> None:
        self.width = width
        self._count = 0
        self._bursts: list[DynamicBitset] = []

    def insert_bit(self, bit: bool) -> None:
        if not self._bursts or len(self._bursts[-1]) >= self.width:
            self._bursts.append(DynamicBitset())
        current = self._bursts[-1]
        if len(current) < self.width:
            current.append(bit)
        self._count += 1

    def insert_byte(self, byte: int, n_bits: int) -> None:
        """Insert the lowest ``n_bits`` (at most 8) of ``byte``, LSB first."""
        for i in range(min(8, n_bits)):
            self.insert_bit(bool((byte >> i) & 1))

    def insert_data(self, data: Sequence[int], n_bits: int) -> None:
        """Insert ``n_bits`` bits taken from ``data`` byte by byte.

        Nothing further is inserted once as many bits as ``n_bits`` have
        been stored since the last clear.
        """
        bits_left = n_bits
        for i in range(0, n_bits, 8):
            if self._count >= n_bits:
                break
            self.insert_byte(data[i // 8], min(8, bits_left))
            bits_left -= 8

    def __len__(self) -> int:
        return len(self._bursts)

    def get_burst(self, n: int) -> DynamicBitset:
        """Return a copy of the burst ``n`` places before the newest one."""
        if not 0 <= n < len(self._bursts):
            raise IndexError(f"burst {n} out of range for {len(self._bursts)} bursts")
        return self._bursts[len(self._bursts) - 1 - n].copy()

    def clear(self) -> None:
        self._count = 0
        self._bursts.clear()