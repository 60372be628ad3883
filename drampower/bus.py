"""Bus model that tracks bit statistics of data driven onto it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from . import binops
from .bitset import DynamicBitset
from .burst_storage import BurstStorage

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


@dataclass
class BusStats:
    """Counts of bit levels and transitions seen on a bus."""

    ones: int = 0
    zeroes: int = 0
    bit_changes: int = 0
    ones_to_zeroes: int = 0
    zeroes_to_ones: int = 0

    def __add__(self, other: BusStats) -> BusStats:
        if not isinstance(other, BusStats):
            return NotImplemented
        return BusStats(
            ones=self.ones + other.ones,
            zeroes=self.zeroes + other.zeroes,
            bit_changes=self.bit_changes + other.bit_changes,
            ones_to_zeroes=self.ones_to_zeroes + other.ones_to_zeroes,
            zeroes_to_ones=self.zeroes_to_ones + other.zeroes_to_ones,
        )


@dataclass
class InterfaceStats:
    """Statistics of the command, read and write buses of an interface."""

    command_bus: BusStats = field(default_factory=BusStats)
    read_bus: BusStats = field(default_factory=BusStats)
    write_bus: BusStats = field(default_factory=BusStats)


class Bus:
    """A bus of fixed width on which bursts of data are loaded over time.

    Each cycle after a load carries one burst; once the loaded bursts are
    used up the bus is idle (all zeroes).
    """

    def __init__(self, width: int) -> None:
        self.width = width
        self.stats = BusStats()
        self._storage = BurstStorage(width)
        self._last_load = 0

    def _idle(self) -> DynamicBitset:
        return DynamicBitset(self.width, 0)

    def load(self, timestamp: int, data: Sequence[int], n_bits: int) -> None:
        """Load ``n_bits`` bits of ``data`` onto the bus at ``timestamp``."""
        # Account for every transition between the previous load and now.
        if timestamp != 0:
            for n in range(self._last_load, timestamp - 1):
                self.stats = self.stats + self.diff(self.at(n), self.at(n + 1))

        old_high = self.at(timestamp - 1) if timestamp > 0 else self._idle()

        self._last_load = timestamp
        self._storage.clear()
        self._storage.insert_data(data, n_bits)

        self.stats = self.stats + self.diff(old_high, self._storage.get_burst(0))

    def load_int(self, timestamp: int, data: int, length: int) -> None:
        """Load ``length`` bursts taken from the 64-bit word ``data``."""
        n_bits = self.width * length
        if n_bits > _WORD_BITS:
            raise ValueError(
                f"{length} bursts of width {self.width} exceed a {_WORD_BITS}-bit word"
            )
        raw = (data & _WORD_MASK).to_bytes(_WORD_BITS // 8, "little")
        self.load(timestamp, raw, n_bits)

    def at(self, n: int) -> DynamicBitset:
        """The burst on the bus in cycle ``n``."""
        offset = n - self._last_load
        if offset < 0 or offset >= len(self._storage):
            return self._idle()
        return self._storage.get_burst(offset)

    def get_stats(self, t: int) -> BusStats:
        """Statistics including all transitions up to cycle ``t``."""
        if t < self._last_load:
            raise ValueError(
                f"timestamp {t} lies before the last load at {self._last_load}"
            )
        stats = self.stats
        for n in range(self._last_load, t):
            stats = stats + self.diff(self.at(n), self.at(n + 1))
        return stats

    def diff(self, high: DynamicBitset, low: DynamicBitset) -> BusStats:
        """Statistics of the step from burst ``high`` to burst ``low``."""
        ones = binops.popcount(low)
        return BusStats(
            ones=ones,
            zeroes=self.width - ones,
            bit_changes=binops.bit_changes(high, low),
            ones_to_zeroes=binops.one_to_zeroes(high, low),
            zeroes_to_ones=binops.zero_to_ones(high, low),
        )