"""Clock signal model counting levels and edges over time."""

from __future__ import annotations

from typing import Optional

from .bus import BusStats

ClockStats = BusStats


class Clock:
    """A toggling clock that can be stopped and restarted."""

    def __init__(self, data_rate: int = 2, stopped: bool = False) -> None:
        self.data_rate = data_rate
        self._stats = ClockStats()
        self._last_start: Optional[int] = None if stopped else 0

    @property
    def running(self) -> bool:
        return self._last_start is not None

    def _count(self, duration: int) -> ClockStats:
        half = duration * self.data_rate // 2
        return ClockStats(
            ones=half,
            zeroes=half,
            zeroes_to_ones=half,
            ones_to_zeroes=half,
            bit_changes=2 * half,
        )

    def stop(self, t: int) -> None:
        """Stop the clock at ``t``, keeping what it has counted so far."""
        if self._last_start is None:
            raise RuntimeError("clock is already stopped")
        if not self._last_start < t:
            raise ValueError(
                f"stop time {t} must lie after start time {self._last_start}"
            )
        self._stats = self._stats + self._count(t - self._last_start)
        self._last_start = None

    def start(self, t: int) -> None:
        """Start the stopped clock at ``t``."""
        if self._last_start is not None:
            raise RuntimeError("clock is already running")
        self._last_start = t

    def get_stats_at(self, t: int) -> ClockStats:
        """Statistics up to ``t``, including the running period if any."""
        stats = self._stats
        if self._last_start is not None:
            stats = stats + self._count(t - self._last_start)
        return stats