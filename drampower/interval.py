"""Counting of cycles spent in open and closed intervals."""

from __future__ import annotations

from typing import Optional

Timestamp = int


class IntervalCounter:
    """Accumulates the length of intervals, one of which may be open."""

    def __init__(self, start: Optional[Timestamp] = None) -> None:
        self._count: int = 0
        self._start: Optional[Timestamp] = start
        self._end: Optional[Timestamp] = None

    @property
    def start(self) -> Timestamp:
        return self._start if self._start is not None else 0

    @property
    def end(self) -> Timestamp:
        return self._end if self._end is not None else 0

    @property
    def count(self) -> int:
        """Cycles of all closed intervals plus added values."""
        return self._count

    def is_open(self) -> bool:
        return self._start is not None and self._end is None

    def is_closed(self) -> bool:
        return self._start is not None and self._end is not None

    def count_at(self, timestamp: Timestamp) -> int:
        """Count including the open interval up to ``timestamp``."""
        if self.is_open() and timestamp > self._start:
            return self._count + timestamp - self._start
        return self._count

    def add(self, value: int) -> None:
        self._count += value

    def close_interval(self, timestamp: Timestamp) -> int:
        """Close the open interval and return its length, or 0 if none is open."""
        if not self.is_open():
            return 0
        self._end = timestamp
        diff = timestamp - self._start
        self._count += diff
        return diff

    def reset_interval(self) -> None:
        self._start = None
        self._end = None

    def start_interval(self, start: Timestamp) -> None:
        self._start = start
        self._end = None

    def __repr__(self) -> str:
        return (
            f"IntervalCounter(count={self._count}, start={self._start}, end={self._end})"
        )