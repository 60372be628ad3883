"""Per-command-type counters."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

E = TypeVar("E", bound=Enum)


class CommandCounter(Generic[E]):
    """Counts occurrences of each member of a command enumeration."""

    def __init__(self, command_enum: type[E]) -> None:
        self._enum = command_enum
        self._counter: dict[E, int] = {member: 0 for member in command_enum}

    def _check(self, cmd: E) -> None:
        if cmd not in self._counter:
            raise ValueError(f"{cmd!r} is not a member of {self._enum.__name__}")

    def inc(self, cmd: E) -> None:
        self._check(cmd)
        self._counter[cmd] += 1

    def get(self, cmd: E) -> int:
        self._check(cmd)
        return self._counter[cmd]