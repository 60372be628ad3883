"""Command dispatch shared by all DRAM models."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any

CommandHandler = Callable[[Any], None]
ImplicitCommand = Callable[[], None]


def _ignore(command: Any) -> None:
    """Default handler for commands that have no route."""


class DramBase(ABC):
    """Routes commands to handlers and runs deferred implicit commands.

    Commands are objects with ``timestamp`` and ``type`` attributes, where
    ``type`` is a member of the command enumeration given on construction.
    """

    def __init__(self, command_enum: type[Enum], end_of_simulation: Enum) -> None:
        self._enum = command_enum
        self._end_of_simulation = end_of_simulation
        self.command_count: dict[Enum, int] = {member: 0 for member in command_enum}
        self._router: dict[Enum, CommandHandler] = {
            member: _ignore for member in command_enum
        }
        self._implicit_times: list[int] = []
        self._implicit_commands: list[ImplicitCommand] = []
        self.last_command_time = 0

    def _check(self, cmd: Enum) -> None:
        if cmd not in self._router:
            raise ValueError(f"{cmd!r} is not a member of {self._enum.__name__}")

    def route_command(self, cmd_type: Enum, handler: CommandHandler) -> None:
        """Send commands of ``cmd_type`` to ``handler``."""
        self._check(cmd_type)
        self._router[cmd_type] = handler

    def add_implicit_command(self, timestamp: int, func: ImplicitCommand) -> None:
        """Schedule ``func`` to run at ``timestamp``, after any already there."""
        index = bisect.bisect_right(self._implicit_times, timestamp)
        self._implicit_times.insert(index, timestamp)
        self._implicit_commands.insert(index, func)

    def implicit_command_count(self) -> int:
        return len(self._implicit_times)

    def process_implicit_command_queue(self, timestamp: int) -> None:
        """Run every implicit command scheduled at or before ``timestamp``."""
        while self._implicit_times and self._implicit_times[0] <= timestamp:
            when = self._implicit_times.pop(0)
            func = self._implicit_commands.pop(0)
            func()
            self.last_command_time = when

    def do_command(self, command: Any) -> None:
        """Run pending implicit commands, then dispatch ``command``."""
        self._check(command.type)
        self.process_implicit_command_queue(command.timestamp)
        self.command_count[command.type] += 1
        self._router[command.type](command)
        self.last_command_time = command.timestamp

    def handle_interface_command(self, command: Any) -> None:
        """Pass ``command`` to the interface model unless it ends the simulation."""
        self._check(command.type)
        if command.type != self._end_of_simulation:
            self.handle_interface(command)

    @abstractmethod
    def handle_interface(self, command: Any) -> None:
        """Update interface statistics for ``command``."""

    def get_command_count(self, cmd: Enum) -> int:
        self._check(cmd)
        return self.command_count[cmd]