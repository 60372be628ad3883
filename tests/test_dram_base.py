from dataclasses import dataclass, field
from enum import Enum, auto

import pytest

from drampower.dram_base import DramBase


class CmdType(Enum):
    NOP = auto()
    ACT = auto()
    PRE = auto()
    PREA = auto()
    END_OF_SIMULATION = auto()


class OtherEnum(Enum):
    X = auto()


@dataclass
class Command:
    timestamp: int
    type: CmdType
    target: tuple = field(default=(0, 0, 0))


class _TestDdr(DramBase):
    def __init__(self):
        DramBase.__init__(self, CmdType, CmdType.END_OF_SIMULATION)
        self.execution_order = []
        self.interface_commands = []
        DramBase.route_command(self, CmdType.ACT, self._on_act)
        DramBase.route_command(self, CmdType.PRE, self._on_pre)
        DramBase.route_command(self, CmdType.PREA, self._on_prea)

    def handle_interface(self, command):
        self.interface_commands.append(command)

    def _on_act(self, command):
        self.execution_order.append(command.timestamp)

    def _schedule(self, command, delay):
        self.execution_order.append(command.timestamp)
        next_timestamp = command.timestamp + delay
        DramBase.add_implicit_command(
            self, next_timestamp, lambda: self.execution_order.append(next_timestamp)
        )

    def _on_pre(self, command):
        self._schedule(command, 10)

    def _on_prea(self, command):
        self._schedule(command, 1)


@pytest.fixture
def ddr():
    return _TestDdr()


def test_do_command(ddr):
    assert DramBase.get_command_count(ddr, CmdType.ACT) == 0
    DramBase.do_command(ddr, Command(10, CmdType.ACT, (1, 0, 0)))
    assert DramBase.get_command_count(ddr, CmdType.ACT) == 1
    assert ddr.execution_order == [10]


def test_implicit_command(ddr):
    DramBase.do_command(ddr, Command(10, CmdType.PRE, (1, 0, 0)))
    DramBase.do_command(ddr, Command(15, CmdType.PREA, (1, 0, 0)))
    DramBase.do_command(ddr, Command(50, CmdType.ACT, (1, 0, 0)))
    assert ddr.execution_order == [10, 15, 16, 20, 50]


def test_implicit_commands_wait_until_due(ddr):
    DramBase.do_command(ddr, Command(10, CmdType.PRE))
    assert DramBase.implicit_command_count(ddr) == 1
    DramBase.do_command(ddr, Command(19, CmdType.ACT))
    assert DramBase.implicit_command_count(ddr) == 1
    DramBase.process_implicit_command_queue(ddr, 20)
    assert DramBase.implicit_command_count(ddr) == 0
    assert ddr.execution_order == [10, 19, 20]
    assert ddr.last_command_time == 20


def test_equal_timestamps_keep_insertion_order(ddr):
    order = []
    DramBase.add_implicit_command(ddr, 5, lambda: order.append("first"))
    DramBase.add_implicit_command(ddr, 3, lambda: order.append("early"))
    DramBase.add_implicit_command(ddr, 5, lambda: order.append("second"))
    DramBase.process_implicit_command_queue(ddr, 5)
    assert order == ["early", "first", "second"]


def test_unrouted_command_is_counted(ddr):
    DramBase.do_command(ddr, Command(7, CmdType.NOP))
    assert DramBase.get_command_count(ddr, CmdType.NOP) == 1
    assert ddr.execution_order == []
    assert ddr.last_command_time == 7


def test_handle_interface_skips_end_of_simulation(ddr):
    act = Command(1, CmdType.ACT)
    DramBase.handle_interface_command(ddr, act)
    DramBase.handle_interface_command(ddr, Command(2, CmdType.END_OF_SIMULATION))
    assert ddr.interface_commands == [act]


def test_foreign_command_type_raises(ddr):
    with pytest.raises(ValueError):
        DramBase.get_command_count(ddr, OtherEnum.X)
    with pytest.raises(ValueError):
        DramBase.route_command(ddr, OtherEnum.X, lambda command: None)
    assert DramBase.get_command_count(ddr, CmdType.ACT) == 0


def test_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DramBase(CmdType, CmdType.END_OF_SIMULATION)