# drampower

Building blocks for estimating the power of DRAM devices from a trace of
memory commands: bit-level bus statistics, clock toggle counts, cycle
interval counters and a command dispatch core with a queue of deferred
("implicit") commands.

## Modules

- `drampower.bitset.DynamicBitset` – a variable-length bit vector, index 0
  being the least significant bit. `DynamicBitset(num_bits, value)` takes its
  bits from the low 64 bits of `value`; `DynamicBitset.from_bits(iterable)`
  builds one from booleans. It supports `append`, `clear`, `flip`, `count`
  (number of set bits), `copy`, indexing, `len`, iteration, `int()`,
  comparison with another bitset or an integer, and the operators `~`, `^`,
  `&` and `|`. Binary operators on bitsets of different sizes raise
  `ValueError`; indexes out of range raise `IndexError`.
- `drampower.binops` – `popcount`, `zero_to_ones`, `one_to_zeroes` and
  `bit_changes`, working on either `DynamicBitset` values or integers (taken
  as 64-bit words), and `to_string`, which renders a bitset most significant
  bit first in brackets, e.g. `"[0101]"`.
- `drampower.burst_storage.BurstStorage` – splits a payload into bursts of a
  fixed width. `insert_data(data, n_bits)` takes bits from a byte sequence,
  least significant bit of each byte first; `get_burst(n)` returns a copy of
  the burst `n` places before the newest one.
- `drampower.interval.IntervalCounter` – accumulates the length of time
  intervals. `start_interval`, `close_interval` (returns the closed length,
  or 0 if none was open), `reset_interval`, `add`, `count`, and
  `count_at(t)`, which includes an interval still open at `t`.
- `drampower.command_counter.CommandCounter` – occurrence counters for each
  member of an `Enum`, with `inc` and `get`; a value that is not a member
  raises `ValueError`.
- `drampower.bus` – `BusStats` (ones, zeroes, bit changes and both kinds of
  transition, added with `+`), `InterfaceStats` (stats for a command, read
  and write bus) and `Bus`. `Bus.load(timestamp, data, n_bits)` drives data
  onto the bus, one burst per cycle from `timestamp`, idle (all zeroes)
  afterwards; `Bus.load_int(timestamp, word, length)` loads `length` bursts
  from a 64-bit integer; `Bus.get_stats(t)` returns the statistics up to
  cycle `t`.
- `drampower.clock.Clock` – toggle statistics of a clock with a given data
  rate (default 2). It can be created stopped, and `stop`/`start`ed;
  `get_stats_at(t)` includes the running period. Stopping a stopped clock or
  starting a running one raises `RuntimeError`.
- `drampower.dram_base.DramBase` – an abstract base that routes commands to
  handlers by type and keeps a time-ordered queue of implicit commands.
  `do_command` first runs every queued implicit command due at or before the
  command's timestamp, then counts and dispatches the command.
  `handle_interface_command` passes every command except the
  end-of-simulation one to the subclass's `handle_interface`.

## Examples

```python
from drampower.bus import Bus

bus = Bus(8)
bus.load(0, bytes([0b1010_1010]), 8)
stats = bus.get_stats(2)
print(stats.ones, stats.zeroes, stats.bit_changes)
```

```python
from dataclasses import dataclass
from enum import Enum, auto

from drampower.dram_base import DramBase


class Cmd(Enum):
    ACT = auto()
    PRE = auto()
    END = auto()


@dataclass
class Command:
    timestamp: int
    type: Cmd


class Device(DramBase):
    def __init__(self):
        super().__init__(Cmd, Cmd.END)
        self.log = []
        self.route_command(Cmd.PRE, self._pre)

    def _pre(self, command):
        self.log.append(command.timestamp)
        done = command.timestamp + 10
        self.add_implicit_command(done, lambda: self.log.append(done))

    def handle_interface(self, command):
        pass


device = Device()
device.do_command(Command(10, Cmd.PRE))
device.do_command(Command(50, Cmd.ACT))
print(device.log)                          # [10, 20]
print(device.get_command_count(Cmd.PRE))   # 1
```

## What this package does not do

It contains no models of particular memory standards, no energy or power
calculation, no reading of memory specification files and no command-line
tool. `DramBase` is the base on which such models are built; the bus,
clock and counter classes supply the statistics they would use.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```