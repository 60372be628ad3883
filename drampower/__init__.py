"""Bus, clock and cycle statistics and a command dispatch core for DRAM power estimation."""

__version__ = "0.1.0"

__all__ = [
    "binops",
    "bitset",
    "burst_storage",
    "bus",
    "clock",
    "command_counter",
    "dram_base",
    "interval",
]