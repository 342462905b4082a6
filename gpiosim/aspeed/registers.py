"""ASPEED GPIO register set storage.

Each set of up to 32 pins is controlled by a bank of 14 registers. Every
register operates on a per-pin level (bit n is pin n of the set) except the
command source registers, where only bits 0, 8, 16 and 24 are meaningful,
one per 8-pin group:

  |D7...D0|C7...C0|B7...B0|A7...A0| <- GPIOs of set ABCD
  |31...24|23...16|15....8|7.....0| <- bit position
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class RegisterKind(Enum):
    """Register kinds of a set, valued by their storage attribute."""

    DATA_VALUE = "data_value"
    DIRECTION = "direction"
    INT_ENABLE = "int_enable"
    INT_SENS_0 = "int_sens_0"
    INT_SENS_1 = "int_sens_1"
    INT_SENS_2 = "int_sens_2"
    INT_STATUS = "int_status"
    RESET_TOLERANT = "reset_tol"
    DEBOUNCE_1 = "debounce_1"
    DEBOUNCE_2 = "debounce_2"
    CMD_SOURCE_0 = "cmd_source_0"
    CMD_SOURCE_1 = "cmd_source_1"
    DATA_READ = "data_read"
    INPUT_MASK = "input_mask"
    # Shared between sets, decoded but not backed by storage
    DEBOUNCE_TIME = "debounce_time"


@dataclass
class RegisterSet:
    """Registers of one GPIO set. Everything resets to zero."""

    data_value: int = 0  # committed pin values
    data_read: int = 0  # last value written or driven, before commitment
    direction: int = 0  # 1 = output
    int_enable: int = 0
    int_sens_0: int = 0
    int_sens_1: int = 0
    int_sens_2: int = 0
    int_status: int = 0
    reset_tol: int = 0
    cmd_source_0: int = 0
    cmd_source_1: int = 0
    debounce_1: int = 0
    debounce_2: int = 0
    input_mask: int = 0  # 1 = pin excluded from value update and interrupts

    def clear(self) -> None:
        """Zero every register (reset tolerance is not honoured)."""
        for f in fields(self):
            setattr(self, f.name, 0)

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
