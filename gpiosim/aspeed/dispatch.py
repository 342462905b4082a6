"""Register dispatch for the ASPEED GPIO window.

Each decoded offset is a DispatchEntry: which register set it belongs to,
which kind of register it is, and the behaviour implementing that kind. The
table is built once per variant from the declarative layouts in consts.py,
only for the sets the variant actually has.

Register behaviours:
- ArbitratedRegister: value registers writable only by the owning command
  source (data value, direction, interrupt enable/sensitivity, reset
  tolerance, debounce selection)
- DirectRegister: registers the accessing side writes without arbitration
  (interrupt status, input mask)
- SourceControlRegister: the command-source registers themselves
- ReadOnlyRegister / ReservedRegister: data read shadow and debounce timers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from gpiosim.aspeed.arbiter import arbitrate
from gpiosim.aspeed.consts import (
    ASPEED_CMD_SRC_MASK,
    PRIMARY_DEBOUNCE_TIME,
    PRIMARY_LAYOUT,
    SECONDARY_DEBOUNCE_TIME,
    SECONDARY_LAYOUT,
)
from gpiosim.aspeed.registers import RegisterKind, RegisterSet
from gpiosim.core.exceptions import ConfigurationError
from gpiosim.core.register import ReadOnlyRegister, RegisterBehavior, ReservedRegister
from gpiosim.utils.config_loader import ControllerVariant, GpioSetConfig


class ArbitratedRegister(RegisterBehavior):
    """Value register subject to command-source arbitration."""

    def __init__(
        self,
        field: str,
        target: Optional[str] = None,
        io_masked: bool = False,
        recompute: bool = True,
    ):
        """Initialize an arbitrated register.

        Args:
            field: Attribute returned by reads
            target: Attribute written (defaults to field)
            io_masked: Drop bits that are input-only before arbitration
            recompute: Whether a write can change committed pin state
        """
        super().__init__(field)
        self.target = target or field
        self.io_masked = io_masked
        self.recompute = recompute

    def write(self, regs: RegisterSet, props: GpioSetConfig, value: int) -> bool:
        if self.io_masked:
            value &= props.output | ~props.input
        old_value = getattr(regs, self.target)
        setattr(regs, self.target, arbitrate(regs, old_value, value))
        return self.recompute


class DirectRegister(RegisterBehavior):
    """Register written as-is by the accessing side."""

    def __init__(self, field: str, input_only: bool = False):
        super().__init__(field)
        self.input_only = input_only

    def write(self, regs: RegisterSet, props: GpioSetConfig, value: int) -> bool:
        if self.input_only:
            value &= props.input
        setattr(regs, self.field, value)
        return True


class SourceControlRegister(RegisterBehavior):
    """Command-source register: one owner bit per 8-pin group."""

    def write(self, regs: RegisterSet, props: GpioSetConfig, value: int) -> bool:
        setattr(regs, self.field, value & ASPEED_CMD_SRC_MASK)
        return False


BEHAVIORS: dict[RegisterKind, RegisterBehavior] = {
    RegisterKind.DATA_VALUE: ArbitratedRegister(
        "data_value", target="data_read", io_masked=True
    ),
    RegisterKind.DIRECTION: ArbitratedRegister("direction", io_masked=True),
    RegisterKind.INT_ENABLE: ArbitratedRegister("int_enable"),
    RegisterKind.INT_SENS_0: ArbitratedRegister("int_sens_0"),
    RegisterKind.INT_SENS_1: ArbitratedRegister("int_sens_1"),
    RegisterKind.INT_SENS_2: ArbitratedRegister("int_sens_2"),
    RegisterKind.INT_STATUS: DirectRegister("int_status"),
    RegisterKind.RESET_TOLERANT: ArbitratedRegister("reset_tol", recompute=False),
    RegisterKind.DEBOUNCE_1: ArbitratedRegister("debounce_1", recompute=False),
    RegisterKind.DEBOUNCE_2: ArbitratedRegister("debounce_2", recompute=False),
    RegisterKind.CMD_SOURCE_0: SourceControlRegister("cmd_source_0"),
    RegisterKind.CMD_SOURCE_1: SourceControlRegister("cmd_source_1"),
    RegisterKind.DATA_READ: ReadOnlyRegister("data_read"),
    RegisterKind.INPUT_MASK: DirectRegister("input_mask", input_only=True),
    RegisterKind.DEBOUNCE_TIME: ReservedRegister("debounce_time"),
}


@dataclass(frozen=True)
class DispatchEntry:
    """A decoded register offset."""

    offset: int
    kind: RegisterKind
    set_index: Optional[int]  # None for registers shared by all sets
    behavior: RegisterBehavior

    @property
    def readable(self) -> bool:
        return self.behavior.readable

    @property
    def writable(self) -> bool:
        return self.behavior.writable


class DispatchTable:
    """Offset -> DispatchEntry lookup for one controller variant."""

    def __init__(self, nr_sets: int):
        self._nr_sets = nr_sets
        self._entries: dict[int, DispatchEntry] = {}

    def add(self, offset: int, kind: RegisterKind, set_index: Optional[int]) -> None:
        """Add a register to the table.

        Raises:
            ConfigurationError: If the offset is taken, misaligned, or the set
                index does not exist
        """
        if offset in self._entries:
            raise ConfigurationError(
                "layout", f"offset 0x{offset:03X} is mapped twice"
            )
        if offset & 0x3:
            raise ConfigurationError("layout", f"offset 0x{offset:03X} is not word aligned")
        if set_index is not None and not 0 <= set_index < self._nr_sets:
            raise ConfigurationError(
                "layout", f"offset 0x{offset:03X} targets missing set {set_index}"
            )
        self._entries[offset] = DispatchEntry(offset, kind, set_index, BEHAVIORS[kind])

    def lookup(self, offset: int) -> Optional[DispatchEntry]:
        """Return the entry for offset, or None if it is unmapped."""
        return self._entries.get(offset)

    def __contains__(self, offset: int) -> bool:
        return offset in self._entries

    def __iter__(self) -> Iterator[DispatchEntry]:
        return iter(sorted(self._entries.values(), key=lambda e: e.offset))

    def __len__(self) -> int:
        return len(self._entries)


def _add_bank(
    table: DispatchTable,
    layout: dict[RegisterKind, tuple[int, ...]],
    debounce_time: tuple[int, ...],
    nr_sets: int,
    first_set: int,
) -> None:
    for kind, offsets in layout.items():
        if len(offsets) < nr_sets:
            raise ConfigurationError(
                "layout", f"{kind.value} declares {len(offsets)} sets, need {nr_sets}"
            )
        for bank_index in range(nr_sets):
            table.add(offsets[bank_index], kind, first_set + bank_index)
    for offset in debounce_time:
        table.add(offset, RegisterKind.DEBOUNCE_TIME, None)


def build_dispatch_table(variant: ControllerVariant) -> DispatchTable:
    """Decode the register window of a variant.

    Primary-bank set n is register set n. Secondary-bank set k is register
    set len(variant.sets) + k.
    """
    table = DispatchTable(variant.nr_sets)
    _add_bank(table, PRIMARY_LAYOUT, PRIMARY_DEBOUNCE_TIME, len(variant.sets), 0)
    if variant.secondary_sets:
        _add_bank(
            table,
            SECONDARY_LAYOUT,
            SECONDARY_DEBOUNCE_TIME,
            len(variant.secondary_sets),
            len(variant.sets),
        )
    return table
