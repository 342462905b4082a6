"""ASPEED GPIO controller (ast2400, ast2500, ast2600).

GPIO pins are arranged in groups of 8 pins labeled A, B, ..., Y, Z, AA, AB,
AC. A set has four groups and is named after them (ABCD, EFGH, ...,
YZAAAB). Each set is accessed through a bank of 14 registers, see
registers.py and consts.py for the layout.

WRITE PATH
==========
  offset -> DispatchEntry (set, kind)
         -> value & (input | output) capability of the set
         -> behaviour (arbitration by command source where applicable)
         -> commit data_read into data_value, evaluate interrupts

The commit step copies a bit of data_read into data_value when the bit
differs, is configured as output in direction, and is not masked by
input_mask. Every committed bit is run through the trigger evaluator.

External pin levels go straight into data_read and take the same commit
path, so stimulus and software writes are indistinguishable to the guest.

The model deviates from the hardware in three ways:
- the debounce registers are stored but have no effect
- the processor is the only command source that can win arbitration
- reset clears every register, reset tolerance is ignored
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from gpiosim.aspeed.consts import (
    GPIO_WINDOW_SIZE,
    PRIMARY_BANK_END,
    PRIMARY_BANK_START,
    SECONDARY_BANK_END,
    SECONDARY_BANK_START,
)
from gpiosim.aspeed.dispatch import DispatchEntry, build_dispatch_table
from gpiosim.aspeed.irq_eval import evaluate_irq
from gpiosim.aspeed.pinmap import PinDescriptor, build_pin_table, pin_to_set_bit
from gpiosim.aspeed.registers import RegisterSet
from gpiosim.core.exceptions import (
    MemoryAccessError,
    MemoryAlignmentError,
    MemoryException,
    RegisterAccessError,
)
from gpiosim.core.gpio_enums import PinLevel
from gpiosim.core.irq import IrqLine
from gpiosim.core.peripheral import BasePeripheral
from gpiosim.utils.config_loader import ControllerVariant, get_variant
from gpiosim.utils.consts import ConstUtils, deposit_bit, extract_bit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GpioSnapshot:
    """Saved contents of every register set of a controller."""

    variant: str
    sets: tuple[RegisterSet, ...]


class AspeedGPIO(BasePeripheral):
    """ASPEED GPIO controller model.

    Subclasses pin the hardware revision through VARIANT_NAME; the base class
    accepts any ControllerVariant directly.
    """

    VARIANT_NAME: Optional[str] = None

    def __init__(
        self,
        variant: Optional[ControllerVariant] = None,
        base_addr: int = 0,
        name: str | None = None,
    ):
        if variant is None:
            if self.VARIANT_NAME is None:
                raise ValueError("AspeedGPIO needs a variant")
            variant = get_variant(self.VARIANT_NAME)
        super().__init__(
            name=name or f"aspeed.gpio-{variant.name}",
            size=GPIO_WINDOW_SIZE,
            base_addr=base_addr,
        )
        self.variant = variant
        self._dispatch = build_dispatch_table(variant)
        self._sets = [RegisterSet() for _ in range(variant.nr_sets)]

        self._pins: list[PinDescriptor] = build_pin_table(variant)
        self._pins_by_name = {pin.name: index for index, pin in enumerate(self._pins)}
        self._pins_by_bit = {
            (pin.set_index, pin.bit): index for index, pin in enumerate(self._pins)
        }
        self.outputs = [IrqLine(pin.name) for pin in self._pins]

        logger.debug(
            f"{self.name}: {variant.nr_pins} pins, {variant.nr_sets} sets, "
            f"{len(self._dispatch)} registers"
        )

    # ==========================================================
    # Register window
    # ==========================================================

    def read(self, offset: int, size: int) -> int:
        """Read a register. Faulting reads are reported and return 0."""
        try:
            entry, set_index = self._decode(offset, size, "read")
        except MemoryException as exc:
            self._guest_error(exc)
            return 0

        return entry.behavior.read(self._sets[set_index])

    def write(self, offset: int, size: int, value: int) -> None:
        """Write a register. Faulting writes are reported and discarded."""
        try:
            entry, set_index = self._decode(offset, size, "write")
        except MemoryException as exc:
            self._guest_error(exc)
            return

        props = self.variant.props(set_index)
        regs = self._sets[set_index]
        value &= props.capability & ConstUtils.MASK_32_BITS
        if entry.behavior.write(regs, props, value):
            self._update(set_index)

    def reset(self) -> None:
        """Zero every register set."""
        for regs in self._sets:
            regs.clear()
        logger.debug(f"{self.name}: reset")

    def _decode(self, offset: int, size: int, operation: str) -> tuple[DispatchEntry, int]:
        """Resolve an access to its register and set, or raise the guest fault."""
        if size != ConstUtils.REGISTER_SIZE or offset & 0x3:
            raise MemoryAlignmentError(offset, size)
        if not (
            PRIMARY_BANK_START <= offset < PRIMARY_BANK_END
            or SECONDARY_BANK_START <= offset < SECONDARY_BANK_END
        ):
            raise MemoryAccessError(offset)
        entry = self._dispatch.lookup(offset)
        if entry is None:
            raise MemoryAccessError(offset, f"offset 0x{offset:03X} is not an implemented register")

        allowed = entry.readable if operation == "read" else entry.writable
        # Shared registers have no backing set and no accessors
        if not allowed or entry.set_index is None:
            raise RegisterAccessError(offset, operation)
        return entry, entry.set_index

    def _guest_error(self, exc: MemoryException) -> None:
        logger.warning(f"{self.name}: guest error: {exc}")

    # ==========================================================
    # Commit and interrupt evaluation
    # ==========================================================

    def _update(self, set_index: int) -> None:
        regs = self._sets[set_index]
        old = regs.data_value
        new = regs.data_read
        diff = old ^ new
        if not diff or not regs.direction:
            return

        for bit in range(ConstUtils.GPIOS_PER_SET):
            mask = 1 << bit
            if not diff & mask:
                continue
            if not regs.direction & mask:
                continue
            if regs.input_mask & mask:
                continue

            regs.data_value = deposit_bit(regs.data_value, bit, new & mask)
            if evaluate_irq(regs, bool(old & mask), bit) and regs.int_enable & mask:
                self._raise_pin_irq(set_index, bit)

    def _raise_pin_irq(self, set_index: int, bit: int) -> None:
        index = self._pins_by_bit.get((set_index, bit))
        if index is not None:
            self.outputs[index].pulse()
        self.emit_interrupt()

    # ==========================================================
    # External pin-level interface
    # ==========================================================

    @property
    def nr_pins(self) -> int:
        return self.variant.nr_pins

    @property
    def irq_count(self) -> int:
        """Interrupt output lines (one per named pin)."""
        return len(self.outputs)

    def get_pin_level(self, pin: int) -> bool:
        """Return the committed level of a linear pin."""
        set_index, bit = pin_to_set_bit(self.variant, pin)
        return bool(extract_bit(self._sets[set_index].data_value, bit))

    def set_pin_level(self, pin: int, level: bool) -> None:
        """Drive a linear pin from outside the controller."""
        set_index, bit = pin_to_set_bit(self.variant, pin)
        self._drive(set_index, bit, level)

    def output_for_pin(self, pin: int) -> IrqLine:
        """Return the interrupt output line of a linear pin."""
        pin_to_set_bit(self.variant, pin)
        return self.outputs[pin]

    def _drive(self, set_index: int, bit: int, level: bool) -> None:
        regs = self._sets[set_index]
        regs.data_read = deposit_bit(regs.data_read, bit, PinLevel.HIGH if level else PinLevel.LOW)
        self._update(set_index)

    # ==========================================================
    # Named pins (gpioA0, gpioAB3, gpio18E0, ...)
    # ==========================================================

    @property
    def pins(self) -> tuple[PinDescriptor, ...]:
        """Named pins, in the same order as outputs."""
        return tuple(self._pins)

    def pin_names(self) -> list[str]:
        return [pin.name for pin in self._pins]

    def get_pin(self, name: str) -> bool:
        """Return the committed level of a named pin, False if unknown."""
        pin = self._named_pin(name)
        if pin is None:
            return False
        return bool(extract_bit(self._sets[pin.set_index].data_value, pin.bit))

    def set_pin(self, name: str, level: bool) -> None:
        """Drive a named pin. Unknown names are reported and ignored."""
        pin = self._named_pin(name)
        if pin is not None:
            self._drive(pin.set_index, pin.bit, level)

    def _named_pin(self, name: str) -> Optional[PinDescriptor]:
        index = self._pins_by_name.get(name)
        if index is None:
            logger.warning(f"{self.name}: guest error: no pin named {name!r}")
            return None
        return self._pins[index]

    # ==========================================================
    # Introspection and state save/restore
    # ==========================================================

    @property
    def sets(self) -> tuple[RegisterSet, ...]:
        """Register sets, for inspection only."""
        return tuple(self._sets)

    def snapshot(self) -> GpioSnapshot:
        """Copy every register set verbatim."""
        return GpioSnapshot(
            variant=self.variant.name,
            sets=tuple(replace(regs) for regs in self._sets),
        )

    def restore(self, snapshot: GpioSnapshot) -> None:
        """Load register sets from a snapshot taken on the same variant.

        Raises:
            ValueError: If the snapshot does not match this controller
        """
        if snapshot.variant != self.variant.name:
            raise ValueError(
                f"Snapshot of {snapshot.variant} cannot be restored on {self.variant.name}"
            )
        if len(snapshot.sets) != len(self._sets):
            raise ValueError(
                f"Snapshot has {len(snapshot.sets)} sets, "
                f"{self.name} has {len(self._sets)}"
            )
        self._sets = [replace(regs) for regs in snapshot.sets]


class AST2400GPIO(AspeedGPIO):
    """ast2400: 216 pins in 7 sets, 4-pin gap in group Y."""

    VARIANT_NAME = "ast2400"


class AST2500GPIO(AspeedGPIO):
    """ast2500: 228 pins in 8 sets, 4-pin gap in group AB."""

    VARIANT_NAME = "ast2500"


class AST2600GPIO(AspeedGPIO):
    """ast2600: 208 pins in 7 sets plus two 1.8V sets."""

    VARIANT_NAME = "ast2600"
