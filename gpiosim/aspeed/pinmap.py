"""Pin to register-bit mapping for ASPEED GPIO controllers.

Pins are numbered linearly across the controller, 32 to a set. Two
revisions have a group with only four real pins in the middle of the
numbering (group Y on the ast2400, group AB on the ast2500). Their variant
declares a gap: every pin at or beyond it is shifted up by four so that set
boundaries stay aligned on 32.

Everything that turns a pin into a register bit goes through this module,
so a pin resolves to the same bit whether it is reached by number or by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from gpiosim.core.exceptions import ConfigurationError
from gpiosim.utils.config_loader import GAP_WIDTH, ControllerVariant
from gpiosim.utils.consts import ConstUtils

SECONDARY_PIN_PREFIX = "gpio18"
PIN_PREFIX = "gpio"


@dataclass(frozen=True)
class PinDescriptor:
    """A named pin and the register bit behind it."""

    name: str
    set_index: int
    bit: int
    pin: int | None = None  # linear pin number, None for secondary-bank pins


def adjust_pin(variant: ControllerVariant, pin: int) -> int:
    """Apply the variant's numbering gap to a linear pin index."""
    if variant.gap and pin >= variant.gap:
        pin += GAP_WIDTH
    return pin


def pin_to_set_bit(variant: ControllerVariant, pin: int) -> tuple[int, int]:
    """Resolve a linear pin to (set_index, bit_index).

    Raises:
        ValueError: If the pin is outside the variant's pin range
    """
    if not 0 <= pin < variant.nr_pins:
        raise ValueError(f"Pin {pin} is out of range [0-{variant.nr_pins - 1}]")

    adjusted = adjust_pin(variant, pin)
    return adjusted >> 5, adjusted & (ConstUtils.GPIOS_PER_SET - 1)


def pin_name(variant: ControllerVariant, set_index: int, bit: int) -> str:
    """Name the pin behind a register bit, e.g. gpioC2 or gpio18E0."""
    label = variant.props(set_index).group_label(bit // ConstUtils.BITS_PER_GROUP)
    if not label:
        raise ConfigurationError(
            variant.name, f"set {set_index} bit {bit} belongs to an unlabelled group"
        )
    prefix = SECONDARY_PIN_PREFIX if variant.is_secondary(set_index) else PIN_PREFIX
    return f"{prefix}{label}{bit % ConstUtils.BITS_PER_GROUP}"


def build_pin_table(variant: ControllerVariant) -> list[PinDescriptor]:
    """List every named pin of a variant.

    Linear pins come first, in pin order, so table[pin] is pin `pin`.
    Secondary-bank pins follow; they exist for every capable bit of a
    labelled group and can only be reached by name.
    """
    table: list[PinDescriptor] = []
    for pin in range(variant.nr_pins):
        set_index, bit = pin_to_set_bit(variant, pin)
        table.append(
            PinDescriptor(pin_name(variant, set_index, bit), set_index, bit, pin)
        )

    for offset, props in enumerate(variant.secondary_sets):
        set_index = len(variant.sets) + offset
        for bit in range(ConstUtils.GPIOS_PER_SET):
            if not props.capability & (1 << bit):
                continue
            if not props.group_label(bit // ConstUtils.BITS_PER_GROUP):
                continue
            table.append(
                PinDescriptor(pin_name(variant, set_index, bit), set_index, bit)
            )

    names = [entry.name for entry in table]
    if len(set(names)) != len(names):
        raise ConfigurationError(variant.name, "pin names are not unique")
    return table
