"""Per-pin interrupt trigger evaluation."""

from __future__ import annotations

from gpiosim.aspeed.registers import RegisterSet
from gpiosim.core.gpio_enums import InterruptTrigger
from gpiosim.utils.consts import deposit_bit, extract_bit


def trigger_code(regs: RegisterSet, bit: int) -> int:
    """Compose a pin's 3-bit trigger code from the sensitivity registers."""
    return (
        extract_bit(regs.int_sens_0, bit)
        | extract_bit(regs.int_sens_1, bit) << 1
        | extract_bit(regs.int_sens_2, bit) << 2
    )


def evaluate_irq(regs: RegisterSet, prev_high: bool, bit: int) -> bool:
    """Latch the interrupt status of a pin whose committed value was just updated.

    Compares the previous level with the committed level in data_value.
    Level triggers only fire here, when the committed value changes; an
    access that leaves the level alone never reaches this function.

    Returns:
        True if the status bit was set.
    """
    code = trigger_code(regs, bit)
    curr_high = bool(extract_bit(regs.data_value, bit))
    rising_edge = curr_high and not prev_high
    falling_edge = prev_high and not curr_high

    if (
        (code == InterruptTrigger.FALLING_EDGE and falling_edge)
        or (code == InterruptTrigger.RISING_EDGE and rising_edge)
        or (code == InterruptTrigger.LEVEL_LOW and not curr_high)
        or (code == InterruptTrigger.LEVEL_HIGH and curr_high)
        or (code >= InterruptTrigger.DUAL_EDGE and (rising_edge or falling_edge))
    ):
        regs.int_status = deposit_bit(regs.int_status, bit, 1)
        return True
    return False
