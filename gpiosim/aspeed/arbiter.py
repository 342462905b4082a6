"""Command-source arbitration.

Once the source of a group is programmed, the corresponding bits in the
data value, direction, interrupt enable/sensitivity, reset tolerance and
debounce registers can only be written by that source. The owner of a group
is the 2-bit code formed by bit 8*g of the two command-source registers.

The processor (ARM) is the only modelled source. Groups owned by the LPC
bus, the co-processor or the reserved code keep their previous bits.
"""

from __future__ import annotations

from gpiosim.aspeed.registers import RegisterSet
from gpiosim.core.gpio_enums import CommandSource
from gpiosim.utils.consts import ConstUtils, extract_bit


def group_owner(regs: RegisterSet, group: int) -> CommandSource:
    """Return the command source owning 8-pin group `group` of a set."""
    bit = group * ConstUtils.BITS_PER_GROUP
    code = extract_bit(regs.cmd_source_0, bit) | (extract_bit(regs.cmd_source_1, bit) << 1)
    return CommandSource(code)


def arbitrate(
    regs: RegisterSet,
    old_value: int,
    value: int,
    source: CommandSource = CommandSource.ARM,
) -> int:
    """Merge a write from `source` into a register, group by group.

    Groups owned by `source` take their bits from `value`; every other group
    keeps its bits from `old_value`.
    """
    new_value = 0
    for group in range(ConstUtils.GROUPS_PER_SET):
        group_mask = ConstUtils.MASK_8_BITS << (group * ConstUtils.BITS_PER_GROUP)
        if group_owner(regs, group) == source:
            new_value |= value & group_mask
        else:
            new_value |= old_value & group_mask
    return new_value
