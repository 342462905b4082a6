"""GPIO enumerations shared by controller models."""

from enum import IntEnum


class PinLevel(IntEnum):
    """GPIO pin logic level."""

    LOW = 0
    HIGH = 1


class InterruptTrigger(IntEnum):
    """Per-pin trigger code composed from the three sensitivity registers.

    Codes above DUAL_EDGE are undefined by the hardware and behave like it.
    """

    FALLING_EDGE = 0
    RISING_EDGE = 1
    LEVEL_LOW = 2
    LEVEL_HIGH = 3
    DUAL_EDGE = 4


class CommandSource(IntEnum):
    """Owner of an 8-pin group, encoded over the two command-source registers.

    | src_1 | src_0 | source      |
    |-------|-------|-------------|
    |   0   |   0   | ARM         |
    |   0   |   1   | LPC         |
    |   1   |   0   | Coprocessor |
    |   1   |   1   | Reserved    |
    """

    ARM = 0
    LPC = 1
    COPROCESSOR = 2
    RESERVED = 3
