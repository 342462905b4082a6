"""Bit-level constants and helpers for 32-bit register sets."""


class ConstUtils:
    """Bitwise masks and register constants."""

    MASK_8_BITS = 0xFF
    """8-bit mask: 0xFF"""

    MASK_32_BITS = 0xFFFFFFFF
    """32-bit mask: 0xFFFFFFFF"""

    BITS_PER_GROUP = 8
    """Pins per GPIO group (one command-source owner per group)."""

    GPIOS_PER_SET = 32
    """Pins per GPIO set, one bit each in a 32-bit register."""

    GROUPS_PER_SET = 4
    """Groups per GPIO set."""

    REGISTER_SIZE = 4
    """Only access size accepted by the register window (bytes)."""


def extract_bit(value: int, bit: int) -> int:
    """Return bit `bit` of `value` as 0 or 1."""
    return (value >> bit) & 1


def deposit_bit(value: int, bit: int, level: int) -> int:
    """Return `value` with bit `bit` replaced by `level`."""
    mask = 1 << bit
    if level:
        return (value | mask) & ConstUtils.MASK_32_BITS
    return value & ~mask & ConstUtils.MASK_32_BITS
