"""ASPEED GPIO register window layout.

The window is 0x1000 bytes and holds two independently laid out banks:

  Primary bank    0x000-0x1EF  up to eight 3.3V sets (ABCD ... AC)
  Secondary bank  0x800-0x9D7  up to two 1.8V sets (ABCD, E)

Each set owns 14 registers, but a set's registers are not contiguous: the
data-read registers of every set are grouped together, input masks are
scattered, and the later sets were appended wherever the map had room.
Offsets are therefore listed explicitly per kind, indexed by the set's
position inside its bank.
"""

from __future__ import annotations

from gpiosim.aspeed.registers import RegisterKind

GPIO_WINDOW_SIZE = 0x1000

ASPEED_CMD_SRC_MASK = 0x01010101

PRIMARY_BANK_START = 0x000
PRIMARY_BANK_END = 0x1F0  # exclusive
SECONDARY_BANK_START = 0x800
SECONDARY_BANK_END = 0x9D8  # exclusive

# Sets:                ABCD   EFGH   IJKL   MNOP   QRST   UVWX   YZAAAB AC
PRIMARY_LAYOUT: dict[RegisterKind, tuple[int, ...]] = {
    RegisterKind.DATA_VALUE: (0x000, 0x020, 0x070, 0x078, 0x080, 0x088, 0x1E0, 0x1E8),
    RegisterKind.DIRECTION: (0x004, 0x024, 0x074, 0x07C, 0x084, 0x08C, 0x1E4, 0x1EC),
    RegisterKind.INT_ENABLE: (0x008, 0x028, 0x098, 0x0E8, 0x118, 0x148, 0x178, 0x1A8),
    RegisterKind.INT_SENS_0: (0x00C, 0x02C, 0x09C, 0x0EC, 0x11C, 0x14C, 0x17C, 0x1AC),
    RegisterKind.INT_SENS_1: (0x010, 0x030, 0x0A0, 0x0F0, 0x120, 0x150, 0x180, 0x1B0),
    RegisterKind.INT_SENS_2: (0x014, 0x034, 0x0A4, 0x0F4, 0x124, 0x154, 0x184, 0x1B4),
    RegisterKind.INT_STATUS: (0x018, 0x038, 0x0A8, 0x0F8, 0x128, 0x158, 0x188, 0x1B8),
    RegisterKind.RESET_TOLERANT: (0x01C, 0x03C, 0x0AC, 0x0FC, 0x12C, 0x15C, 0x18C, 0x1BC),
    RegisterKind.DEBOUNCE_1: (0x040, 0x048, 0x0B0, 0x100, 0x130, 0x160, 0x190, 0x1C0),
    RegisterKind.DEBOUNCE_2: (0x044, 0x04C, 0x0B4, 0x104, 0x134, 0x164, 0x194, 0x1C4),
    RegisterKind.CMD_SOURCE_0: (0x060, 0x068, 0x090, 0x0E0, 0x110, 0x140, 0x170, 0x1A0),
    RegisterKind.CMD_SOURCE_1: (0x064, 0x06C, 0x094, 0x0E4, 0x114, 0x144, 0x174, 0x1A4),
    RegisterKind.DATA_READ: (0x0C0, 0x0C4, 0x0C8, 0x0CC, 0x0D0, 0x0D4, 0x0D8, 0x0DC),
    RegisterKind.INPUT_MASK: (0x1D0, 0x1D4, 0x0B8, 0x108, 0x138, 0x168, 0x198, 0x1C8),
}

PRIMARY_DEBOUNCE_TIME = (0x050, 0x054, 0x058)

# Sets:                1.8V ABCD  1.8V E
SECONDARY_LAYOUT: dict[RegisterKind, tuple[int, ...]] = {
    RegisterKind.DATA_VALUE: (0x800, 0x820),
    RegisterKind.DIRECTION: (0x804, 0x824),
    RegisterKind.INT_ENABLE: (0x808, 0x828),
    RegisterKind.INT_SENS_0: (0x80C, 0x82C),
    RegisterKind.INT_SENS_1: (0x810, 0x830),
    RegisterKind.INT_SENS_2: (0x814, 0x834),
    RegisterKind.INT_STATUS: (0x818, 0x838),
    RegisterKind.RESET_TOLERANT: (0x81C, 0x83C),
    RegisterKind.DEBOUNCE_1: (0x840, 0x848),
    RegisterKind.DEBOUNCE_2: (0x844, 0x84C),
    RegisterKind.CMD_SOURCE_0: (0x860, 0x868),
    RegisterKind.CMD_SOURCE_1: (0x864, 0x86C),
    RegisterKind.DATA_READ: (0x8C0, 0x8C4),
    RegisterKind.INPUT_MASK: (0x9D0, 0x9D4),
}

SECONDARY_DEBOUNCE_TIME = (0x850, 0x854, 0x858)
