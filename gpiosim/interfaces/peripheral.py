"""Structural protocol for register-window peripherals.

The host platform decodes bus addresses and hands the peripheral an offset
inside its own window, together with the access size. What happens next is
the peripheral's business, with one rule: a faulting guest access is
reported and absorbed (reads give 0, writes are dropped), never raised.
"""

from __future__ import annotations

from typing import Protocol


class Peripheral(Protocol):
    """Anything that answers offset-based reads and writes.

    Only method presence is checked (structural subtyping); behaviour is
    covered by the tests of each implementation.
    """

    def read(self, offset: int, size: int) -> int:
        """Return the register at offset, or 0 when the access faults."""
        ...

    def write(self, offset: int, size: int, value: int) -> None:
        """Store value at offset. Faulting writes leave no trace."""
        ...

    def read_register(self, offset: int, size: int) -> int: ...

    def write_register(self, offset: int, size: int, value: int) -> None: ...

    def reset(self) -> None:
        """Return every register to its power-on value."""
        ...
