"""Hardware register behaviour abstraction.

A register behaviour knows how one kind of register reads and writes a
backing storage object (for GPIO controllers, a register set). It does not
own the storage: the same behaviour instance is shared by every offset that
exposes that kind of register, whichever set the offset belongs to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RegisterBehavior(ABC):
    """Base class for the read/write behaviour of a register kind.

    Subclasses implement write(). The return value of write() tells the
    owning peripheral whether the committed state must be recomputed.
    """

    readable = True
    writable = True

    def __init__(self, field: str):
        """Initialize a register behaviour.

        Args:
            field: Name of the storage attribute this register reads
        """
        self.field = field

    def read(self, regs: Any) -> int:
        """Return the current register value from the storage object."""
        return getattr(regs, self.field)

    @abstractmethod
    def write(self, regs: Any, props: Any, value: int) -> bool:
        """Store a value written by software.

        Args:
            regs: Storage object (e.g. a register set)
            props: Capability properties of that storage
            value: Value being written (already masked by the caller)

        Returns:
            True if the write can change committed pin state.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field!r})"


class ReadOnlyRegister(RegisterBehavior):
    """A register without a setter. Writes are rejected by the dispatcher."""

    writable = False

    def write(self, regs: Any, props: Any, value: int) -> bool:
        return False


class ReservedRegister(RegisterBehavior):
    """An offset that is decoded but has neither getter nor setter."""

    readable = False
    writable = False

    def read(self, regs: Any) -> int:
        return 0

    def write(self, regs: Any, props: Any, value: int) -> bool:
        return False
