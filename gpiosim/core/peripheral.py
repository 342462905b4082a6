"""Shared base for register-window peripherals."""

from __future__ import annotations

from typing import Optional

from gpiosim.interfaces.interrupt_controller import IInterruptController


class BasePeripheral:
    """Common state of a peripheral: its name, window and summary interrupt.

    Subclasses provide read/write/reset. The summary interrupt is the single
    line a controller raises towards the platform, independent of any
    per-pin output lines the subclass may expose.
    """

    def __init__(self, name: str, size: int, base_addr: int = 0):
        self.name = name
        self.size = size
        self.base_addr = base_addr
        self._interrupt_controller: Optional[IInterruptController] = None

    def attach_interrupt_controller(self, controller: IInterruptController) -> None:
        """Route the summary interrupt to controller and register as its source."""
        self._interrupt_controller = controller
        controller.subscribe(self)

    def emit_interrupt(self, vector: int | None = None) -> None:
        """Raise the summary interrupt. Without a controller this does nothing."""
        if self._interrupt_controller is not None:
            self._interrupt_controller.notify(self, vector)

    def read(self, offset: int, size: int) -> int:
        raise NotImplementedError(f"{type(self).__name__} does not implement read()")

    def write(self, offset: int, size: int, value: int) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not implement write()")

    def reset(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not implement reset()")

    # Register-terminology aliases used by bus glue
    def read_register(self, offset: int, size: int) -> int:
        return self.read(offset, size)

    def write_register(self, offset: int, size: int, value: int) -> None:
        self.write(offset, size, value)
