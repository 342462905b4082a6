"""Interfaces shared by controller models and the platforms hosting them:
- Peripheral: Memory-mapped peripheral protocol
- IInterruptController: Where peripherals deliver their summary interrupts
"""

from gpiosim.interfaces.interrupt_controller import (
    IInterruptController,
    InterruptEvent,
    InterruptTarget,
)
from gpiosim.interfaces.peripheral import Peripheral

__all__ = [
    "IInterruptController",
    "InterruptEvent",
    "InterruptTarget",
    "Peripheral",
]
