"""Core building blocks shared by controller models:
- register: Register behaviour abstraction
- irq: Interrupt output lines
- interrupt_controller: Summary interrupt routing
- peripheral: Base class for memory-mapped peripherals
- gpio_enums: Pin level, trigger and command source enumerations
- registry: Controller registry and factory
"""

from gpiosim.core.exceptions import (
    ConfigurationError,
    MemoryAccessError,
    MemoryAlignmentError,
    MemoryException,
    RegisterAccessError,
    SimulatorError,
)
from gpiosim.core.gpio_enums import CommandSource, InterruptTrigger, PinLevel
from gpiosim.core.interrupt_controller import InterruptController
from gpiosim.core.irq import IrqLine
from gpiosim.core.peripheral import BasePeripheral
from gpiosim.core.register import (
    ReadOnlyRegister,
    RegisterBehavior,
    ReservedRegister,
)
from gpiosim.core.registry import (
    ControllerRegistry,
    create_controller,
    get_controller,
    list_available_controllers,
    register_controller,
)

__all__ = [
    # Errors
    "SimulatorError",
    "ConfigurationError",
    "MemoryException",
    "MemoryAccessError",
    "MemoryAlignmentError",
    "RegisterAccessError",
    # Register abstractions
    "RegisterBehavior",
    "ReadOnlyRegister",
    "ReservedRegister",
    # Interrupts
    "InterruptController",
    "IrqLine",
    # Peripheral base
    "BasePeripheral",
    # Enumerations
    "CommandSource",
    "InterruptTrigger",
    "PinLevel",
    # Registry
    "ControllerRegistry",
    "register_controller",
    "get_controller",
    "create_controller",
    "list_available_controllers",
]
