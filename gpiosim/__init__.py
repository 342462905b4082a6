"""GPIO controller emulation.

Register-level models of multi-bank GPIO pin controllers, driven by
memory-mapped reads and writes from the processor side and by pin levels
from the board side.

Getting started:
    from gpiosim import create_controller

    gpio = create_controller("aspeed.gpio-ast2500")
    gpio.write(0x004, 4, 0x1)       # pin A0 is an output
    gpio.write(0x000, 4, 0x1)       # drive it high
    assert gpio.get_pin("gpioA0")
"""

# Controller implementations (auto-registers when imported)
from gpiosim.aspeed import AST2400GPIO, AST2500GPIO, AST2600GPIO, AspeedGPIO
from gpiosim.core.interrupt_controller import InterruptController
from gpiosim.core.irq import IrqLine
from gpiosim.core.registry import (
    create_controller,
    get_controller,
    list_available_controllers,
)
from gpiosim.utils.config_loader import ControllerVariant, get_variant, load_variants

__all__ = [
    # Core
    "InterruptController",
    "IrqLine",
    # Configuration
    "ControllerVariant",
    "get_variant",
    "load_variants",
    # Controller creation
    "create_controller",
    "get_controller",
    "list_available_controllers",
    # Concrete controllers
    "AspeedGPIO",
    "AST2400GPIO",
    "AST2500GPIO",
    "AST2600GPIO",
]
