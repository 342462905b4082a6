"""ASPEED GPIO controller models.

Importing this package registers one controller per hardware revision.
"""

from gpiosim.aspeed.gpio import (
    AST2400GPIO,
    AST2500GPIO,
    AST2600GPIO,
    AspeedGPIO,
    GpioSnapshot,
)
from gpiosim.core.registry import register_controller

TYPE_ASPEED_GPIO = "aspeed.gpio"

register_controller(f"{TYPE_ASPEED_GPIO}-ast2400", AST2400GPIO)
register_controller(f"{TYPE_ASPEED_GPIO}-ast2500", AST2500GPIO)
register_controller(f"{TYPE_ASPEED_GPIO}-ast2600", AST2600GPIO)

__all__ = [
    "AST2400GPIO",
    "AST2500GPIO",
    "AST2600GPIO",
    "AspeedGPIO",
    "GpioSnapshot",
    "TYPE_ASPEED_GPIO",
]
