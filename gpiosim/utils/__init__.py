"""Utility helpers: constants and configuration loading."""

from gpiosim.utils.config_loader import (
    ControllerVariant,
    GpioSetConfig,
    clear_config_cache,
    get_variant,
    load_variants,
)
from gpiosim.utils.consts import ConstUtils, deposit_bit, extract_bit

__all__ = [
    "ConstUtils",
    "ControllerVariant",
    "GpioSetConfig",
    "clear_config_cache",
    "deposit_bit",
    "extract_bit",
    "get_variant",
    "load_variants",
]
