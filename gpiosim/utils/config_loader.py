"""Helpers for loading and validating controller variant configuration.

A controller variant describes one hardware revision: how many pins it has,
how they are split into 32-pin sets, which bits of each set can act as
inputs or outputs, the labels of the 8-pin groups, and where the 4-pin
numbering gap (if any) sits. Variants are read once from YAML and shared,
read-only, by every controller instance of that revision.
"""

import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from gpiosim.core.exceptions import ConfigurationError
from gpiosim.utils.consts import ConstUtils

MAX_PRIMARY_SETS = 8
MAX_SECONDARY_SETS = 2
GAP_WIDTH = 4

_LABEL_RE = re.compile(r"[A-Z]{0,2}")


@dataclass(frozen=True)
class GpioSetConfig:
    """Capabilities and group labels of one 32-pin set."""

    input: int
    output: int
    groups: tuple[str, ...] = field(default_factory=tuple)

    @property
    def capability(self) -> int:
        """Bits that exist at all (input or output capable)."""
        return self.input | self.output

    def group_label(self, group: int) -> str:
        """Return the label of an 8-pin group, or "" if unlabelled."""
        if 0 <= group < len(self.groups):
            return self.groups[group]
        return ""


@dataclass(frozen=True)
class ControllerVariant:
    """Immutable description of one controller hardware revision."""

    name: str
    nr_pins: int
    sets: tuple[GpioSetConfig, ...]
    secondary_sets: tuple[GpioSetConfig, ...] = ()
    gap: int = 0

    @property
    def nr_sets(self) -> int:
        """Register sets the controller owns (primary then secondary)."""
        return len(self.sets) + len(self.secondary_sets)

    @property
    def all_sets(self) -> tuple[GpioSetConfig, ...]:
        return self.sets + self.secondary_sets

    def props(self, set_index: int) -> GpioSetConfig:
        """Return the properties of a register set.

        Raises:
            ConfigurationError: If the variant declares no such set
        """
        all_sets = self.all_sets
        if not 0 <= set_index < len(all_sets):
            raise ConfigurationError(
                self.name, f"no set properties for set index {set_index}"
            )
        return all_sets[set_index]

    def is_secondary(self, set_index: int) -> bool:
        return set_index >= len(self.sets)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, dict[str, ControllerVariant]] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(family: str, path: Optional[str] = None) -> str:
    if path is None:
        # Config files are in gpiosim/{family}/config.yaml
        base = Path(__file__).parent.parent / family / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError("config root must be a mapping")
    return raw


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    if isinstance(value, str):
        return int(value, 0)
    return int(value)


def _build_set_config(set_raw: Any) -> GpioSetConfig:
    if not isinstance(set_raw, dict):
        raise TypeError(f"set entry must be a mapping, got {set_raw!r}")
    labels = set_raw.get("groups") or []
    if not isinstance(labels, (list, tuple)):
        raise TypeError(f"groups must be a list of labels, got {labels!r}")
    groups = tuple(str(label) for label in labels)
    return GpioSetConfig(
        input=_as_int(set_raw["input"]),
        output=_as_int(set_raw["output"]),
        groups=groups,
    )


def _build_variant(name: str, raw: dict[str, Any]) -> ControllerVariant:
    try:
        variant = ControllerVariant(
            name=name,
            nr_pins=_as_int(raw["pins"]),
            gap=_as_int(raw.get("gap") or 0),
            sets=tuple(_build_set_config(s) for s in raw["sets"]),
            secondary_sets=tuple(
                _build_set_config(s) for s in raw.get("secondary_sets") or []
            ),
        )
    except KeyError as exc:
        raise ConfigurationError(name, f"missing required config key: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(name, f"invalid config schema: {exc}") from exc

    _validate_variant(variant)
    return variant


def _validate_set(variant: str, index: int, props: GpioSetConfig) -> None:
    for mask_name, mask in (("input", props.input), ("output", props.output)):
        if not 0 <= mask <= ConstUtils.MASK_32_BITS:
            raise ConfigurationError(
                variant, f"set {index} {mask_name} mask 0x{mask:X} exceeds 32 bits"
            )

    if len(props.groups) > ConstUtils.GROUPS_PER_SET:
        raise ConfigurationError(
            variant, f"set {index} declares {len(props.groups)} groups (max 4)"
        )
    for label in props.groups:
        if not _LABEL_RE.fullmatch(label):
            raise ConfigurationError(
                variant, f"set {index} group label {label!r} is not 0-2 upper-case letters"
            )


def _validate_variant(variant: ControllerVariant) -> None:
    """Sanity checks so a bad variant fails at load time, not on first access."""
    name = variant.name
    if variant.nr_pins <= 0:
        raise ConfigurationError(name, "pin count must be positive")
    if not 1 <= len(variant.sets) <= MAX_PRIMARY_SETS:
        raise ConfigurationError(
            name, f"expected 1-{MAX_PRIMARY_SETS} sets, got {len(variant.sets)}"
        )
    if len(variant.secondary_sets) > MAX_SECONDARY_SETS:
        raise ConfigurationError(
            name,
            f"expected at most {MAX_SECONDARY_SETS} secondary sets, "
            f"got {len(variant.secondary_sets)}",
        )
    if variant.gap < 0 or variant.gap >= variant.nr_pins:
        raise ConfigurationError(name, f"gap {variant.gap} outside pin range")

    for index, props in enumerate(variant.all_sets):
        _validate_set(name, index, props)

    # The highest pin, after gap adjustment, must land in a declared set.
    last_pin = variant.nr_pins - 1
    if variant.gap and last_pin >= variant.gap:
        last_pin += GAP_WIDTH
    if last_pin // ConstUtils.GPIOS_PER_SET >= len(variant.sets):
        raise ConfigurationError(
            name,
            f"{variant.nr_pins} pins do not fit in {len(variant.sets)} sets",
        )


def _parse_variants_from_dict(raw: dict[str, Any]) -> dict[str, ControllerVariant]:
    variants_raw = raw.get("variants")
    if not isinstance(variants_raw, dict) or not variants_raw:
        raise ConfigurationError("variants", "at least one variant is required")

    return {
        str(name): _build_variant(str(name), body or {})
        for name, body in variants_raw.items()
    }


def load_variants(
    family: str = "aspeed", path: Optional[str] = None
) -> dict[str, ControllerVariant]:
    """Load and validate controller variants from a YAML file.

    Args:
        family: Controller family (e.g., 'aspeed') for bundled config lookup.
        path: Optional path to YAML config. If None, load the bundled
            gpiosim/{family}/config.yaml.

    Returns:
        Mapping of variant name to ControllerVariant

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(family=family, path=path))
    raw = _load_yaml_file(p)

    return _parse_variants_from_dict(raw=raw)


def get_variant(name: str, family: str = "aspeed") -> ControllerVariant:
    """Return the bundled variant called name, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.

    Raises:
        ConfigurationError: If the family has no such variant
    """
    with _CACHE_LOCK:
        if family not in _LOADER_CACHE:
            _LOADER_CACHE[family] = load_variants(family=family)
        variants = _LOADER_CACHE[family]

    if name not in variants:
        raise ConfigurationError(
            name, f"unknown variant; available: {sorted(variants)}"
        )
    return variants[name]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_variant() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
