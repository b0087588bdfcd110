"""Immutable view over an already-parsed physics configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .defaults import DEFAULT_PHYSICS
from .enums import VerboseLevel
from .models import RadioactiveDecayOptions, freeze_options

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})


def parse_bool(value: str | bool | None) -> bool | None:
    """Interpret a textual option value; ``None`` when it is not a boolean."""

    if value is None or isinstance(value, bool):
        return value
    text = value.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


@dataclass(frozen=True, slots=True)
class ModuleSpec:
    """One declared physics module and its free-form options."""

    name: str
    options: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", freeze_options(self.options))


@dataclass(frozen=True, slots=True)
class CutOverrides:
    """Declared production cuts in mm; ``None`` keeps the default."""

    default: float | None = None
    gamma: float | None = None
    electron: float | None = None
    positron: float | None = None
    muon: float | None = None
    neutron: float | None = None


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Read-only physics configuration consumed by the resolver and planners."""

    modules: tuple[ModuleSpec, ...] = ()
    cuts: CutOverrides = CutOverrides()
    energy_window: tuple[float, float] = (
        DEFAULT_PHYSICS.cuts.minimum_energy_kev,
        DEFAULT_PHYSICS.cuts.maximum_energy_kev,
    )
    ion_step_names: tuple[str, ...] = ()
    radioactive_decay: RadioactiveDecayOptions = RadioactiveDecayOptions()
    verbose_level: VerboseLevel = VerboseLevel.ESSENTIAL

    @property
    def module_names(self) -> list[str]:
        return [spec.name for spec in self.modules]

    def find_module(self, name: str) -> int:
        """Index of the first module declared as ``name``, or -1."""

        for index, spec in enumerate(self.modules):
            if spec.name == name:
                return index
        return -1

    def option_value(self, module: str, key: str, default: str | None = None) -> str | None:
        """Option ``key`` of the first module named ``module``."""

        index = self.find_module(module)
        if index < 0:
            return default
        return self.modules[index].options.get(key, default)

    def verbose_at_least(self, level: VerboseLevel) -> bool:
        return self.verbose_level >= level
