"""Immutable value objects produced while resolving a physics list.

Every artifact here is built exactly once per resolution and handed to the
executor unchanged.  The engine-facing behaviour of a module is limited to the
two construction hooks on ``PhysicsModule``; the category tag only drives
selection and validation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .enums import DiagnosticCode, ModuleCategory, Species, VerboseLevel
from .ions import ion_name

if TYPE_CHECKING:
    from physlist.interfaces.engine import IPhysicsEngine


def freeze_options(options: Mapping[str, str]) -> Mapping[str, str]:
    """Read-only copy of a module option mapping."""

    return MappingProxyType(dict(options))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Advisory condition recorded during resolution or assembly."""

    code: DiagnosticCode
    message: str
    level: VerboseLevel = VerboseLevel.ESSENTIAL
    subject: str | None = None


@dataclass(frozen=True, slots=True)
class PhysicsModule:
    """Handle on a named physics constructor owned by the engine."""

    name: str
    category: ModuleCategory
    options: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", freeze_options(self.options))

    def option(self, key: str, default: str | None = None) -> str | None:
        return self.options.get(key, default)

    def construct_particles(self, engine: IPhysicsEngine) -> None:
        engine.construct_particles(self.name)

    def construct_processes(self, engine: IPhysicsEngine) -> None:
        engine.construct_processes(self.name)


@dataclass(frozen=True, slots=True)
class RadioactiveDecayOptions:
    """Optional process flags for radioactive decay; ``None`` means unset."""

    internal_conversion: bool | None = None
    atomic_rearrangement: bool | None = None


@dataclass(frozen=True, slots=True)
class PhysicsAssembly:
    """Validated module selection ready for construction."""

    decay: PhysicsModule | None = None
    radioactive_decay: PhysicsModule | None = None
    electromagnetic: PhysicsModule | None = None
    electromagnetic_name: str | None = None
    hadronic: tuple[PhysicsModule, ...] = ()
    electromagnetic_matches: tuple[str, ...] = ()
    radioactive_decay_options: RadioactiveDecayOptions = RadioactiveDecayOptions()
    verbose_level: VerboseLevel = VerboseLevel.ESSENTIAL
    diagnostics: tuple[Diagnostic, ...] = ()

    def particle_order(self) -> list[PhysicsModule]:
        """Modules in the order their particles must be defined."""

        ordered = [self.decay, self.electromagnetic, self.radioactive_decay]
        return [module for module in ordered if module is not None] + list(self.hadronic)

    def module_names(self) -> list[str]:
        return [module.name for module in self.particle_order()]


@dataclass(frozen=True, slots=True)
class EnergyWindow:
    """Energy range (keV) bounding the production cut tables."""

    minimum: float
    maximum: float


@dataclass(frozen=True, slots=True)
class CutTable:
    """Production cut per species, lengths in millimetres."""

    default: float
    gamma: float
    electron: float
    positron: float
    muon: float
    neutron: float
    energy_window: EnergyWindow

    def species_cuts(self) -> list[tuple[Species, float]]:
        """Per-species overrides in the order they are applied."""

        return [
            (Species.GAMMA, self.gamma),
            (Species.ELECTRON, self.electron),
            (Species.POSITRON, self.positron),
            (Species.MUON_PLUS, self.muon),
            (Species.MUON_MINUS, self.muon),
            (Species.NEUTRON, self.neutron),
        ]


@dataclass(frozen=True, slots=True)
class IonIdentity:
    """Ground-state ion identified by atomic and mass number."""

    z: int
    a: int

    @property
    def name(self) -> str:
        return ion_name(self.z, self.a)

    def __str__(self) -> str:
        return self.name


ParticleMatcher = Species | IonIdentity


@dataclass(frozen=True, slots=True)
class StepLimiterRule:
    """Attach the limiter ``tag`` to particles matched by ``matcher``."""

    matcher: ParticleMatcher
    tag: str

    @property
    def is_ion(self) -> bool:
        return isinstance(self.matcher, IonIdentity)


@dataclass(frozen=True, slots=True)
class StepLimiterPlan:
    """Ordered step-limiter rules: fixed species first, then ions."""

    rules: tuple[StepLimiterRule, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[StepLimiterRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def fixed_rules(self) -> tuple[StepLimiterRule, ...]:
        return tuple(rule for rule in self.rules if not rule.is_ion)

    @property
    def ion_rules(self) -> tuple[StepLimiterRule, ...]:
        return tuple(rule for rule in self.rules if rule.is_ion)


@dataclass(frozen=True, slots=True)
class ApplyResult:
    """Outcome of driving the engine through both construction phases."""

    success: bool
    attached_limiters: tuple[StepLimiterRule, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
