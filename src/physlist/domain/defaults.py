"""Declarative constants for the physics-list domain layer."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import EmOption


@dataclass(frozen=True, slots=True)
class CutDefaults:
    """Production cut constants (lengths in mm, energies in keV)."""

    default_length_mm: float = 0.1
    minimum_energy_kev: float = 1.0
    maximum_energy_kev: float = 1_000_000.0


@dataclass(frozen=True, slots=True)
class IonSweepDefaults:
    """Bounds of the closed ion enumeration used for step limiting."""

    z_min: int = 1
    z_max: int = 40
    a_min_factor: int = 2  # A >= 2Z
    a_max_factor: int = 3  # A <= 3Z
    limiter_tag: str = "ionStep"


@dataclass(frozen=True, slots=True)
class EmOptionDefaults:
    """Default value of each electromagnetic option when unset."""

    fluorescence: bool = True
    auger: bool = True
    pixe: bool = False

    def value_for(self, option: EmOption) -> bool:
        return {
            EmOption.FLUORESCENCE: self.fluorescence,
            EmOption.AUGER: self.auger,
            EmOption.PIXE: self.pixe,
        }[option]


@dataclass(frozen=True, slots=True)
class RadioactiveDecayDefaults:
    """Process-level radioactive decay configuration."""

    options_module: str = "G4RadioactiveDecay"
    internal_conversion_key: str = "ICM"
    atomic_rearrangement_key: str = "ARM"
    time_threshold_ns: float = 1.0


@dataclass(frozen=True, slots=True)
class TimeUnit:
    """Extra time unit registered with the engine (value in seconds)."""

    name: str
    symbol: str
    seconds: float
    category: str = "Time"


MINUTE = 60.0
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

TIME_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit("minute", "min", MINUTE),
    TimeUnit("hour", "h", HOUR),
    TimeUnit("day", "d", DAY),
    TimeUnit("year", "y", YEAR),
)


@dataclass(frozen=True, slots=True)
class PhysicsDefaults:
    """Top-level container for all physics-list constants."""

    cuts: CutDefaults = CutDefaults()
    ion_sweep: IonSweepDefaults = IonSweepDefaults()
    em_options: EmOptionDefaults = EmOptionDefaults()
    radioactive_decay: RadioactiveDecayDefaults = RadioactiveDecayDefaults()
    time_units: tuple[TimeUnit, ...] = TIME_UNITS


DEFAULT_PHYSICS = PhysicsDefaults()
