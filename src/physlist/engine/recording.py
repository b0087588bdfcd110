"""In-memory engine that records every call made by the executor.

``RecordingEngine`` implements ``IPhysicsEngine`` without any transport
code.  It is used for dry runs from the CLI and the HTTP API: the recorded
command log shows exactly what a real engine binding would receive.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from physlist.domain.enums import Species
from physlist.domain.models import IonIdentity, ParticleMatcher

DEFAULT_PARTICLES: frozenset[str] = frozenset(
    {
        Species.GAMMA,
        Species.ELECTRON,
        Species.POSITRON,
        Species.MUON_MINUS,
        Species.MUON_PLUS,
        Species.NEUTRON,
        "proton",
        "alpha",
    }
)


@dataclass(frozen=True, slots=True)
class EngineCall:
    """One recorded engine operation."""

    operation: str
    arguments: tuple[object, ...] = ()

    def render(self) -> str:
        args = " ".join(str(arg) for arg in self.arguments)
        return f"{self.operation} {args}".rstrip()


@dataclass
class RecordingEngine:
    """Engine stand-in keeping a log of calls and the resulting state."""

    particles: set[str] = field(default_factory=lambda: {str(name) for name in DEFAULT_PARTICLES})
    calls: list[EngineCall] = field(default_factory=list)
    units: dict[str, float] = field(default_factory=dict)
    em_options: dict[str, bool] = field(default_factory=dict)
    step_limiters: dict[str, list[str]] = field(default_factory=dict)
    cuts: dict[str, float] = field(default_factory=dict)
    default_cut: float | None = None
    energy_range: tuple[float, float] | None = None

    def _record(self, operation: str, *arguments: object) -> None:
        self.calls.append(EngineCall(operation, arguments))

    def operations(self) -> list[str]:
        return [call.operation for call in self.calls]

    def transcript(self) -> list[str]:
        return [call.render() for call in self.calls]

    def define_unit(self, name: str, symbol: str, category: str, value: float) -> None:
        self.units[name] = value
        self._record("define_unit", name, symbol, category, value)

    def set_energy_range(self, minimum_kev: float, maximum_kev: float) -> None:
        self.energy_range = (minimum_kev, maximum_kev)
        self._record("set_energy_range", minimum_kev, maximum_kev)

    def construct_pseudo_particles(self) -> None:
        self.particles.add(Species.GEANTINO.value)
        self._record("construct_pseudo_particles")

    def construct_particles(self, module_name: str) -> None:
        self._record("construct_particles", module_name)

    def construct_processes(self, module_name: str) -> None:
        self._record("construct_processes", module_name)

    def add_transportation(self) -> None:
        self._record("add_transportation")

    def configure_em_models(self, module_name: str) -> None:
        self._record("configure_em_models", module_name)

    def set_em_option(self, option: str, enabled: bool) -> None:
        self.em_options[option] = enabled
        self._record("set_em_option", option, str(enabled).lower())

    def configure_radioactive_decay(
        self,
        *,
        time_threshold_ns: float,
        internal_conversion: bool | None,
        atomic_rearrangement: bool | None,
    ) -> None:
        self._record(
            "configure_radioactive_decay",
            time_threshold_ns,
            internal_conversion,
            atomic_rearrangement,
        )

    def particle_exists(self, name: str) -> bool:
        return name in self.particles

    def attach_step_limiter(self, matcher: ParticleMatcher, tag: str) -> None:
        key = matcher.name if isinstance(matcher, IonIdentity) else str(matcher)
        self.step_limiters.setdefault(key, []).append(tag)
        self._record("attach_step_limiter", key, tag)

    def set_default_cut(self, length_mm: float) -> None:
        self.default_cut = length_mm
        self._record("set_default_cut", length_mm)

    def set_cut(self, species: str, length_mm: float) -> None:
        self.cuts[species] = length_mm
        self._record("set_cut", species, length_mm)
