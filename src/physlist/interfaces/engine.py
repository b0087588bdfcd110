"""Physics Engine Protocol Interface.

This module defines the narrow surface of the external simulation engine
that the assembly executor drives.  The engine owns particle definitions,
process execution and production-cut tables; physlist only issues calls.
"""

from typing import Protocol

from physlist.domain.models import ParticleMatcher


class IPhysicsEngine(Protocol):
    """Protocol defining the engine operations used during assembly."""

    def define_unit(self, name: str, symbol: str, category: str, value: float) -> None:
        """Register an additional unit (value expressed in base units)."""
        ...

    def set_energy_range(self, minimum_kev: float, maximum_kev: float) -> None:
        """Bound the energies covered by the production-cut tables."""
        ...

    def construct_pseudo_particles(self) -> None:
        """Define engine pseudo-particles (e.g. the geantino)."""
        ...

    def construct_particles(self, module_name: str) -> None:
        """Run the particle-construction hook of a physics module."""
        ...

    def construct_processes(self, module_name: str) -> None:
        """Run the process-construction hook of a physics module."""
        ...

    def add_transportation(self) -> None:
        """Attach transportation to every defined particle."""
        ...

    def configure_em_models(self, module_name: str) -> None:
        """Add the extra EM models configured for ``module_name``."""
        ...

    def set_em_option(self, option: str, enabled: bool) -> None:
        """Toggle an EM option such as ``fluo``, ``auger`` or ``pixe``."""
        ...

    def configure_radioactive_decay(
        self,
        *,
        time_threshold_ns: float,
        internal_conversion: bool | None,
        atomic_rearrangement: bool | None,
    ) -> None:
        """Configure the radioactive decay process; ``None`` keeps engine defaults."""
        ...

    def particle_exists(self, name: str) -> bool:
        """Return whether the particle ``name`` is defined."""
        ...

    def attach_step_limiter(self, matcher: ParticleMatcher, tag: str) -> None:
        """Attach a step limiter named ``tag`` to the matched particle."""
        ...

    def set_default_cut(self, length_mm: float) -> None:
        """Set the production cut used for every species."""
        ...

    def set_cut(self, species: str, length_mm: float) -> None:
        """Override the production cut of a single species."""
        ...
