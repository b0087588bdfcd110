"""Step-limiter planning for charged leptons and configured ions."""

from __future__ import annotations

import logging

from .defaults import DEFAULT_PHYSICS, IonSweepDefaults
from .enums import DiagnosticCode, Species, VerboseLevel
from .ions import ion_name, ion_sweep
from .models import Diagnostic, IonIdentity, PhysicsAssembly, StepLimiterPlan, StepLimiterRule
from .source import ConfigSource

logger = logging.getLogger(__name__)

FIXED_LIMITERS: tuple[tuple[Species, str], ...] = (
    (Species.ELECTRON, "e-Step"),
    (Species.POSITRON, "e+Step"),
    (Species.MUON_MINUS, "mu-Step"),
    (Species.MUON_PLUS, "mu+Step"),
)


def plan_step_limiters(
    source: ConfigSource,
    assembly: PhysicsAssembly,
    bounds: IonSweepDefaults = DEFAULT_PHYSICS.ion_sweep,
) -> StepLimiterPlan:
    """Return fixed lepton rules followed by rules for every matching ion."""

    rules = [StepLimiterRule(matcher=species, tag=tag) for species, tag in FIXED_LIMITERS]

    wanted = set(source.ion_step_names)
    matched: set[str] = set()
    for z, a in ion_sweep(bounds):
        name = ion_name(z, a)
        if name in wanted:
            logger.info("Found ion: %s Z %d A %d", name, z, a)
            matched.add(name)
            rules.append(StepLimiterRule(matcher=IonIdentity(z, a), tag=bounds.limiter_tag))

    diagnostics: list[Diagnostic] = []
    for name in source.ion_step_names:
        if name in matched:
            continue
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNMATCHED_ION,
            message=f"Ion '{name}' is outside the step-limiter sweep",
            level=VerboseLevel.INFO,
            subject=name,
        )
        diagnostics.append(diagnostic)
        if assembly.verbose_level >= diagnostic.level:
            logger.warning(diagnostic.message)

    return StepLimiterPlan(rules=tuple(rules), diagnostics=tuple(diagnostics))
