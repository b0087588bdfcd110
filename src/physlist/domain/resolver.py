"""Select and validate the physics modules requested by a configuration."""

from __future__ import annotations

import logging

from .enums import DiagnosticCode, ModuleCategory, VerboseLevel
from .errors import ExclusivityViolation
from .models import Diagnostic, PhysicsAssembly, PhysicsModule
from .registry import DEFAULT_REGISTRY, ModuleRegistry
from .source import ConfigSource

logger = logging.getLogger(__name__)


def resolve_physics(
    source: ConfigSource,
    registry: ModuleRegistry = DEFAULT_REGISTRY,
) -> PhysicsAssembly:
    """Build the ``PhysicsAssembly`` for ``source``.

    Modules are visited in declaration order.  Decay and radioactive decay
    keep their first declaration, every hadronic declaration is kept, and
    at most one electromagnetic module may be requested.

    Raises:
        ExclusivityViolation: two or more electromagnetic modules were declared.
    """

    decay: PhysicsModule | None = None
    radioactive_decay: PhysicsModule | None = None
    electromagnetic: PhysicsModule | None = None
    em_matches: list[str] = []
    hadronic: list[PhysicsModule] = []

    for spec in source.modules:
        entry = registry.lookup(spec.name)
        if entry is None:
            continue

        if entry.category is ModuleCategory.DECAY:
            if decay is None:
                decay = entry.create(spec)
        elif entry.category is ModuleCategory.RADIOACTIVE_DECAY:
            if radioactive_decay is None:
                radioactive_decay = entry.create(spec)
        elif entry.category is ModuleCategory.ELECTROMAGNETIC:
            em_matches.append(spec.name)
            if electromagnetic is None:
                electromagnetic = entry.create(spec)
        else:
            hadronic.append(entry.create(spec))

    if len(em_matches) > 1:
        raise ExclusivityViolation(em_matches)

    diagnostics: list[Diagnostic] = []
    if decay is None:
        diagnostics.append(_not_enabled(registry, ModuleCategory.DECAY))
    if radioactive_decay is None:
        diagnostics.append(_not_enabled(registry, ModuleCategory.RADIOACTIVE_DECAY))
    if electromagnetic is None:
        diagnostics.append(
            Diagnostic(
                code=DiagnosticCode.NO_EM_PHYSICS,
                message="No EM physics list has been enabled",
                level=VerboseLevel.ESSENTIAL,
            )
        )

    for diagnostic in diagnostics:
        if source.verbose_at_least(diagnostic.level):
            logger.warning("PhysicsList: %s", diagnostic.message)

    logger.info("Number of hadronic physics lists added %d", len(hadronic))

    return PhysicsAssembly(
        decay=decay,
        radioactive_decay=radioactive_decay,
        electromagnetic=electromagnetic,
        electromagnetic_name=electromagnetic.name if electromagnetic else None,
        hadronic=tuple(hadronic),
        electromagnetic_matches=tuple(em_matches),
        radioactive_decay_options=source.radioactive_decay,
        verbose_level=source.verbose_level,
        diagnostics=tuple(diagnostics),
    )


def _not_enabled(registry: ModuleRegistry, category: ModuleCategory) -> Diagnostic:
    names = registry.registered_names(category)
    label = names[0] if len(names) == 1 else category.value
    return Diagnostic(
        code=DiagnosticCode.MODULE_NOT_ENABLED,
        message=f"{label} is not enabled",
        level=VerboseLevel.DEBUG,
        subject=label,
    )
