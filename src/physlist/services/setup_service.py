"""Setup Service for physlist.

Resolution is all-or-nothing: ``build`` produces every artifact before the
executor sees any of them, so a fatal configuration error (e.g. two EM
modules) surfaces before the engine is touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from physlist.domain.cuts import assign_cuts
from physlist.domain.models import ApplyResult, CutTable, Diagnostic, PhysicsAssembly, StepLimiterPlan
from physlist.domain.registry import DEFAULT_REGISTRY, ModuleRegistry
from physlist.domain.resolver import resolve_physics
from physlist.domain.source import ConfigSource
from physlist.domain.step_limits import plan_step_limiters
from physlist.services.assembly_service import AssemblyExecutor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PhysicsSetup:
    """Everything the executor needs, resolved from one ``ConfigSource``."""

    assembly: PhysicsAssembly
    cut_table: CutTable
    plan: StepLimiterPlan

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.assembly.diagnostics + self.plan.diagnostics


class PhysicsSetupService:
    """Service resolving configurations and applying them to an engine."""

    def __init__(self, executor: AssemblyExecutor, registry: ModuleRegistry = DEFAULT_REGISTRY):
        self.executor = executor
        self.registry = registry

    def build(self, source: ConfigSource) -> PhysicsSetup:
        """Resolve modules, cuts and step limiters.

        Raises:
            ExclusivityViolation: more than one EM module was requested
            InvalidCutWindow: the cut energy window is unusable
        """
        assembly = resolve_physics(source, self.registry)
        cut_table = assign_cuts(source)
        plan = plan_step_limiters(source, assembly)
        return PhysicsSetup(assembly=assembly, cut_table=cut_table, plan=plan)

    def run(self, source: ConfigSource) -> ApplyResult:
        """Build the setup and apply it to the executor's engine."""

        setup = self.build(source)
        logger.info(
            "Applying physics list: %s", ", ".join(setup.assembly.module_names()) or "<none>"
        )
        result = self.executor.apply(setup.assembly, setup.cut_table, setup.plan)
        return ApplyResult(
            success=result.success,
            attached_limiters=result.attached_limiters,
            diagnostics=setup.diagnostics + result.diagnostics,
        )
