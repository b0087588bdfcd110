"""Assembly Service for physlist.

This module drives the external engine through the two construction phases
of a physics list: particle definitions first, then processes, step
limiters and production cuts.  It only consumes artifacts that were fully
resolved beforehand, so a configuration error can never leave the engine
half configured.
"""

from __future__ import annotations

import logging

from physlist.domain.defaults import DEFAULT_PHYSICS, PhysicsDefaults
from physlist.domain.enums import DiagnosticCode, EmOption, VerboseLevel
from physlist.domain.models import (
    ApplyResult,
    CutTable,
    Diagnostic,
    IonIdentity,
    PhysicsAssembly,
    PhysicsModule,
    StepLimiterPlan,
    StepLimiterRule,
)
from physlist.domain.source import parse_bool
from physlist.interfaces import IPhysicsEngine, IPhysicsModule

logger = logging.getLogger(__name__)


class AssemblyExecutor:
    """Apply a resolved physics list to an engine."""

    def __init__(self, engine: IPhysicsEngine, defaults: PhysicsDefaults = DEFAULT_PHYSICS):
        self.engine = engine
        self.defaults = defaults

    def apply(
        self,
        assembly: PhysicsAssembly,
        cut_table: CutTable,
        plan: StepLimiterPlan,
    ) -> ApplyResult:
        """Run both construction phases and apply limiters and cuts.

        Args:
            assembly: Validated module selection
            cut_table: Production cuts and energy window
            plan: Step-limiter rules in application order

        Returns:
            ApplyResult with the limiters actually attached and any
            diagnostics recorded while configuring modules
        """
        diagnostics: list[Diagnostic] = []

        self._prepare(cut_table)
        self.construct_particles(assembly)
        diagnostics.extend(self.construct_processes(assembly))
        attached = self.attach_step_limiters(plan, assembly.verbose_level)
        self.apply_cuts(cut_table)

        for diagnostic in diagnostics:
            if assembly.verbose_level >= diagnostic.level:
                logger.warning("PhysicsList %s", diagnostic.message)

        return ApplyResult(success=True, attached_limiters=attached, diagnostics=tuple(diagnostics))

    def _prepare(self, cut_table: CutTable) -> None:
        for unit in self.defaults.time_units:
            self.engine.define_unit(unit.name, unit.symbol, unit.category, unit.seconds)
        window = cut_table.energy_window
        self.engine.set_energy_range(window.minimum, window.maximum)

    def construct_particles(self, assembly: PhysicsAssembly) -> None:
        """Phase 1: decay, EM, radioactive decay, then hadronic modules."""

        self.engine.construct_pseudo_particles()
        modules: list[IPhysicsModule] = list(assembly.particle_order())
        for module in modules:
            module.construct_particles(self.engine)

    def construct_processes(self, assembly: PhysicsAssembly) -> list[Diagnostic]:
        """Phase 2: transportation, EM, decay, radioactive decay, hadronic."""

        diagnostics: list[Diagnostic] = []
        self.engine.add_transportation()

        if assembly.electromagnetic is not None:
            assembly.electromagnetic.construct_processes(self.engine)
            self.engine.configure_em_models(assembly.electromagnetic.name)
            diagnostics.extend(self._apply_em_options(assembly.electromagnetic))

        if assembly.decay is not None:
            assembly.decay.construct_processes(self.engine)

        if assembly.radioactive_decay is not None:
            assembly.radioactive_decay.construct_processes(self.engine)
            diagnostics.extend(self._configure_radioactive_decay(assembly))

        for module in assembly.hadronic:
            module.construct_processes(self.engine)

        return diagnostics

    def _apply_em_options(self, module: PhysicsModule) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for option in EmOption:
            default = self.defaults.em_options.value_for(option)
            raw = module.option(option.value)
            enabled = parse_bool(raw)
            if enabled is None:
                enabled = default
                if raw is None:
                    diagnostics.append(
                        Diagnostic(
                            code=DiagnosticCode.MISSING_MODULE_OPTION,
                            message=(
                                f"'{module.name}' option '{option.value}' not defined, "
                                f"using {str(default).lower()}"
                            ),
                            level=VerboseLevel.INFO,
                            subject=option.value,
                        )
                    )
                else:
                    diagnostics.append(
                        Diagnostic(
                            code=DiagnosticCode.INVALID_MODULE_OPTION,
                            message=(
                                f"'{module.name}' option '{option.value}' has non-boolean "
                                f"value '{raw}', using {str(default).lower()}"
                            ),
                            level=VerboseLevel.ESSENTIAL,
                            subject=option.value,
                        )
                    )
            logger.info(
                "Setting EM option '%s' to '%s' for physics list '%s'",
                option.value,
                str(enabled).lower(),
                module.name,
            )
            self.engine.set_em_option(option.value, enabled)
        return diagnostics

    def _configure_radioactive_decay(self, assembly: PhysicsAssembly) -> list[Diagnostic]:
        rules = self.defaults.radioactive_decay
        options = assembly.radioactive_decay_options
        self.engine.configure_radioactive_decay(
            time_threshold_ns=rules.time_threshold_ns,
            internal_conversion=options.internal_conversion,
            atomic_rearrangement=options.atomic_rearrangement,
        )

        missing = []
        if options.internal_conversion is None:
            missing.append(rules.internal_conversion_key)
        if options.atomic_rearrangement is None:
            missing.append(rules.atomic_rearrangement_key)
        return [
            Diagnostic(
                code=DiagnosticCode.MISSING_MODULE_OPTION,
                message=f"'{rules.options_module}' option '{key}' not defined",
                level=VerboseLevel.ESSENTIAL,
                subject=key,
            )
            for key in missing
        ]

    def attach_step_limiters(
        self, plan: StepLimiterPlan, verbose_level: VerboseLevel = VerboseLevel.ESSENTIAL
    ) -> tuple[StepLimiterRule, ...]:
        """Attach every rule whose particle exists, in plan order."""

        attached: list[StepLimiterRule] = []
        for rule in plan:
            if not isinstance(rule.matcher, IonIdentity) and not self.engine.particle_exists(
                rule.matcher
            ):
                if verbose_level >= VerboseLevel.DEBUG:
                    logger.debug("Skipping step limiter '%s': no particle '%s'", rule.tag, rule.matcher)
                continue
            self.engine.attach_step_limiter(rule.matcher, rule.tag)
            attached.append(rule)
        return tuple(attached)

    def apply_cuts(self, cut_table: CutTable) -> None:
        """Default cut first, then every species override."""

        self.engine.set_default_cut(cut_table.default)
        for species, length in cut_table.species_cuts():
            self.engine.set_cut(species.value, length)
