"""Runtime primitives backing the physlist HTTP API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from physlist.config import Settings, get_settings
from physlist.domain.models import Diagnostic
from physlist.engine import RecordingEngine
from physlist.factory import create_setup_service
from physlist.repository import JsonPhysicsConfigRepository
from physlist.schemas.physics import PhysicsConfig
from physlist.services.setup_service import PhysicsSetup

logger = logging.getLogger(__name__)


def diagnostic_payload(item: Diagnostic) -> dict[str, str]:
    return {"code": item.code.value, "message": item.message, "level": item.level.name.lower()}


def summarize_setup(setup: PhysicsSetup) -> dict[str, Any]:
    """Plain-data view of a resolved setup for API and CLI output."""

    assembly = setup.assembly
    cuts = setup.cut_table
    return {
        "modules": assembly.module_names(),
        "decay": assembly.decay.name if assembly.decay else None,
        "radioactive_decay": assembly.radioactive_decay.name if assembly.radioactive_decay else None,
        "electromagnetic": assembly.electromagnetic_name,
        "hadronic": [module.name for module in assembly.hadronic],
        "cuts": {
            "default": cuts.default,
            **{species.value: length for species, length in cuts.species_cuts()},
        },
        "energy_window": {
            "min": cuts.energy_window.minimum,
            "max": cuts.energy_window.maximum,
        },
        "step_limiters": [
            {"particle": str(rule.matcher), "tag": rule.tag} for rule in setup.plan
        ],
        "diagnostics": [diagnostic_payload(item) for item in setup.diagnostics],
    }


@dataclass
class ApiState:
    """Application-wide dependencies shared by the request handlers."""

    settings: Settings = field(default_factory=get_settings)
    repository: JsonPhysicsConfigRepository = field(init=False)

    def __post_init__(self) -> None:
        self.repository = JsonPhysicsConfigRepository(self.settings.data_dir)

    def resolve(self, config: PhysicsConfig, *, apply: bool = False) -> dict[str, Any]:
        """Resolve ``config``; with ``apply`` also dry-run it on a recording engine."""

        engine = RecordingEngine()
        service = create_setup_service(engine)
        setup = service.build(config.to_source())
        summary = summarize_setup(setup)
        summary["transcript"] = []
        if apply:
            result = service.executor.apply(setup.assembly, setup.cut_table, setup.plan)
            summary["transcript"] = engine.transcript()
            summary["diagnostics"] += [diagnostic_payload(item) for item in result.diagnostics]
        return summary

    async def shutdown(self) -> None:
        logger.debug("API state released")


def build_state() -> ApiState:
    return ApiState()
