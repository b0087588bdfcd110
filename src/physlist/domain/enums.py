"""Enumerations shared by the physics-list domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ModuleCategory(StrEnum):
    """Families a physics module can belong to."""

    DECAY = "decay"
    RADIOACTIVE_DECAY = "radioactive_decay"
    ELECTROMAGNETIC = "electromagnetic"
    HADRONIC = "hadronic"


class VerboseLevel(IntEnum):
    """Output verbosity thresholds, lowest first."""

    SILENT = 0
    ESSENTIAL = 1
    INFO = 2
    DEBUG = 3
    EXTREME = 4

    @classmethod
    def parse(cls, value: str | int | VerboseLevel) -> VerboseLevel:
        """Accept a level by name (any case) or by number."""

        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as exc:
                raise ValueError(f"Unknown verbose level '{value}'") from exc
        return cls(value)


class Species(StrEnum):
    """Particle species with a configurable production cut or step limiter."""

    GAMMA = "gamma"
    ELECTRON = "e-"
    POSITRON = "e+"
    MUON_MINUS = "mu-"
    MUON_PLUS = "mu+"
    NEUTRON = "neutron"
    GEANTINO = "geantino"


class EmOption(StrEnum):
    """Boolean switches applied to the electromagnetic module."""

    FLUORESCENCE = "fluo"
    AUGER = "auger"
    PIXE = "pixe"


class DiagnosticCode(StrEnum):
    """Non-fatal conditions recorded while resolving or applying."""

    NO_EM_PHYSICS = "no_em_physics"
    MODULE_NOT_ENABLED = "module_not_enabled"
    MISSING_MODULE_OPTION = "missing_module_option"
    INVALID_MODULE_OPTION = "invalid_module_option"
    UNMATCHED_ION = "unmatched_ion"
