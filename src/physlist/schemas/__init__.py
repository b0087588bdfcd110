from .physics import (
    CutSettings,
    EnergyWindowSettings,
    ModuleSpecSchema,
    PhysicsConfig,
    RadioactiveDecaySettings,
    load_config_file,
    parse_config,
)

__all__ = [
    "CutSettings",
    "EnergyWindowSettings",
    "ModuleSpecSchema",
    "PhysicsConfig",
    "RadioactiveDecaySettings",
    "load_config_file",
    "parse_config",
]
