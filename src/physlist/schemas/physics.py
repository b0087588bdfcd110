"""Declarative input schema for physics-list configurations."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from physlist.domain.defaults import DEFAULT_PHYSICS
from physlist.domain.enums import VerboseLevel
from physlist.domain.models import RadioactiveDecayOptions
from physlist.domain.source import ConfigSource, CutOverrides, ModuleSpec, parse_bool


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ModuleSpecSchema(_Schema):
    name: str = Field(..., min_length=1, description="Canonical physics module name")
    options: dict[str, str] = Field(default_factory=dict, description="Module-scoped options")

    @field_validator("options", mode="before")
    @classmethod
    def _stringify_options(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                str(key): (str(item).lower() if isinstance(item, bool) else str(item))
                for key, item in value.items()
            }
        return value


class CutSettings(_Schema):
    default: float | None = Field(None, description="Global cut override (mm)")
    gamma: float | None = Field(None, description="Gamma cut (mm)")
    electron: float | None = Field(None, description="Electron cut (mm)")
    positron: float | None = Field(None, description="Positron cut (mm)")
    muon: float | None = Field(None, description="Cut for mu+ and mu- (mm)")
    neutron: float | None = Field(None, description="Neutron cut (mm)")


class EnergyWindowSettings(_Schema):
    minimum: float = Field(
        default=DEFAULT_PHYSICS.cuts.minimum_energy_kev,
        alias="min",
        description="Lower production cut energy (keV)",
    )
    maximum: float = Field(
        default=DEFAULT_PHYSICS.cuts.maximum_energy_kev,
        alias="max",
        description="Upper production cut energy (keV)",
    )


class RadioactiveDecaySettings(_Schema):
    internal_conversion: bool | None = None
    atomic_rearrangement: bool | None = None


class PhysicsConfig(_Schema):
    """Top-level physics-list description."""

    modules: list[ModuleSpecSchema] = Field(default_factory=list)
    cuts: CutSettings = Field(default_factory=CutSettings)
    cut_energy_window: EnergyWindowSettings = Field(default_factory=EnergyWindowSettings)
    ion_step_names: list[str] = Field(default_factory=list)
    radioactive_decay: RadioactiveDecaySettings = Field(default_factory=RadioactiveDecaySettings)
    verbose_level: VerboseLevel = VerboseLevel.ESSENTIAL

    @field_validator("verbose_level", mode="before")
    @classmethod
    def _parse_verbose_level(cls, value: Any) -> Any:
        if isinstance(value, str | int):
            return VerboseLevel.parse(value)
        return value

    def to_source(self) -> ConfigSource:
        """Freeze this configuration into a ``ConfigSource``."""

        modules = tuple(ModuleSpec(name=spec.name, options=dict(spec.options)) for spec in self.modules)
        cuts = CutOverrides(**self.cuts.model_dump())
        source = ConfigSource(
            modules=modules,
            cuts=cuts,
            energy_window=(self.cut_energy_window.minimum, self.cut_energy_window.maximum),
            ion_step_names=tuple(self.ion_step_names),
            verbose_level=self.verbose_level,
        )
        return _with_radioactive_decay(source, self.radioactive_decay)


def _with_radioactive_decay(
    source: ConfigSource, settings: RadioactiveDecaySettings
) -> ConfigSource:
    """Fill unset radioactive-decay flags from the options-holder module."""

    rules = DEFAULT_PHYSICS.radioactive_decay
    internal_conversion = settings.internal_conversion
    if internal_conversion is None:
        internal_conversion = parse_bool(
            source.option_value(rules.options_module, rules.internal_conversion_key)
        )
    atomic_rearrangement = settings.atomic_rearrangement
    if atomic_rearrangement is None:
        atomic_rearrangement = parse_bool(
            source.option_value(rules.options_module, rules.atomic_rearrangement_key)
        )
    return replace(
        source,
        radioactive_decay=RadioactiveDecayOptions(
            internal_conversion=internal_conversion,
            atomic_rearrangement=atomic_rearrangement,
        ),
    )


def parse_config(data: dict[str, Any] | PhysicsConfig) -> ConfigSource:
    """Validate a mapping (or an existing model) and return its ``ConfigSource``."""

    config = data if isinstance(data, PhysicsConfig) else PhysicsConfig.model_validate(data)
    return config.to_source()


def load_config_file(path: Path) -> ConfigSource:
    """Read a JSON physics configuration from disk."""

    config = PhysicsConfig.model_validate_json(path.read_bytes())
    return config.to_source()
