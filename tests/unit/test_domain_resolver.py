"""Unit tests for physics module resolution."""

from __future__ import annotations

import itertools
import logging

import pytest

from physlist.domain.enums import DiagnosticCode, ModuleCategory, VerboseLevel
from physlist.domain.errors import ExclusivityViolation
from physlist.domain.resolver import resolve_physics
from physlist.domain.source import ConfigSource, ModuleSpec

EM_NAMES = [
    "G4EmLivermorePhysics",
    "G4EmPenelopePhysics",
    "G4EmStandardPhysics_option3",
    "G4EmStandardPhysics_option4",
]


def _source(*names: str, verbose: VerboseLevel = VerboseLevel.ESSENTIAL) -> ConfigSource:
    return ConfigSource(
        modules=tuple(ModuleSpec(name=name) for name in names),
        verbose_level=verbose,
    )


def _codes(assembly) -> list[DiagnosticCode]:
    return [diagnostic.code for diagnostic in assembly.diagnostics]


def test_zero_em_modules_is_a_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assembly = resolve_physics(_source("G4DecayPhysics", "G4HadronElasticPhysicsHP"))

    assert assembly.electromagnetic is None
    assert assembly.electromagnetic_name is None
    assert DiagnosticCode.NO_EM_PHYSICS in _codes(assembly)
    assert "No EM physics list has been enabled" in caplog.text


def test_zero_em_warning_is_gated_by_verbosity(caplog):
    with caplog.at_level(logging.WARNING):
        assembly = resolve_physics(_source("G4DecayPhysics", verbose=VerboseLevel.SILENT))

    assert DiagnosticCode.NO_EM_PHYSICS in _codes(assembly)
    assert "No EM physics" not in caplog.text


@pytest.mark.parametrize("names", list(itertools.permutations(EM_NAMES[:3], 2)))
def test_two_em_modules_raise(names):
    with pytest.raises(ExclusivityViolation) as excinfo:
        resolve_physics(_source("G4DecayPhysics", *names))

    assert excinfo.value.names == tuple(names)
    for name in names:
        assert name in str(excinfo.value)


def test_duplicate_em_module_counts_twice():
    with pytest.raises(ExclusivityViolation, match="More than 1 EM"):
        resolve_physics(_source("G4EmLivermorePhysics", "G4EmLivermorePhysics"))


def test_all_em_modules_listed_in_violation():
    with pytest.raises(ExclusivityViolation) as excinfo:
        resolve_physics(_source(*EM_NAMES))
    assert excinfo.value.names == tuple(EM_NAMES)


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_single_em_module_independent_of_position(position):
    names = ["G4DecayPhysics", "G4RadioactiveDecayPhysics", "G4NeutronTrackingCut"]
    names.insert(position, "G4EmPenelopePhysics")

    assembly = resolve_physics(_source(*names))

    assert assembly.electromagnetic is not None
    assert assembly.electromagnetic.category is ModuleCategory.ELECTROMAGNETIC
    assert assembly.electromagnetic_name == "G4EmPenelopePhysics"
    assert assembly.electromagnetic_matches == ("G4EmPenelopePhysics",)
    assert DiagnosticCode.NO_EM_PHYSICS not in _codes(assembly)


def test_hadronic_duplicates_are_preserved_in_order():
    assembly = resolve_physics(
        _source(
            "G4HadronPhysicsQGSP_BIC_HP",
            "G4EmLivermorePhysics",
            "G4IonBinaryCascadePhysics",
            "G4HadronPhysicsQGSP_BIC_HP",
        )
    )
    assert [module.name for module in assembly.hadronic] == [
        "G4HadronPhysicsQGSP_BIC_HP",
        "G4IonBinaryCascadePhysics",
        "G4HadronPhysicsQGSP_BIC_HP",
    ]


def test_duplicate_decay_keeps_first_declaration():
    source = ConfigSource(
        modules=(
            ModuleSpec(name="G4DecayPhysics", options={"tag": "first"}),
            ModuleSpec(name="G4DecayPhysics", options={"tag": "second"}),
            ModuleSpec(name="G4RadioactiveDecayPhysics", options={"tag": "first"}),
            ModuleSpec(name="G4RadioactiveDecayPhysics", options={"tag": "second"}),
        )
    )
    assembly = resolve_physics(source)
    assert assembly.decay.option("tag") == "first"
    assert assembly.radioactive_decay.option("tag") == "first"


def test_unknown_names_are_ignored():
    assembly = resolve_physics(_source("G4EmLivermorePhysics", "G4SomethingElse", "G4RadioactiveDecay"))
    assert assembly.module_names() == ["G4EmLivermorePhysics"]


def test_missing_decay_modules_recorded_at_debug_level(caplog):
    with caplog.at_level(logging.WARNING):
        assembly = resolve_physics(_source("G4EmLivermorePhysics"))

    not_enabled = [d for d in assembly.diagnostics if d.code is DiagnosticCode.MODULE_NOT_ENABLED]
    assert {d.subject for d in not_enabled} == {"G4DecayPhysics", "G4RadioactiveDecayPhysics"}
    assert all(d.level is VerboseLevel.DEBUG for d in not_enabled)
    assert "is not enabled" not in caplog.text


def test_resolution_is_idempotent():
    source = _source(
        "G4DecayPhysics",
        "G4EmStandardPhysics_option4",
        "G4RadioactiveDecayPhysics",
        "G4EmExtraPhysics",
    )
    assert resolve_physics(source) == resolve_physics(source)


def test_particle_order_is_decay_em_radioactive_then_hadronic():
    assembly = resolve_physics(
        _source(
            "G4NeutronTrackingCut",
            "G4RadioactiveDecayPhysics",
            "G4EmLivermorePhysics",
            "G4DecayPhysics",
        )
    )
    assert assembly.module_names() == [
        "G4DecayPhysics",
        "G4EmLivermorePhysics",
        "G4RadioactiveDecayPhysics",
        "G4NeutronTrackingCut",
    ]
