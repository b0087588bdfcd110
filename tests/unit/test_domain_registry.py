"""Unit tests for the physics module registry."""

from __future__ import annotations

import pytest

from physlist.domain.enums import ModuleCategory
from physlist.domain.registry import DEFAULT_REGISTRY, ModuleRegistry
from physlist.domain.source import ModuleSpec


def test_lookup_known_module_returns_category():
    entry = DEFAULT_REGISTRY.lookup("G4EmLivermorePhysics")
    assert entry is not None
    assert entry.category is ModuleCategory.ELECTROMAGNETIC


def test_lookup_unknown_module_returns_none():
    assert DEFAULT_REGISTRY.lookup("G4EmLivermore") is None
    assert DEFAULT_REGISTRY.lookup("g4emlivermorephysics") is None
    assert DEFAULT_REGISTRY.lookup("NotAModule") is None


def test_options_holder_is_not_a_module():
    assert DEFAULT_REGISTRY.lookup("G4RadioactiveDecay") is None


def test_factory_builds_tagged_module_with_options():
    entry = DEFAULT_REGISTRY.lookup("G4HadronElasticPhysicsHP")
    module = entry.create(ModuleSpec(name="G4HadronElasticPhysicsHP", options={"x": "1"}))
    assert module.name == "G4HadronElasticPhysicsHP"
    assert module.category is ModuleCategory.HADRONIC
    assert module.option("x") == "1"
    assert module.option("missing", "fallback") == "fallback"


def test_module_options_are_read_only():
    declared = {"fluo": "true"}
    spec = ModuleSpec(name="G4EmLivermorePhysics", options=declared)
    module = DEFAULT_REGISTRY.lookup(spec.name).create(spec)
    declared["fluo"] = "false"

    assert spec.options == {"fluo": "true"}
    assert module.option("fluo") == "true"
    with pytest.raises(TypeError):
        spec.options["pixe"] = "true"  # type: ignore[index]
    with pytest.raises(TypeError):
        module.options["fluo"] = "false"  # type: ignore[index]


def test_registered_names_by_category():
    em = DEFAULT_REGISTRY.registered_names(ModuleCategory.ELECTROMAGNETIC)
    assert em == [
        "G4EmLivermorePhysics",
        "G4EmPenelopePhysics",
        "G4EmStandardPhysics_option3",
        "G4EmStandardPhysics_option4",
    ]
    assert DEFAULT_REGISTRY.registered_names(ModuleCategory.DECAY) == ["G4DecayPhysics"]
    assert len(DEFAULT_REGISTRY.registered_names()) == 11


def test_custom_registry_from_categories():
    registry = ModuleRegistry.from_categories({"MyEm": ModuleCategory.ELECTROMAGNETIC})
    assert registry.lookup("MyEm").category is ModuleCategory.ELECTROMAGNETIC
    assert registry.lookup("G4EmLivermorePhysics") is None
