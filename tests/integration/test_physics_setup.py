"""End-to-end tests: JSON configuration to engine calls."""

from __future__ import annotations

import json

from physlist.engine import RecordingEngine
from physlist.factory import create_setup_service
from physlist.schemas import load_config_file

GAS_TPC_CONFIG = {
    "verboseLevel": "essential",
    "modules": [
        {
            "name": "G4EmLivermorePhysics",
            "options": {"pixe": "true", "fluo": "true", "auger": "true"},
        },
        {"name": "G4DecayPhysics"},
        {"name": "G4RadioactiveDecayPhysics"},
        {"name": "G4RadioactiveDecay", "options": {"ICM": "true", "ARM": "true"}},
        {"name": "G4HadronElasticPhysicsHP"},
        {"name": "G4IonBinaryCascadePhysics"},
        {"name": "G4HadronPhysicsQGSP_BIC_HP"},
        {"name": "G4NeutronTrackingCut"},
        {"name": "G4EmExtraPhysics"},
    ],
    "cuts": {"gamma": 0.01, "electron": 0.01, "positron": 1.0, "muon": 1.0, "neutron": 1.0},
    "cutEnergyWindow": {"min": 1, "max": 1000000},
    "ionStepNames": ["Ar40", "Xe136", "He4"],
}


def test_gas_tpc_configuration(tmp_path):
    path = tmp_path / "physics.json"
    path.write_text(json.dumps(GAS_TPC_CONFIG))
    engine = RecordingEngine()
    service = create_setup_service(engine)

    source = load_config_file(path)
    setup = service.build(source)
    result = service.run(source)

    assert result.success
    assert setup.assembly.electromagnetic_name == "G4EmLivermorePhysics"
    assert len(setup.assembly.hadronic) == 5

    # Xe (Z=54) lies outside the sweep, so only He4 and Ar40 are limited
    assert [str(rule.matcher) for rule in setup.plan.ion_rules] == ["He4", "Ar40"]
    assert engine.step_limiters["Ar40"] == ["ionStep"]
    assert "Xe136" not in engine.step_limiters
    assert engine.step_limiters["mu-"] == ["mu-Step"]

    assert engine.default_cut == 0.1
    assert engine.cuts == {
        "gamma": 0.01,
        "e-": 0.01,
        "e+": 1.0,
        "mu+": 1.0,
        "mu-": 1.0,
        "neutron": 1.0,
    }
    assert engine.em_options == {"fluo": True, "auger": True, "pixe": True}

    transcript = engine.transcript()
    assert transcript[-7] == "set_default_cut 0.1"
    assert "configure_radioactive_decay 1.0 True True" in transcript
    codes = {d.code.value for d in result.diagnostics}
    assert codes == {"unmatched_ion"}


def test_repeated_resolution_is_structurally_identical(tmp_path):
    path = tmp_path / "physics.json"
    path.write_text(json.dumps(GAS_TPC_CONFIG))
    service = create_setup_service(RecordingEngine())

    first = service.build(load_config_file(path))
    second = service.build(load_config_file(path))

    assert first == second
