"""Tests for the JSON physics configuration repository."""

from __future__ import annotations

import pytest

from physlist.repository import JsonPhysicsConfigRepository
from physlist.schemas import PhysicsConfig


def _config() -> PhysicsConfig:
    return PhysicsConfig.model_validate(
        {
            "modules": [{"name": "G4EmLivermorePhysics", "options": {"pixe": "true"}}],
            "cuts": {"gamma": 0.05},
            "ionStepNames": ["C14"],
        }
    )


def test_save_and_load_config(tmp_path):
    repo = JsonPhysicsConfigRepository(tmp_path)
    config = _config()

    path = repo.save("xenon_tpc", config)
    assert path.exists()
    assert "cutEnergyWindow" in path.read_text()

    loaded = repo.load("xenon_tpc")
    assert loaded == config


def test_list_and_delete(tmp_path):
    repo = JsonPhysicsConfigRepository(tmp_path)
    repo.save("b", _config())
    repo.save("a", _config())

    assert repo.list_names() == ["a", "b"]

    repo.delete("a")
    assert repo.list_names() == ["b"]
    repo.delete("missing")


def test_load_missing_raises(tmp_path):
    repo = JsonPhysicsConfigRepository(tmp_path)
    with pytest.raises(FileNotFoundError):
        repo.load("nothing")


@pytest.mark.parametrize("name", ["../escape", "", ".hidden", "a/b", "x.json"])
def test_invalid_names_rejected(tmp_path, name):
    repo = JsonPhysicsConfigRepository(tmp_path)
    with pytest.raises(ValueError, match="Invalid configuration name"):
        repo.save(name, _config())
