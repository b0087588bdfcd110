"""Tests for the physlist command line entrypoint."""

from __future__ import annotations

import json

from physlist.cli import EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, EXIT_OK, main


def _write(tmp_path, payload: dict):
    path = tmp_path / "physics.json"
    path.write_text(json.dumps(payload))
    return path


def test_resolve_prints_summary(tmp_path, capsys):
    path = _write(
        tmp_path,
        {
            "modules": [{"name": "G4DecayPhysics"}, {"name": "G4EmLivermorePhysics"}],
            "ionStepNames": ["C14"],
        },
    )

    assert main(["resolve", str(path)]) == EXIT_OK

    summary = json.loads(capsys.readouterr().out)
    assert summary["electromagnetic"] == "G4EmLivermorePhysics"
    assert summary["modules"] == ["G4DecayPhysics", "G4EmLivermorePhysics"]
    assert {"particle": "C14", "tag": "ionStep"} in summary["step_limiters"]
    assert "transcript" not in summary


def test_resolve_with_apply_includes_transcript(tmp_path, capsys):
    path = _write(tmp_path, {"modules": [{"name": "G4EmPenelopePhysics"}]})

    assert main(["resolve", str(path), "--apply"]) == EXIT_OK

    summary = json.loads(capsys.readouterr().out)
    assert "add_transportation" in summary["transcript"]
    assert "set_em_option pixe false" in summary["transcript"]


def test_two_em_modules_exit_nonzero(tmp_path, capsys):
    path = _write(
        tmp_path,
        {"modules": [{"name": "G4EmLivermorePhysics"}, {"name": "G4EmStandardPhysics_option4"}]},
    )

    assert main(["resolve", str(path)]) == EXIT_CONFIG_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "More than 1 EM" in captured.err
    assert "G4EmLivermorePhysics" in captured.err
    assert "G4EmStandardPhysics_option4" in captured.err


def test_zero_em_modules_still_succeeds(tmp_path, capsys):
    path = _write(tmp_path, {"modules": [{"name": "G4DecayPhysics"}]})

    assert main(["resolve", str(path)]) == EXIT_OK

    summary = json.loads(capsys.readouterr().out)
    assert summary["electromagnetic"] is None
    assert any(item["code"] == "no_em_physics" for item in summary["diagnostics"])


def test_inverted_window_exit_nonzero(tmp_path, capsys):
    path = _write(tmp_path, {"cutEnergyWindow": {"min": 10, "max": 1}})
    assert main(["resolve", str(path)]) == EXIT_CONFIG_ERROR
    assert "energy window" in capsys.readouterr().err


def test_missing_and_invalid_files(tmp_path, capsys):
    assert main(["resolve", str(tmp_path / "absent.json")]) == EXIT_INPUT_ERROR
    bad = tmp_path / "bad.json"
    bad.write_text('{"modules": "nope"}')
    assert main(["resolve", str(bad)]) == EXIT_INPUT_ERROR
    assert "invalid configuration" in capsys.readouterr().err


def test_modules_command_lists_registry(capsys):
    assert main(["modules"]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert "G4DecayPhysics\tdecay" in lines
    assert len(lines) == 11


def test_serve_runs_app_factory(monkeypatch):
    calls = []

    def fake_run(app, **kwargs):
        calls.append((app, kwargs))

    monkeypatch.setattr("uvicorn.run", fake_run)
    assert main(["serve", "--port", "9000"]) == EXIT_OK
    assert calls == [
        (
            "physlist.api.app:create_app",
            {"host": "127.0.0.1", "port": 9000, "reload": False, "factory": True},
        )
    ]
