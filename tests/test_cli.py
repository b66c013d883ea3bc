import csv
import json
import os

import pytest

from ipd_tournament import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("IPD_ROUNDS", "IPD_MATCHES", "IPD_SEED", "IPD_WORKERS", "OUT_DIR"):
        monkeypatch.delenv(key, raising=False)


def _run(tmp_path, *extra):
    args = ["--rounds", "5", "--matches", "2", "--seed", "3", "--out-dir", str(tmp_path), "--no-progress"]
    return cli.main(args + list(extra))


def test_writes_both_csv_files(tmp_path, capsys):
    assert _run(tmp_path, "--only", "TitForTat,Grudger") == 0

    with open(os.path.join(tmp_path, "match_results.csv"), newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["PlayerA", "PlayerB", "TotalA", "TotalB", "AvgA", "AvgB"]
    assert len(rows) == 5
    assert rows[1] == ["TitForTat", "TitForTat", "30", "30", "15.0", "15.0"]

    with open(os.path.join(tmp_path, "ranking.csv"), newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Rank", "Strategy", "TotalScore", "AvgScorePerGame"]
    assert len(rows) == 3

    out = capsys.readouterr().out
    assert "=== Final ranking (2 matches x 5 rounds) ===" in out


def test_json_format(tmp_path):
    assert _run(tmp_path, "--only", "Davis", "--format", "json") == 0
    with open(os.path.join(tmp_path, "results.json"), encoding="utf-8") as f:
        data = json.load(f)
    assert data["strategies"] == ["Davis"]
    assert data["matches"][0]["TotalA"] == 30


def test_environment_supplies_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("IPD_ROUNDS", "3")
    monkeypatch.setenv("IPD_MATCHES", "1")
    monkeypatch.setenv("OUT_DIR", str(tmp_path))
    assert cli.main(["--only", "TitForTat", "--no-progress"]) == 0
    with open(os.path.join(tmp_path, "match_results.csv"), newline="") as f:
        rows = list(csv.reader(f))
    assert rows[1][2] == "9"


def test_labels(capsys):
    assert cli.main(["--labels"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 15
    assert lines[0].split() == ["1", "TitForTat"]
    assert lines[-1].split() == ["15", "Random"]


def test_invalid_rounds_exit(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run(tmp_path, "--rounds", "0")
    assert "rounds_per_match" in str(excinfo.value)


def test_unknown_strategy_exit(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run(tmp_path, "--only", "Nobody")
    assert "Nobody" in str(excinfo.value)


def test_bad_environment_exit(tmp_path, monkeypatch):
    monkeypatch.setenv("IPD_SEED", "abc")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--rounds", "2", "--matches", "1", "--only", "Davis", "--out-dir", str(tmp_path), "--no-progress"])
    assert "IPD_SEED" in str(excinfo.value)


def test_labels_ignore_bad_environment(monkeypatch, capsys):
    monkeypatch.setenv("IPD_ROUNDS", "lots")
    assert cli.main(["--labels"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 15


def test_flags_override_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("IPD_ROUNDS", "50")
    monkeypatch.setenv("IPD_SEED", "9")
    assert _run(tmp_path, "--only", "TitForTat") == 0
    with open(os.path.join(tmp_path, "match_results.csv"), newline="") as f:
        rows = list(csv.reader(f))
    assert rows[1][2] == "30"


def test_unwritable_output_is_fatal(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OSError):
        cli.main(["--rounds", "2", "--matches", "1", "--only", "Davis", "--out-dir", str(blocker), "--no-progress"])
