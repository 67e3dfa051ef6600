"""Smoke tests for the rook command line."""
import json

from rook.cli import main


def test_show_config(capsys):
    main(["show-config"])
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["ai_config"]["aggression"] == 1.5


def test_simulate_writes_json(tmp_path, capsys):
    out_file = tmp_path / "sim" / "result.json"
    main([
        "simulate",
        "--matches", "2",
        "--seed", "3",
        "--seats", "heuristic", "random", "heuristic", "random",
        "--json-out", str(out_file),
    ])
    out = capsys.readouterr().out
    assert "2 matches" in out
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["summary"]["matches"] == 2
    assert len(data["matches"]) == 2
    assert data["seats"] == ["heuristic", "random", "heuristic", "random"]


def test_simulate_with_config_file(tmp_path, capsys):
    cfg = tmp_path / "ai.json"
    main(["show-config"])
    cfg.write_text(capsys.readouterr().out, encoding="utf-8")
    main(["simulate", "--matches", "1", "--config", str(cfg), "--max-rounds", "2"])
    assert "1 matches" in capsys.readouterr().out
