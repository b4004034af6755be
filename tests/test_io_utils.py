"""Tests for run directories, JSON and CSV output."""

import csv
import json

from config import Config
from io_utils import append_rows_csv, flatten_dict, make_run_dir, save_config, save_summary


def test_make_run_dir_is_unique(tmp_path):
    cfg = Config(rows=7, cols=9, layout="maze", seed=3)
    a = make_run_dir(cfg, base=str(tmp_path))
    b = make_run_dir(cfg, base=str(tmp_path), label="bench")
    assert a != b
    assert a.is_dir() and b.is_dir()
    assert a.name.startswith("run_R7x9_maze_seed3_")
    assert "_bench_" in b.name


def test_make_run_dir_uses_config_base(tmp_path):
    cfg = Config(output_base=str(tmp_path / "out"))
    run_dir = make_run_dir(cfg)
    assert run_dir.parent == tmp_path / "out"


def test_save_config_and_summary(tmp_path):
    cfg = Config(start=(1, 2))
    cfg_path = save_config(cfg, tmp_path)
    data = json.loads(cfg_path.read_text())
    assert data["rows"] == cfg.rows
    assert data["start"] == [1, 2]
    assert data["algorithms"] == cfg.algorithms

    sum_path = save_summary({"runs": {"BFS": {"found": True}}}, tmp_path)
    assert json.loads(sum_path.read_text())["runs"]["BFS"]["found"] is True


def test_flatten_dict():
    assert flatten_dict({"a": {"b": 1, "c": {"d": 2}}, "e": 3}) == {"a.b": 1, "a.c.d": 2, "e": 3}


def test_append_rows_csv(tmp_path):
    out = tmp_path / "nested" / "results.csv"
    append_rows_csv([{"b": 1, "algorithm": "BFS", "a": 2}], out, first_columns=("algorithm",))
    append_rows_csv([{"a": 5, "b": 6, "algorithm": "DFS", "extra": "ignored"}], out)
    append_rows_csv([], out)

    with out.open(newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["algorithm", "a", "b"]
    assert rows[1] == ["BFS", "2", "1"]
    assert rows[2] == ["DFS", "5", "6"]
    assert len(rows) == 3
