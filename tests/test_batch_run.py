"""Parameter sweeps and per-experiment rows."""

from batch_config import ALGORITHMS, PARAM_GRID
from batch_run import iter_param_combinations, run_one, run_single_experiment

PARAMS = dict(
    purpose="test", rows=10, cols=12, layout="random",
    obstacle_density=0.25, heuristic="euclidean", iterations=2, seed=4,
)


def test_iter_param_combinations():
    combos = list(iter_param_combinations({"a": [1, 2], "b": ["x"], "c": [True, False]}))
    assert len(combos) == 4
    assert combos[0] == {"a": 1, "b": "x", "c": True}


def test_default_param_grid_has_all_arguments():
    combo = next(iter_param_combinations(PARAM_GRID))
    rows = run_single_experiment(**{**combo, "rows": 6, "cols": 6, "iterations": 1})
    assert [r["algorithm"] for r in rows] == ALGORITHMS


def test_run_single_experiment():
    rows = run_single_experiment(**PARAMS)
    assert [r["algorithm"] for r in rows] == ["AStar", "Dijkstra", "BFS", "DFS", "GBFS"]
    for r in rows:
        assert r["found"]
        assert r["iterations"] == 2
        assert r["grid"] == rows[0]["grid"]
    assert rows[0]["grid"]["obstacles"] + rows[0]["grid"]["open_cells"] == 10 * 12
    optimal = {r["algorithm"]: r["path_length"] for r in rows if r["algorithm"] in ("AStar", "Dijkstra", "BFS")}
    assert len(set(optimal.values())) == 1


def test_run_single_experiment_subset():
    rows = run_single_experiment(**PARAMS, algorithms=["DFS"])
    assert [r["algorithm"] for r in rows] == ["DFS"]


def test_run_one_merges_params():
    rows = run_one(PARAMS)
    assert len(rows) == 5
    assert all(r["purpose"] == "test" and r["seed"] == 4 and r["layout"] == "random" for r in rows)
    assert all("grid.obstacles" in r and "grid" not in r for r in rows)
    assert all(r["grid.obstacles"] + r["grid.open_cells"] == 10 * 12 for r in rows)


def test_run_one_reports_failures(capsys):
    assert run_one({**PARAMS, "layout": "spiral"}) is None
    assert "[ERROR]" in capsys.readouterr().out
