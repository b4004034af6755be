"""Tests for BenchmarkRunner aggregation."""

import pytest

from benchmark import BenchmarkRunner, BenchmarkStats
from errors import NotFoundError, ValidationError
from heuristics import euclidean
from pathfinding import DEFAULT_ORDER, get_algorithm


@pytest.fixture
def grid(random_grids):
    return random_grids[0]


@pytest.fixture
def endpoints(grid):
    return (0, 0), (grid.height - 1, grid.width - 1)


class TestRun:
    """Happy paths."""

    def test_all_algorithms_by_default(self, grid, endpoints):
        stats = BenchmarkRunner().run(None, grid, *endpoints, iterations=2)
        assert list(stats) == list(DEFAULT_ORDER)
        for s in stats.values():
            assert isinstance(s, BenchmarkStats)
            assert s.iterations == 2
            assert s.found
            assert s.min_duration <= s.mean_duration <= s.max_duration

    def test_matches_single_runs(self, grid, endpoints):
        stats = BenchmarkRunner().run(["AStar", "DFS"], grid, *endpoints, iterations=3)
        assert list(stats) == ["AStar", "DFS"]
        for name in ("AStar", "DFS"):
            single = get_algorithm(name).run(grid, *endpoints)
            assert stats[name].mean_nodes_explored == single.counter.nodes_explored
            assert stats[name].mean_comparisons == single.counter.comparisons
            assert stats[name].mean_max_frontier == single.counter.max_frontier_size
            assert stats[name].path_length == single.path_length

    def test_accepts_planner_objects(self, grid, endpoints):
        stats = BenchmarkRunner().run([get_algorithm("BFS")], grid, *endpoints)
        assert list(stats) == ["BFS"]
        assert stats["BFS"].label == "Breadth-First Search"
        assert stats["BFS"].complexity == "O(V + E)"

    def test_threads_give_same_aggregates(self, grid, endpoints):
        serial = BenchmarkRunner(workers=1).run(None, grid, *endpoints, iterations=4)
        threaded = BenchmarkRunner(workers=4).run(None, grid, *endpoints, iterations=4)
        assert list(serial) == list(threaded)
        for name in serial:
            a, b = serial[name], threaded[name]
            assert (a.found, a.path_length, a.mean_comparisons, a.mean_nodes_explored, a.mean_max_frontier) == (
                b.found, b.path_length, b.mean_comparisons, b.mean_nodes_explored, b.mean_max_frontier
            )
            assert b.iterations == 4

    def test_heuristic_is_forwarded(self, grid, endpoints):
        stats = BenchmarkRunner().run(["AStar"], grid, *endpoints, heuristic=euclidean)
        single = get_algorithm("AStar").run(grid, *endpoints, heuristic=euclidean)
        assert stats["AStar"].mean_nodes_explored == single.counter.nodes_explored

    def test_unreachable_goal_is_reported_not_raised(self, walled_grid):
        stats = BenchmarkRunner().run(None, walled_grid, (0, 0), (4, 4), iterations=2)
        for s in stats.values():
            assert not s.found
            assert s.path_length == 0
            assert s.mean_nodes_explored == 10

    def test_as_row(self, grid, endpoints):
        row = BenchmarkRunner().run(["GBFS"], grid, *endpoints)["GBFS"].as_row()
        assert row["algorithm"] == "GBFS"
        assert {"mean_duration", "min_duration", "max_duration", "mean_comparisons", "mean_nodes_explored"} <= set(row)

    def test_logging(self, grid, endpoints, capsys):
        BenchmarkRunner(log_events=True).run(["BFS"], grid, *endpoints)
        out = capsys.readouterr().out
        assert "[BENCH]" in out
        assert "Breadth-First Search" in out

    def test_silent_by_default(self, grid, endpoints, capsys):
        BenchmarkRunner().run(["BFS"], grid, *endpoints)
        assert capsys.readouterr().out == ""


class TestValidation:
    """Bad input fails before any run."""

    @pytest.mark.parametrize("iterations", [0, -3, 1.5, True])
    def test_bad_iterations(self, grid, endpoints, iterations):
        with pytest.raises(ValidationError):
            BenchmarkRunner().run(None, grid, *endpoints, iterations=iterations)

    def test_bad_endpoints(self, center_blocked_grid):
        with pytest.raises(ValidationError):
            BenchmarkRunner().run(None, center_blocked_grid, (0, 0), (1, 1))

    def test_unknown_algorithm(self, grid, endpoints):
        with pytest.raises(NotFoundError):
            BenchmarkRunner().run(["AStar", "Nope"], grid, *endpoints)

    def test_duplicate_algorithm(self, grid, endpoints):
        with pytest.raises(ValidationError):
            BenchmarkRunner().run(["BFS", "BFS"], grid, *endpoints)
