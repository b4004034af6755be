"""Tests for PerformanceCounter and PathResult."""

import pytest

from metrics import PathResult, PerformanceCounter


class TestPerformanceCounter:
    """Accumulator behaviour."""

    def test_starts_at_zero(self):
        c = PerformanceCounter()
        assert (c.comparisons, c.nodes_explored, c.max_frontier_size, c.frontier_pushes) == (0, 0, 0, 0)
        assert c.elapsed == 0.0

    def test_increments(self):
        c = PerformanceCounter()
        for _ in range(3):
            c.increment_comparison()
        c.increment_explored()
        c.record_push()
        c.record_push()
        assert c.comparisons == 3
        assert c.nodes_explored == 1
        assert c.frontier_pushes == 2

    def test_max_frontier_is_running_maximum(self):
        c = PerformanceCounter()
        for size in (1, 4, 2, 3):
            c.update_max_frontier(size)
        assert c.max_frontier_size == 4

    def test_timer_accumulates(self):
        c = PerformanceCounter()
        c.start_timer()
        c.stop_timer()
        first = c.elapsed
        c.start_timer()
        c.stop_timer()
        assert c.elapsed >= first >= 0.0

    def test_stop_without_start(self):
        with pytest.raises(RuntimeError):
            PerformanceCounter().stop_timer()

    def test_reset_clears_everything(self):
        c = PerformanceCounter()
        c.increment_comparison()
        c.increment_explored()
        c.update_max_frontier(7)
        c.record_push()
        c.start_timer()
        c.reset()
        assert c == PerformanceCounter()
        with pytest.raises(RuntimeError):
            c.stop_timer()

    def test_copy_is_independent(self):
        c = PerformanceCounter(comparisons=2)
        d = c.copy()
        d.increment_comparison()
        assert c.comparisons == 2
        assert d.comparisons == 3

    def test_as_dict_hides_timer_state(self):
        data = PerformanceCounter(nodes_explored=5).as_dict()
        assert data == {
            "comparisons": 0,
            "nodes_explored": 5,
            "max_frontier_size": 0,
            "frontier_pushes": 0,
            "elapsed": 0.0,
        }


class TestPathResult:
    """Derived fields."""

    def test_found(self):
        r = PathResult("BFS", True, [(0, 0), (0, 1), (1, 1)], PerformanceCounter())
        assert r.path_length == 3
        assert r.cost == 2
        summary = r.summary()
        assert summary["algorithm"] == "BFS"
        assert summary["counter"]["nodes_explored"] == 0

    def test_not_found(self):
        r = PathResult("DFS", False, [], PerformanceCounter())
        assert r.path_length == 0
        assert r.cost == -1
