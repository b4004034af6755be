"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections import deque
from typing import Dict, List, Optional

import matplotlib

matplotlib.use("Agg")

import pytest

from grid import Grid, Pos, random_obstacle_grid


def bfs_distance(grid: Grid, start: Pos, goal: Pos) -> Optional[int]:
    """Reference shortest-path length in moves, independent of the planners."""
    dist: Dict[Pos, int] = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            return dist[cur]
        r, c = cur
        for nxt in ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)):
            if not (0 <= nxt[0] < grid.height and 0 <= nxt[1] < grid.width):
                continue
            if nxt in grid.blocked or nxt in dist:
                continue
            dist[nxt] = dist[cur] + 1
            q.append(nxt)
    return None


def assert_valid_path(grid: Grid, path: List[Pos], start: Pos, goal: Pos) -> None:
    assert path[0] == start
    assert path[-1] == goal
    assert len(set(path)) == len(path), "path repeats a cell"
    for p in path:
        assert grid.in_bounds(p)
        assert not grid.is_blocked(p)
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} is not a single move"


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid without obstacles."""
    return Grid(5, 5)


@pytest.fixture
def center_blocked_grid() -> Grid:
    """3x3 grid with the middle cell blocked."""
    return Grid(3, 3, frozenset({(1, 1)}))


@pytest.fixture
def walled_grid() -> Grid:
    """5x5 grid with row 2 fully blocked: top two rows cut off from the bottom."""
    return Grid(5, 5, frozenset((2, c) for c in range(5)))


@pytest.fixture
def random_grids() -> List[Grid]:
    """Ten connected 12x9 grids with ~30% obstacles, start (0,0), goal (8,11)."""
    return [random_obstacle_grid(12, 9, 0.3, seed=s) for s in range(10)]
