# heuristics.py
from __future__ import annotations

from math import sqrt
from typing import Callable, Dict

from errors import NotFoundError
from grid import Pos

# estimate(a, b) -> cost from a to b
Heuristic = Callable[[Pos, Pos], float]


def manhattan(a: Pos, b: Pos) -> float:
    """|drow| + |dcol|. Exact on an open 4-connected grid, so admissible."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Pos, b: Pos) -> float:
    """Straight-line distance. Never larger than manhattan, so admissible."""
    dr = a[0] - b[0]
    dc = a[1] - b[1]
    return sqrt(dr * dr + dc * dc)


def zero(a: Pos, b: Pos) -> float:
    return 0.0


# Callers may pass any callable with the same signature. A heuristic that
# overestimates the remaining cost still works, but A* loses its
# shortest-path guarantee.
HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "zero": zero,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        raise NotFoundError(
            f"Unknown heuristic: {name!r} (expected one of {sorted(HEURISTICS)})"
        ) from None
