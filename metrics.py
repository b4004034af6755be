# metrics.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from time import perf_counter
from typing import Any, Dict, List, Optional

from grid import Pos


@dataclass
class PerformanceCounter:
    """
    Per-run instrumentation for one search.

    All fields only grow during a run, except max_frontier_size which
    keeps the running maximum. One counter belongs to exactly one run;
    benchmark loops either create a fresh one or call reset().
    """
    comparisons: int = 0
    nodes_explored: int = 0
    max_frontier_size: int = 0
    frontier_pushes: int = 0
    elapsed: float = 0.0  # seconds

    _t0: Optional[float] = field(default=None, repr=False, compare=False)

    # ---- counters ----

    def increment_comparison(self) -> None:
        self.comparisons += 1

    def increment_explored(self) -> None:
        self.nodes_explored += 1

    def record_push(self) -> None:
        self.frontier_pushes += 1

    def update_max_frontier(self, size: int) -> None:
        if size > self.max_frontier_size:
            self.max_frontier_size = size

    # ---- timing ----

    def start_timer(self) -> None:
        self._t0 = perf_counter()

    def stop_timer(self) -> None:
        if self._t0 is None:
            raise RuntimeError("stop_timer() called before start_timer()")
        self.elapsed += perf_counter() - self._t0
        self._t0 = None

    # ---- housekeeping ----

    def reset(self) -> None:
        self.comparisons = 0
        self.nodes_explored = 0
        self.max_frontier_size = 0
        self.frontier_pushes = 0
        self.elapsed = 0.0
        self._t0 = None

    def copy(self) -> "PerformanceCounter":
        return replace(self)

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("_t0", None)
        return data


@dataclass
class PathResult:
    """
    Outcome of one search.

    found=False with an empty path is a normal result (goal unreachable),
    not an error.
    """
    algorithm: str
    found: bool
    path: List[Pos]
    counter: PerformanceCounter

    @property
    def path_length(self) -> int:
        """Number of positions on the path, start and goal included."""
        return len(self.path)

    @property
    def cost(self) -> int:
        """Number of unit moves; -1 when no path was found."""
        return len(self.path) - 1 if self.found else -1

    def summary(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "found": self.found,
            "path_length": self.path_length,
            "cost": self.cost,
            "counter": self.counter.as_dict(),
        }
