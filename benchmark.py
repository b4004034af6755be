# benchmark.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from multiprocessing.pool import ThreadPool
from statistics import mean
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from errors import ValidationError
from grid import Grid, Pos
from heuristics import Heuristic
from metrics import PathResult
from pathfinding import PATHFINDING_ALGOS, get_algorithm
from pathfinding.base import PathfindingAlgorithm

AlgoRef = Union[str, PathfindingAlgorithm]


@dataclass
class BenchmarkStats:
    """Aggregate of N repetitions of one algorithm on one grid / start / goal."""
    algorithm: str
    label: str
    complexity: str
    iterations: int
    found: bool
    path_length: int
    mean_duration: float
    min_duration: float
    max_duration: float
    mean_comparisons: float
    mean_nodes_explored: float
    mean_max_frontier: float

    @classmethod
    def from_results(cls, algo: PathfindingAlgorithm, results: Sequence[PathResult]) -> "BenchmarkStats":
        durations = [r.counter.elapsed for r in results]
        last = results[-1]
        return cls(
            algorithm=algo.name,
            label=algo.label,
            complexity=algo.complexity,
            iterations=len(results),
            found=last.found,
            path_length=last.path_length,
            mean_duration=mean(durations),
            min_duration=min(durations),
            max_duration=max(durations),
            mean_comparisons=mean(r.counter.comparisons for r in results),
            mean_nodes_explored=mean(r.counter.nodes_explored for r in results),
            mean_max_frontier=mean(r.counter.max_frontier_size for r in results),
        )

    def as_row(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class BenchmarkRunner:
    """
    Run one or more planners N times each over the same grid.

      - every iteration calls planner.run() again, so each run builds its
        own frontier / closed set / PerformanceCounter
      - the Grid is immutable and shared read-only by all runs
      - with workers > 1, runs go to a thread pool; each worker only
        returns its PathResult, and the merge happens afterwards in this
        thread, in (algorithm, iteration) order
    """
    workers: int = 1

    # control terminal logging
    log_events: bool = False

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    def run(
        self,
        algorithms: Optional[Sequence[AlgoRef]],
        grid: Grid,
        start: Pos,
        goal: Pos,
        iterations: int = 1,
        heuristic: Optional[Heuristic] = None,
    ) -> Dict[str, BenchmarkStats]:
        """
        Benchmark `algorithms` (names or planner objects; None = all
        registered) and return {algorithm name: BenchmarkStats}, in the
        order the algorithms were given.
        """
        # fail fast: nothing runs if any input is bad
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise ValidationError(f"iterations must be a positive integer, got {iterations!r}")
        grid.validate_endpoints(start, goal)
        planners = self._resolve(algorithms)

        jobs: List[Tuple[int, int]] = [
            (a_idx, it) for a_idx in range(len(planners)) for it in range(iterations)
        ]
        self._log(
            f"[BENCH] {len(planners)} algorithm(s) x {iterations} iteration(s) "
            f"on {grid.width}x{grid.height} grid, {grid.obstacle_count} obstacles, workers={self.workers}"
        )

        def run_one(job: Tuple[int, int]) -> Tuple[int, int, PathResult]:
            a_idx, it = job
            result = planners[a_idx].run(grid, start, goal, heuristic=heuristic)
            return a_idx, it, result

        if self.workers > 1 and len(jobs) > 1:
            with ThreadPool(processes=self.workers) as pool:
                raw = list(pool.imap_unordered(run_one, jobs))
        else:
            raw = [run_one(job) for job in jobs]

        # single-threaded reduction
        raw.sort(key=lambda item: (item[0], item[1]))
        per_algo: Dict[int, List[PathResult]] = {i: [] for i in range(len(planners))}
        for a_idx, _, result in raw:
            per_algo[a_idx].append(result)

        stats: Dict[str, BenchmarkStats] = {}
        for a_idx, algo in enumerate(planners):
            s = BenchmarkStats.from_results(algo, per_algo[a_idx])
            stats[algo.name] = s
            self._log(
                f"  - {algo.label:<22} found={s.found} len={s.path_length} "
                f"explored={s.mean_nodes_explored:.1f} mean={s.mean_duration * 1e6:.1f}us"
            )
        return stats

    @staticmethod
    def _resolve(algorithms: Optional[Sequence[AlgoRef]]) -> List[PathfindingAlgorithm]:
        if algorithms is None:
            return list(PATHFINDING_ALGOS.values())
        planners: List[PathfindingAlgorithm] = []
        seen = set()
        for a in algorithms:
            algo = get_algorithm(a) if isinstance(a, str) else a
            if algo.name in seen:
                raise ValidationError(f"Algorithm listed twice: {algo.name}")
            seen.add(algo.name)
            planners.append(algo)
        return planners
