# pathfinding/search.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Set

from grid import Grid, Pos
from heuristics import Heuristic, manhattan
from metrics import PathResult, PerformanceCounter
from steps import NULL_RECORDER, StepRecorder
from .frontiers import FIFOFrontier, Frontier


class PathNode(NamedTuple):
    pos: Pos
    g: int                  # moves from start
    f: float                # frontier priority at push time
    parent: Optional[int]   # index into the node arena, None for start


class Relaxation(Enum):
    # push a neighbour only the first time it is seen (BFS)
    DISCOVERY = "discovery"
    # push when not finalized and the new g is strictly smaller (A*, Dijkstra, GBFS)
    IMPROVEMENT = "improvement"
    # push whenever not finalized; the node is finalized on pop (DFS)
    ALWAYS = "always"


@dataclass(frozen=True)
class CostModel:
    """Frontier priority = g_weight * g + h_weight * h."""
    g_weight: float
    h_weight: float

    def priority(self, g: float, h: float) -> float:
        return self.g_weight * g + self.h_weight * h


class GridSearchPlanner:
    """
    Generic best-first / queue / stack search over a Grid.

    Subclasses pick the behaviour with class attributes only:

        frontier_factory   FIFO, LIFO or priority queue
        cost_model         how priorities are computed (None = unordered)
        relaxation         when a neighbour gets (re)pushed
        reverse_neighbors  push neighbours in reverse order (stacks)

    Search shape: Initialized -> Searching -> PathFound | Exhausted.
    Every pop of a live node counts as one explored node; every
    neighbour examined counts as one comparison.

    Nodes live in a list (the arena) and point at their parent by index,
    so parent links always point at older nodes and can't form a cycle.
    """

    name = "GridSearch"
    label = "Grid search"
    complexity = "O(V + E)"
    optimal = False

    frontier_factory: Callable[[], Frontier] = FIFOFrontier
    cost_model: Optional[CostModel] = None
    relaxation: Relaxation = Relaxation.DISCOVERY
    reverse_neighbors = False
    default_heuristic: Heuristic = staticmethod(manhattan)

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def run(
        self,
        grid: Grid,
        start: Pos,
        goal: Pos,
        heuristic: Optional[Heuristic] = None,
        recorder: Optional[StepRecorder] = None,
    ) -> PathResult:
        """
        Search from start to goal.

        Raises ValidationError (before any search state is built) if
        start or goal is out of bounds or blocked. An unreachable goal
        is returned as found=False with an empty path.
        """
        grid.validate_endpoints(start, goal)

        h = heuristic if heuristic is not None else self.default_heuristic
        sink = recorder if recorder is not None else NULL_RECORDER

        counter = PerformanceCounter()
        counter.start_timer()
        path = self._search(grid, start, goal, h, sink, counter)
        counter.stop_timer()

        if path is None:
            return PathResult(self.name, False, [], counter)
        return PathResult(self.name, True, path, counter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _priority(self, g: int, pos: Pos, goal: Pos, h: Heuristic) -> float:
        model = self.cost_model
        if model is None:
            return 0.0
        h_val = h(pos, goal) if model.h_weight else 0.0
        return model.priority(g, h_val)

    def _search(
        self,
        grid: Grid,
        start: Pos,
        goal: Pos,
        h: Heuristic,
        sink,
        counter: PerformanceCounter,
    ) -> Optional[List[Pos]]:
        name = self.name
        policy = self.relaxation

        frontier = self.frontier_factory()
        nodes: List[PathNode] = []
        best: Dict[Pos, int] = {}   # pos -> index of its newest node
        closed: Set[Pos] = set()

        f0 = self._priority(0, start, goal, h)
        nodes.append(PathNode(start, 0, f0, None))
        best[start] = 0
        frontier.push(f0, 0)
        counter.record_push()
        counter.update_max_frontier(len(frontier))
        sink.frontier_change([start], 0, len(frontier), name)

        while frontier:
            idx = frontier.pop()
            node = nodes[idx]
            cur = node.pos

            # stale entry: already finalized, or superseded by a better push
            if cur in closed or best[cur] != idx:
                continue

            closed.add(cur)
            counter.increment_explored()
            sink.explore(cur, name)

            if cur == goal:
                path = self._reconstruct(nodes, idx)
                sink.path_found(path, name)
                return path

            neighbors = grid.neighbors(cur)
            if self.reverse_neighbors:
                neighbors.reverse()

            before = len(frontier)
            pushed: List[Pos] = []
            for nxt in neighbors:
                counter.increment_comparison()
                if nxt in closed:
                    continue

                new_g = node.g + 1  # unit-cost grid
                known = best.get(nxt)
                if known is not None:
                    if policy is Relaxation.DISCOVERY:
                        continue
                    if policy is Relaxation.IMPROVEMENT and new_g >= nodes[known].g:
                        continue

                f = self._priority(new_g, nxt, goal, h)
                new_idx = len(nodes)
                nodes.append(PathNode(nxt, new_g, f, idx))
                best[nxt] = new_idx
                frontier.push(f, new_idx)
                counter.record_push()
                sink.expand(nxt, cur, name)
                pushed.append(nxt)

            counter.update_max_frontier(len(frontier))
            if pushed:
                sink.frontier_change(pushed, before, len(frontier), name)

        return None

    @staticmethod
    def _reconstruct(nodes: List[PathNode], idx: int) -> List[Pos]:
        path: List[Pos] = []
        cur: Optional[int] = idx
        while cur is not None:
            node = nodes[cur]
            path.append(node.pos)
            cur = node.parent
        path.reverse()
        return path
