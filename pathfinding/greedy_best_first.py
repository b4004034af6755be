# pathfinding/greedy_best_first.py
from __future__ import annotations

from .frontiers import PriorityFrontier
from .search import CostModel, GridSearchPlanner, Relaxation


class GreedyBestFirstPlanner(GridSearchPlanner):
    """
    Greedy Best-First Search (GBFS) on a 4-connected grid.

    Uses only the heuristic value h(n) to order the frontier:

        f(n) = h(n)

    This often expands far fewer nodes than BFS, but is not guaranteed
    to find an optimal path. It is still complete on finite grids because
    finalized cells are never expanded twice.
    """

    name = "GBFS"
    label = "Greedy Best-First"
    complexity = "O(b^m)"
    optimal = False

    frontier_factory = PriorityFrontier
    cost_model = CostModel(g_weight=0.0, h_weight=1.0)
    relaxation = Relaxation.IMPROVEMENT


ALGORITHM = GreedyBestFirstPlanner()
