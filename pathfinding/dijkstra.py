# pathfinding/dijkstra.py
from __future__ import annotations

from .frontiers import PriorityFrontier
from .search import CostModel, GridSearchPlanner, Relaxation


class DijkstraPlanner(GridSearchPlanner):
    """A* with h = 0: frontier ordered by path cost g only. Optimal; any heuristic passed in is ignored."""

    name = "Dijkstra"
    label = "Dijkstra"
    complexity = "O((V + E) log V)"
    optimal = True

    frontier_factory = PriorityFrontier
    cost_model = CostModel(g_weight=1.0, h_weight=0.0)
    relaxation = Relaxation.IMPROVEMENT


ALGORITHM = DijkstraPlanner()
