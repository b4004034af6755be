# pathfinding/astar.py
from __future__ import annotations

from .frontiers import PriorityFrontier
from .search import CostModel, GridSearchPlanner, Relaxation


class AStarPlanner(GridSearchPlanner):
    """
    A* on a 4-connected grid.

    Frontier ordered by f(n) = g(n) + h(n), ties broken first-in
    first-out. A node is re-pushed only when a strictly shorter route
    to it is found. With an admissible heuristic (manhattan, euclidean)
    the returned path is a shortest one, usually found with far fewer
    expansions than Dijkstra or BFS.
    """

    name = "AStar"
    label = "A*"
    complexity = "O(b^d)"
    optimal = True

    frontier_factory = PriorityFrontier
    cost_model = CostModel(g_weight=1.0, h_weight=1.0)
    relaxation = Relaxation.IMPROVEMENT


ALGORITHM = AStarPlanner()
