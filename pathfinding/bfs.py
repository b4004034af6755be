# pathfinding/bfs.py
from .frontiers import FIFOFrontier
from .search import GridSearchPlanner, Relaxation


class BFSPlanner(GridSearchPlanner):
    """
    Breadth-first search. Cells are marked visited when enqueued, so each
    cell enters the queue at most once. Shortest path on unit-cost grids.
    """

    name = "BFS"
    label = "Breadth-First Search"
    complexity = "O(V + E)"
    optimal = True

    frontier_factory = FIFOFrontier
    cost_model = None
    relaxation = Relaxation.DISCOVERY


ALGORITHM = BFSPlanner()
