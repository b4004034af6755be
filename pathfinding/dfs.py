# pathfinding/dfs.py
from .frontiers import LIFOFrontier
from .search import GridSearchPlanner, Relaxation


class DFSPlanner(GridSearchPlanner):
    """
    Depth-first search with an explicit stack.

    Follows one branch to its end before backtracking. Neighbours are
    pushed in reverse so the first one (up) is tried first; a cell is
    finalized when popped and its parent is whichever cell pushed it
    last. The path it returns is usually NOT the shortest.
    """

    name = "DFS"
    label = "Depth-First Search"
    complexity = "O(V + E)"
    optimal = False

    frontier_factory = LIFOFrontier
    cost_model = None
    relaxation = Relaxation.ALWAYS
    reverse_neighbors = True


ALGORITHM = DFSPlanner()
