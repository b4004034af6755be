from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Example:
#   CPU_COUNT = 8        # use 8 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
# Every combination builds one grid and benchmarks every algorithm in
# ALGORITHMS on it, producing one CSV row per algorithm.
#
# Example:
#   "rows": [20, 40]
#   "cols": [20, 40]
# will generate 4 grid shapes:
#   (20x20), (20x40), (40x20), (40x40)
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["pathfinding_comparison"],  # free-text label for this batch

    # --- grid parameters ---
    "rows": [20, 40],                   # number of grid rows
    "cols": [20, 40],                   # number of grid columns
    "layout": ["random", "maze"],       # "empty", "random", "maze", "corridor"
    "obstacle_density": [0.2, 0.3],     # ignored by "empty" and "maze"

    # --- search parameters ---
    "heuristic": ["manhattan"],         # "manhattan" or "euclidean"
    "iterations": [5],                  # repetitions per algorithm (timings are averaged)

    # --- randomness ---
    "seed": [i for i in range(5)],      # RNG seeds for different random grids
}

# Pathfinding algorithms benchmarked on every grid:
#
#   "AStar"     - A* (optimal with manhattan / euclidean).
#   "Dijkstra"  - uniform-cost search, A* with h = 0 (optimal).
#   "BFS"       - breadth-first search (optimal on unit-cost grids).
#   "DFS"       - depth-first search (not optimal).
#   "GBFS"      - greedy best-first search (fast, not optimal).
ALGORITHMS: List[str] = ["AStar", "Dijkstra", "BFS", "DFS", "GBFS"]
