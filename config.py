# config.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Config:
    rows: int = 20
    cols: int = 20

    # "empty", "random", "maze" or "corridor" (see grid.make_grid)
    layout: str = "random"
    obstacle_density: float = 0.3   # fraction of cells for random / corridor layouts
    seed: int = 0

    # None = corners: start top-left, goal bottom-right
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None

    # planner names from pathfinding.PATHFINDING_ALGOS
    algorithms: List[str] = field(
        default_factory=lambda: ["AStar", "Dijkstra", "BFS", "DFS", "GBFS"]
    )
    heuristic: str = "manhattan"

    # benchmarking
    iterations: int = 5
    workers: int = 1

    # outputs
    output_base: str = "outputs"
    render: bool = True        # PNG + GIF per algorithm
    fps: int = 10
    max_frames: int = 300      # GIFs longer than this are subsampled

    log_events: bool = True

    def start_pos(self) -> Tuple[int, int]:
        return tuple(self.start) if self.start is not None else (0, 0)

    def goal_pos(self) -> Tuple[int, int]:
        return tuple(self.goal) if self.goal is not None else (self.rows - 1, self.cols - 1)
