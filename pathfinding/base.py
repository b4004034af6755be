# pathfinding/base.py
from typing import Optional, Protocol

from grid import Grid, Pos
from heuristics import Heuristic
from metrics import PathResult
from steps import StepRecorder


class PathfindingAlgorithm(Protocol):
    name: str
    label: str          # display name, e.g. "A*"
    complexity: str     # textbook time complexity
    optimal: bool       # shortest path guaranteed on unit-cost grids

    def run(
        self,
        grid: Grid,
        start: Pos,
        goal: Pos,
        heuristic: Optional[Heuristic] = None,
        recorder: Optional[StepRecorder] = None,
    ) -> PathResult:
        ...
