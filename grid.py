# grid.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Set, Tuple, TYPE_CHECKING
import random

import numpy as np

from errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from config import Config

Pos = Tuple[int, int]  # (row, col)

# 4-connected moves in the fixed order up, right, down, left
DIRECTIONS: Tuple[Pos, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Cell(Enum):
    OPEN = "open"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Grid:
    """
    Rectangular 4-connected grid with uniform unit-cost edges.

      - width:   number of columns
      - height:  number of rows
      - blocked: positions that can never be entered

    A Grid is immutable once built, so searches (and benchmark worker
    threads) can share one instance without locking.
    """
    width: int
    height: int
    blocked: FrozenSet[Pos] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for dim_name, dim in (("width", self.width), ("height", self.height)):
            if isinstance(dim, bool) or not isinstance(dim, int) or dim <= 0:
                raise ValidationError(f"Grid {dim_name} must be a positive integer, got {dim!r}")

        blocked = frozenset(tuple(p) for p in self.blocked)
        outside = [p for p in blocked if not self.in_bounds(p)]
        if outside:
            raise ValidationError(f"Obstacles outside the {self.width}x{self.height} grid: {sorted(outside)}")
        object.__setattr__(self, "blocked", blocked)

    # ------------------------------------------------------------------ #
    # Basic queries                                                      #
    # ------------------------------------------------------------------ #
    def in_bounds(self, p: Pos) -> bool:
        r, c = p
        return 0 <= r < self.height and 0 <= c < self.width

    def is_blocked(self, p: Pos) -> bool:
        return p in self.blocked

    def cell(self, p: Pos) -> Cell:
        if not self.in_bounds(p):
            raise ValidationError(f"Position {p} is outside the {self.width}x{self.height} grid")
        return Cell.BLOCKED if p in self.blocked else Cell.OPEN

    def is_open(self, p: Pos) -> bool:
        return self.in_bounds(p) and p not in self.blocked

    def neighbors(self, p: Pos) -> List[Pos]:
        """In-bounds, open 4-neighbours of p, ordered up, right, down, left."""
        r, c = p
        candidates = [(r + dr, c + dc) for dr, dc in DIRECTIONS]
        return [q for q in candidates if self.in_bounds(q) and q not in self.blocked]

    @property
    def obstacle_count(self) -> int:
        return len(self.blocked)

    def open_cells(self) -> List[Pos]:
        return [
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if (r, c) not in self.blocked
        ]

    def validate_endpoints(self, start: Pos, goal: Pos) -> None:
        """Raise ValidationError if start or goal is out of bounds or blocked."""
        for label, p in (("start", start), ("goal", goal)):
            if not self.in_bounds(p):
                raise ValidationError(f"{label} {p} is outside the {self.width}x{self.height} grid")
            if p in self.blocked:
                raise ValidationError(f"{label} {p} is on a blocked cell")

    def reachable_from(self, source: Pos) -> Set[Pos]:
        """All open cells connected to source (including source itself)."""
        if not self.is_open(source):
            return set()
        seen: Set[Pos] = {source}
        q = deque([source])
        while q:
            cur = q.popleft()
            for np_ in self.neighbors(cur):
                if np_ not in seen:
                    seen.add(np_)
                    q.append(np_)
        return seen

    def to_array(self) -> np.ndarray:
        """Boolean (height, width) matrix, True where a cell is blocked."""
        occ = np.zeros((self.height, self.width), dtype=bool)
        for r, c in self.blocked:
            occ[r, c] = True
        return occ


# ---------------------------------------------------------------------- #
# Grid generation                                                        #
# ---------------------------------------------------------------------- #
def _eight_neighbors(p: Pos, width: int, height: int) -> List[Pos]:
    r, c = p
    out: List[Pos] = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                out.append((nr, nc))
    return out


def _protected(start: Pos, goal: Pos, width: int, height: int) -> Set[Pos]:
    """start, goal and their 8-neighbourhoods stay free of obstacles."""
    protected = {start, goal}
    protected.update(_eight_neighbors(start, width, height))
    protected.update(_eight_neighbors(goal, width, height))
    return protected


def _connected(width: int, height: int, blocked: Set[Pos], start: Pos, goal: Pos) -> bool:
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            return True
        r, c = cur
        for dr, dc in DIRECTIONS:
            np_ = (r + dr, c + dc)
            if not (0 <= np_[0] < height and 0 <= np_[1] < width):
                continue
            if np_ in blocked or np_ in seen:
                continue
            seen.add(np_)
            q.append(np_)
    return False


def default_endpoints(width: int, height: int) -> Tuple[Pos, Pos]:
    """Top-left and bottom-right corners."""
    return (0, 0), (height - 1, width - 1)


def empty_grid(width: int, height: int) -> Grid:
    return Grid(width, height)


def maze_grid(width: int, height: int, start: Pos | None = None, goal: Pos | None = None) -> Grid:
    """
    Pillar maze: every interior cell with even row and even column is
    blocked (start and goal are always left open).
    """
    if start is None or goal is None:
        start, goal = default_endpoints(width, height)

    blocked = {
        (r, c)
        for r in range(1, height - 1)
        for c in range(1, width - 1)
        if r % 2 == 0 and c % 2 == 0 and (r, c) not in (start, goal)
    }
    return Grid(width, height, frozenset(blocked))


# corridor layouts place this fraction of the requested density, off the corridor
CORRIDOR_DENSITY_SCALE = 0.5


def corridor_grid(
    width: int,
    height: int,
    density: float,
    start: Pos | None = None,
    goal: Pos | None = None,
    seed: int = 0,
) -> Grid:
    """
    Obstacles scattered around a guaranteed L-shaped corridor from start
    to goal (first along the row, then along the column). Cells touching
    the corridor (8-neighbourhood) are kept free, so the corridor itself
    is always walkable.
    """
    if start is None or goal is None:
        start, goal = default_endpoints(width, height)
    rng = random.Random(seed)

    corridor: Set[Pos] = set()
    r, c = start
    gr, gc = goal
    while (r, c) != goal:
        corridor.add((r, c))
        if c != gc:
            c += 1 if gc > c else -1
        else:
            r += 1 if gr > r else -1
    corridor.add(goal)

    keep_clear = set(corridor)
    for p in corridor:
        keep_clear.update(_eight_neighbors(p, width, height))

    total = width * height
    target = int((total - len(corridor)) * density * CORRIDOR_DENSITY_SCALE)

    blocked: Set[Pos] = set()
    attempts = 0
    while len(blocked) < target and attempts < total * 3:
        attempts += 1
        p = (rng.randrange(height), rng.randrange(width))
        if p in keep_clear or p in blocked:
            continue
        blocked.add(p)

    return Grid(width, height, frozenset(blocked))


def random_obstacle_grid(
    width: int,
    height: int,
    density: float,
    start: Pos | None = None,
    goal: Pos | None = None,
    seed: int = 0,
) -> Grid:
    """
    Place roughly density * width * height obstacles at random while
    keeping start connected to goal.

    Each candidate obstacle is kept only if start still reaches goal;
    start, goal and their 8-neighbourhoods are never blocked. Grids
    smaller than 3x3 come back empty. When the attempt budget runs out
    the grid simply has fewer obstacles than the target.
    """
    if start is None or goal is None:
        start, goal = default_endpoints(width, height)
    if not 0.0 <= density < 1.0:
        raise ValidationError(f"Obstacle density must be in [0, 1), got {density}")

    grid = Grid(width, height)
    grid.validate_endpoints(start, goal)
    if width < 3 or height < 3:
        return grid

    rng = random.Random(seed)
    total = width * height
    target = int(total * density)
    protected = _protected(start, goal, width, height)

    blocked: Set[Pos] = set()
    attempts = 0
    while len(blocked) < target and attempts < total * 3:
        attempts += 1
        p = (rng.randrange(height), rng.randrange(width))
        if p in protected or p in blocked:
            continue

        blocked.add(p)
        if not _connected(width, height, blocked, start, goal):
            blocked.discard(p)

    return Grid(width, height, frozenset(blocked))


LAYOUTS = ("empty", "random", "maze", "corridor")


def make_grid(cfg: "Config") -> Grid:
    """Build the grid described by a Config (layout, size, density, seed)."""
    start, goal = cfg.start_pos(), cfg.goal_pos()
    if cfg.layout == "empty":
        return empty_grid(cfg.cols, cfg.rows)
    if cfg.layout == "random":
        return random_obstacle_grid(cfg.cols, cfg.rows, cfg.obstacle_density, start, goal, cfg.seed)
    if cfg.layout == "maze":
        return maze_grid(cfg.cols, cfg.rows, start, goal)
    if cfg.layout == "corridor":
        return corridor_grid(cfg.cols, cfg.rows, cfg.obstacle_density, start, goal, cfg.seed)
    raise NotFoundError(f"Unknown grid layout: {cfg.layout!r} (expected one of {LAYOUTS})")
