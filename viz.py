# viz.py
from __future__ import annotations
from typing import Iterable, Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from grid import Grid, Pos

# --- Color palette (RGB in 0–1), shared with animate.py ---
BG_COLOR       = np.array([0.96, 0.96, 0.96])  # light gray background
BLOCKED_COLOR  = np.array([0.30, 0.30, 0.30])  # dark gray
EXPLORED_COLOR = np.array([0.68, 0.80, 0.92])  # pale blue
FRONTIER_COLOR = np.array([1.00, 0.78, 0.37])  # soft amber
CURRENT_COLOR  = np.array([0.84, 0.37, 0.30])  # muted red
PATH_COLOR     = np.array([0.17, 0.63, 0.17])  # green


def grid_image(
    grid: Grid,
    explored: Iterable[Pos] = (),
    frontier: Iterable[Pos] = (),
    path: Iterable[Pos] = (),
    current: Optional[Pos] = None,
) -> np.ndarray:
    """
    RGB image (height, width, 3) of the grid. Later layers win:
    background < explored < frontier < path < current.
    """
    img = np.zeros((grid.height, grid.width, 3), dtype=float)
    img[:, :, :] = BG_COLOR
    img[grid.to_array()] = BLOCKED_COLOR

    for (r, c) in explored:
        img[r, c] = EXPLORED_COLOR
    for (r, c) in frontier:
        img[r, c] = FRONTIER_COLOR
    for (r, c) in path:
        img[r, c] = PATH_COLOR
    if current is not None:
        img[current[0], current[1]] = CURRENT_COLOR
    return img


def legend_handles() -> list:
    return [
        Patch(facecolor=BLOCKED_COLOR, edgecolor="black", label="obstacle"),
        Patch(facecolor=EXPLORED_COLOR, edgecolor="black", label="explored"),
        Patch(facecolor=FRONTIER_COLOR, edgecolor="black", label="frontier"),
        Patch(facecolor=PATH_COLOR, edgecolor="black", label="path"),
    ]


def draw_grid(
    grid: Grid,
    out_path: str | Path,
    start: Pos,
    goal: Pos,
    path: Sequence[Pos] = (),
    explored: Iterable[Pos] = (),
    title: str = "Pathfinding grid",
) -> Path:
    """
    Draw a snapshot of the grid:
      - free cells: light background
      - obstacles: dark gray
      - explored cells: pale blue
      - path: green
      - start / goal: purple star / red cross
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    img = grid_image(grid, explored=explored, path=path)

    fig, ax = plt.subplots(figsize=(max(4.0, grid.width / 2.0), max(4.0, grid.height / 2.0)))
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, grid.width, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, grid.height, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    # x = column, y = row
    ax.scatter([start[1]], [start[0]], marker="*", s=150, c="#9467bd",
               edgecolors="white", linewidths=1.0, label="start")
    ax.scatter([goal[1]], [goal[0]], marker="X", s=110, c="#d62728",
               edgecolors="white", linewidths=0.7, label="goal")

    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(grid.height - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=16, y=0.98)

    handles, _ = ax.get_legend_handles_labels()
    handles.extend(legend_handles())
    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.94),
        ncol=3,
        fontsize=9,
        frameon=False,
    )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path
