# animate.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation

from grid import Grid, Pos
from steps import StepEvent, StepKind
from viz import grid_image, legend_handles


@dataclass(frozen=True)
class FrameState:
    """What the grid looks like right after one replayed event."""
    current: Optional[Pos]
    explored: FrozenSet[Pos]
    frontier: FrozenSet[Pos]
    path: Tuple[Pos, ...]
    description: str


def replay_states(events: Iterable[StepEvent]) -> List[FrameState]:
    """
    Walk a step log and return one FrameState per EXPLORE, FRONTIER_CHANGE
    and PATH_FOUND event. EXPAND events update nothing visible on their
    own (the following FRONTIER_CHANGE carries the same cells), so they
    produce no frame.
    """
    explored: set = set()
    frontier: set = set()
    current: Optional[Pos] = None
    path: Tuple[Pos, ...] = ()
    states: List[FrameState] = []

    for ev in events:
        if ev.kind is StepKind.EXPLORE:
            current = ev.positions[0]
            explored.add(current)
            frontier.discard(current)
        elif ev.kind is StepKind.FRONTIER_CHANGE:
            frontier.update(p for p in ev.positions if p not in explored)
        elif ev.kind is StepKind.PATH_FOUND:
            path = ev.positions
            current = None
            frontier.clear()
        else:
            continue

        states.append(FrameState(current, frozenset(explored), frozenset(frontier), path, ev.description))

    return states


def _subsample(n: int, max_frames: int) -> List[int]:
    """Evenly spaced frame indices, always keeping the first and last."""
    if n <= max_frames:
        return list(range(n))
    idx = np.linspace(0, n - 1, num=max_frames)
    return sorted(set(int(round(i)) for i in idx))


def sample_states(events: Iterable[StepEvent], max_frames: int = 300) -> List[FrameState]:
    """replay_states(), evenly subsampled down to at most max_frames."""
    states = replay_states(events)
    return [states[i] for i in _subsample(len(states), max_frames)]


def build_frames(grid: Grid, states: Sequence[FrameState]) -> List[np.ndarray]:
    """RGB frames (height, width, 3), one per state."""
    return [grid_image(grid, s.explored, s.frontier, s.path, s.current) for s in states]


def animate_search(
    grid: Grid,
    events: Iterable[StepEvent],
    start: Pos,
    goal: Pos,
    out_path: str | Path,
    title: str = "Pathfinding",
    fps: int = 10,
    max_frames: int = 300,
    hold_last: int = 10,
) -> Optional[Path]:
    """
    Build a GIF of a search: explored cells fill in, the frontier moves
    outwards, and the final path lights up at the end.

    - grid: the grid that was searched
    - events: StepRecorder.events() (or the recorder itself)
    - start / goal: drawn as markers on every frame
    - out_path: path to save the GIF
    - hold_last: number of extra copies of the final frame
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    states = sample_states(events, max_frames)
    if not states:
        print("No steps to animate; skipping GIF.")
        return None

    frames = build_frames(grid, states)
    frames.extend([frames[-1]] * hold_last)
    captions = [s.description for s in states] + [states[-1].description] * hold_last

    # ----- Matplotlib setup -----
    fig, ax = plt.subplots(figsize=(max(4.0, grid.width / 2.0), max(4.0, grid.height / 2.0)))
    im = ax.imshow(frames[0], origin="upper", animated=True)

    ax.scatter([start[1]], [start[0]], marker="*", s=150, c="#9467bd",
               edgecolors="white", linewidths=1.0, label="start")
    ax.scatter([goal[1]], [goal[0]], marker="X", s=110, c="#d62728",
               edgecolors="white", linewidths=0.7, label="goal")
    caption = ax.text(0.0, -0.03, captions[0], transform=ax.transAxes,
                      fontsize=8, va="top", ha="left", animated=True)

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
    fig.tight_layout(rect=[0.0, 0.03, 1.0, 0.88])

    def update(frame: int):
        im.set_array(frames[frame])
        caption.set_text(captions[frame])
        return (im, caption)

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=len(frames),
        interval=1000 / fps,
        blit=True,
    )

    writer = animation.PillowWriter(fps=fps)
    ani.save(out_path, writer=writer)
    plt.close(fig)
    print(f"Saved animation GIF to {out_path}")
    return out_path
