"""Snapshot PNGs, step replay and GIF output."""

import numpy as np

from animate import animate_search, build_frames, replay_states, sample_states
from pathfinding import get_algorithm
from steps import StepKind, StepRecorder
from viz import BLOCKED_COLOR, PATH_COLOR, draw_grid, grid_image


def _recorded(grid, name, start, goal):
    rec = StepRecorder()
    result = get_algorithm(name).run(grid, start, goal, recorder=rec)
    return result, rec


def test_grid_image_layers(center_blocked_grid):
    img = grid_image(center_blocked_grid, explored=[(0, 0)], path=[(0, 0), (0, 1)])
    assert img.shape == (3, 3, 3)
    assert np.allclose(img[1, 1], BLOCKED_COLOR)
    # path drawn over explored
    assert np.allclose(img[0, 0], PATH_COLOR)


def test_replay_ends_on_path(open_grid):
    result, rec = _recorded(open_grid, "AStar", (0, 0), (4, 4))
    states = replay_states(rec.events())
    assert states[-1].path == tuple(result.path)
    assert states[-1].current is None
    assert not states[-1].frontier
    n_frames = len(rec) - rec.count(StepKind.EXPAND)
    assert len(states) == n_frames


def test_replay_explored_grows(open_grid):
    _, rec = _recorded(open_grid, "BFS", (0, 0), (4, 4))
    sizes = [len(s.explored) for s in replay_states(rec)]
    assert sizes == sorted(sizes)
    assert sizes[-1] == rec.count(StepKind.EXPLORE)


def test_build_frames_subsamples(random_grids):
    grid = random_grids[1]
    goal = (grid.height - 1, grid.width - 1)
    _, rec = _recorded(grid, "Dijkstra", (0, 0), goal)
    states = sample_states(rec.events(), max_frames=20)
    assert 0 < len(states) <= 20
    full = replay_states(rec.events())
    assert states[0] == full[0]
    assert states[-1] == full[-1]
    frames = build_frames(grid, states)
    assert len(frames) == len(states)
    assert all(f.shape == (grid.height, grid.width, 3) for f in frames)


def test_draw_grid_writes_png(tmp_path, open_grid):
    result, _ = _recorded(open_grid, "BFS", (0, 0), (4, 4))
    out = draw_grid(open_grid, tmp_path / "snap" / "grid.png", (0, 0), (4, 4), path=result.path)
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_animate_search_writes_gif(tmp_path, center_blocked_grid):
    _, rec = _recorded(center_blocked_grid, "GBFS", (0, 0), (2, 2))
    out = animate_search(
        center_blocked_grid, rec.events(), (0, 0), (2, 2),
        out_path=tmp_path / "gbfs.gif", fps=5, hold_last=2,
    )
    assert out == tmp_path / "gbfs.gif"
    assert out.read_bytes()[:3] == b"GIF"


def test_animate_search_without_steps(tmp_path, open_grid, capsys):
    out = animate_search(open_grid, [], (0, 0), (4, 4), out_path=tmp_path / "empty.gif")
    assert out is None
    assert not (tmp_path / "empty.gif").exists()
    assert "skipping GIF" in capsys.readouterr().out
