from pathlib import Path
from typing import Any, Dict

from animate import animate_search
from benchmark import BenchmarkRunner
from config import Config
from errors import ValidationError
from grid import make_grid
from heuristics import get_heuristic
from io_utils import make_run_dir, save_config, save_summary
from pathfinding import get_algorithm
from steps import StepKind, StepRecorder
from viz import draw_grid


def main(cfg: Config | None = None) -> Dict[str, Any]:
    """
    Single-run entry point for the pathfinding lab.

    Typical usage for a user:
      1. Open config.py and edit the Config defaults
         (grid size, layout, obstacle density, algorithms, heuristic, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (PNG, GIF, summary.json).
    """
    # ------------------------------------------------------------------
    # 1) Grid, endpoints, heuristic, algorithms
    # ------------------------------------------------------------------
    cfg = cfg if cfg is not None else Config()
    log = print if cfg.log_events else (lambda *_: None)

    # Bad names / endpoints raise here, before anything is written.
    grid = make_grid(cfg)
    start, goal = cfg.start_pos(), cfg.goal_pos()
    grid.validate_endpoints(start, goal)
    heuristic = get_heuristic(cfg.heuristic)
    planners = [get_algorithm(name) for name in cfg.algorithms]
    if isinstance(cfg.iterations, bool) or not isinstance(cfg.iterations, int) or cfg.iterations < 1:
        raise ValidationError(f"iterations must be a positive integer, got {cfg.iterations!r}")

    # ------------------------------------------------------------------
    # 2) Output directory
    # ------------------------------------------------------------------
    run_dir = make_run_dir(cfg)
    save_config(cfg, run_dir)

    log(f"[INIT] {cfg.rows}x{cfg.cols} {cfg.layout} grid, {grid.obstacle_count} obstacles, "
        f"start={start}, goal={goal}, heuristic={cfg.heuristic}")

    if cfg.render:
        draw_grid(grid, run_dir / "grid.png", start, goal, title=f"{cfg.layout} grid")

    # ------------------------------------------------------------------
    # 3) One recorded run per algorithm (for pictures + summary)
    # ------------------------------------------------------------------
    summary: Dict[str, Any] = {
        "grid": {
            "rows": grid.height,
            "cols": grid.width,
            "layout": cfg.layout,
            "obstacles": grid.obstacle_count,
            "start": list(start),
            "goal": list(goal),
        },
        "runs": {},
    }

    for algo in planners:
        recorder = StepRecorder()
        result = algo.run(grid, start, goal, heuristic=heuristic, recorder=recorder)

        log(f"[RUN] {algo.label}: found={result.found} path_length={result.path_length} "
            f"explored={result.counter.nodes_explored} comparisons={result.counter.comparisons} "
            f"max_frontier={result.counter.max_frontier_size} steps={len(recorder)}")

        entry = result.summary()
        entry["label"] = algo.label
        entry["complexity"] = algo.complexity
        entry["optimal"] = algo.optimal
        entry["steps"] = {kind.value: recorder.count(kind) for kind in StepKind}
        summary["runs"][algo.name] = entry

        if cfg.render:
            explored = [e.positions[0] for e in recorder.events() if e.kind is StepKind.EXPLORE]
            draw_grid(
                grid, run_dir / f"{algo.name}_result.png", start, goal,
                path=result.path, explored=explored, title=algo.label,
            )
            animate_search(
                grid, recorder.events(), start, goal,
                out_path=run_dir / f"{algo.name}.gif",
                title=algo.label, fps=cfg.fps, max_frames=cfg.max_frames,
            )

    # ------------------------------------------------------------------
    # 4) Benchmark all selected algorithms on the same grid
    # ------------------------------------------------------------------
    runner = BenchmarkRunner(workers=cfg.workers, log_events=cfg.log_events)
    stats = runner.run(planners, grid, start, goal, iterations=cfg.iterations, heuristic=heuristic)
    summary["benchmark"] = {name: s.as_row() for name, s in stats.items()}

    save_summary(summary, run_dir)

    print(f"Run directory: {run_dir}")
    return summary


if __name__ == "__main__":
    main()
