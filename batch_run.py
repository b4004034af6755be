#!/usr/bin/env python3
"""
Batch experiment runner.

This script is meant for *offline experiments* where you want to:

- Sweep over many grid configurations (size, layout, density, seed).
- Benchmark every pathfinding algorithm on each grid (no PNG / GIF output).
- Collect all metrics into a single CSV file for analysis.

High-level behavior
-------------------

1. Build the parameter grid from batch_config.PARAM_GRID.
2. For each combination:
   - Build Config + Grid.
   - Run BenchmarkRunner over batch_config.ALGORITHMS.
   - Turn every BenchmarkStats into one CSV row (params + grid.* + stats).
3. Use multiprocessing to parallelize combinations across CPU cores.
4. Append rows to `outputs_batch/batch_results.csv`.

If `outputs_batch/batch_results.csv` already exists its header fixes the
column order and new rows are appended with the same schema.

Usage
-----

From the repo root:

    python batch_run.py

Then plot the results:

    python plot_utils.py
"""

import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional
import traceback

from batch_config import ALGORITHMS, CPU_COUNT, PARAM_GRID
from benchmark import BenchmarkRunner
from config import Config
from grid import make_grid
from heuristics import get_heuristic
from io_utils import append_rows_csv, flatten_dict


def iter_param_combinations(grid: Dict[str, List[Any]]) -> Iterator[Dict[str, Any]]:
    """Yield dicts for each combination in the parameter grid."""
    keys = list(grid.keys())
    value_lists = [grid[k] for k in keys]
    for combo in itertools.product(*value_lists):
        yield dict(zip(keys, combo))


def run_single_experiment(
    purpose: str,                # meta label, not used in the search, just for CSV
    rows: int,
    cols: int,
    layout: str,
    obstacle_density: float,
    heuristic: str,
    iterations: int,
    seed: int,
    algorithms: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Build ONE grid with the given parameters, benchmark the algorithms on
    it, and return one dict per algorithm (grid facts nested under "grid").
    """
    cfg = Config(
        rows=rows,
        cols=cols,
        layout=layout,
        obstacle_density=obstacle_density,
        seed=seed,
        heuristic=heuristic,
        iterations=iterations,
        render=False,
        log_events=False,
    )
    grid = make_grid(cfg)

    runner = BenchmarkRunner()
    stats = runner.run(
        algorithms if algorithms is not None else ALGORITHMS,
        grid,
        cfg.start_pos(),
        cfg.goal_pos(),
        iterations=cfg.iterations,
        heuristic=get_heuristic(cfg.heuristic),
    )

    grid_info = {"obstacles": grid.obstacle_count, "open_cells": len(grid.open_cells())}
    return [{"grid": grid_info, **s.as_row()} for s in stats.values()]


def run_one(params: Dict[str, Any]) -> Optional[List[Dict[str, Any]]]:
    """
    Worker function for each process.

    - Calls run_single_experiment(**params).
    - Returns [{params..., "grid.obstacles", ..., stats...}, ...], one flat
      dict per algorithm, ready for the CSV.
    - If the run fails, returns None and prints an error.
    """
    params = dict(params)

    try:
        rows = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] run_single_experiment failed for params={params}: {e}")
        traceback.print_exc()
        # returning None tells the caller to skip this combination
        return None

    return [flatten_dict({**params, **row}) for row in rows]


def main_batch(out_path: Path = Path("outputs_batch") / "batch_results.csv") -> int:
    combos = list(iter_param_combinations(PARAM_GRID))
    total = len(combos)
    if total == 0:
        print("No parameter combinations to run. Check PARAM_GRID.")
        return 0

    num_procs = CPU_COUNT if CPU_COUNT is not None else mp.cpu_count()
    print(f"Total experiments to run: {total} (x{len(ALGORITHMS)} algorithms) using {num_procs} processes")

    done = 0
    written = 0
    with mp.Pool(processes=num_procs) as pool:
        for rows in pool.imap_unordered(run_one, combos):
            done += 1
            if rows is None:
                # this run failed; already logged, so just skip it
                continue

            append_rows_csv(rows, out_path, first_columns=("purpose", "algorithm"))
            written += len(rows)
            if done % 10 == 0 or done == total:
                print(f"Completed {done}/{total} experiments")

    print(f"All done. {written} rows in {out_path}")
    return written


if __name__ == "__main__":
    main_batch()
