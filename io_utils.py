# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import csv
import json
from typing import Any, Dict, Iterable, List, Optional
from config import Config
import uuid


def make_run_dir(cfg: Config, base: Optional[str] = None, label: Optional[str] = None) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (grid size, layout, seed, ...).
    base : str, optional
        Base directory under which the run folder is created. Defaults to
        cfg.output_base ("outputs").
    label : str, optional
        Extra tag appended to the folder name (e.g. "bench").

    Folder naming
    -------------
    The folder name encodes:
      - grid size (rows x cols)
      - layout
      - random seed
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_R20x20_random_seed0_20251216-213012_ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base if base is not None else cfg.output_base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = [
        f"R{cfg.rows}x{cfg.cols}",
        cfg.layout,
        f"seed{cfg.seed}",
    ]
    if label:
        parts.append(label)

    base_name = "run_" + "_".join(parts)

    # timestamp + short random suffix so repeated runs never collide
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    run_dir = base_path / f"{base_name}_{ts}-{uid}"

    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> Path:
    """
    Serialize the Config object for this run into JSON.

    This is a full record of how the grid was generated and which
    algorithms ran, so a run can be reproduced from its folder alone.
    """
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return out_path


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> Path:
    """
    Save the summary metrics for a run as a JSON file.

    The structure is nested (e.g. "AStar.counter.nodes_explored") so it
    can be flattened into CSV columns with flatten_dict() or loaded as-is.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
    return out_path


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def append_rows_csv(rows: Iterable[Dict[str, Any]], out_path: Path, first_columns: Iterable[str] = ()) -> Path:
    """
    Append rows to a CSV file, creating it (with a header) if needed.

    If the file already exists its header fixes the column order; keys
    not in that header are ignored. For a new file the columns are the
    sorted keys of the first row, with `first_columns` moved to the front.
    """
    rows = list(rows)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        return out_path

    fieldnames: Optional[List[str]] = None
    if out_path.exists():
        with out_path.open("r", newline="") as f:
            reader = csv.reader(f)
            try:
                fieldnames = next(reader)
            except StopIteration:
                fieldnames = None

    write_header = fieldnames is None
    if fieldnames is None:
        fieldnames = sorted(rows[0].keys())
        for col in reversed(list(first_columns)):
            if col in fieldnames:
                fieldnames.remove(col)
                fieldnames.insert(0, col)

    with out_path.open("a" if not write_header else "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return out_path
