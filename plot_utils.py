#!/usr/bin/env python3
"""
plot_utils.py

Plots for the benchmark CSV written by batch_run.py.

  - plot_boxplots_from_csv(): one seaborn boxplot per metric, one box per
    group (e.g. per algorithm, or per layout | algorithm)
  - plot_algorithm_bars(): a 2x2 panel of per-algorithm means, handy for
    a quick look at a single sweep

Typical workflow:

    python batch_run.py
    python plot_utils.py        # uses the DEFAULT_* constants at the bottom

or from Python:

    from plot_utils import plot_boxplots_from_csv

    plot_boxplots_from_csv(
        csv_path="outputs_batch/batch_results.csv",
        group_by=["layout", "algorithm"],
        metrics=["mean_nodes_explored", "mean_duration"],
        output_dir="outputs_batch/plots",
        show=False,
    )
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

import seaborn as sns

from errors import NotFoundError


PathLike = Union[str, Path]

GROUP_COL = "__group__"

TITLE_FONTSIZE = 18
AXIS_LABEL_FONTSIZE = 16
LEGEND_FONTSIZE = 11
MAX_LEGEND_COLS = 10

# panels for plot_algorithm_bars: (column, title)
BAR_PANELS: Tuple[Tuple[str, str], ...] = (
    ("mean_nodes_explored", "Nodes explored"),
    ("mean_comparisons", "Comparisons"),
    ("mean_max_frontier", "Max frontier size"),
    ("mean_duration", "Time (s)"),
)


def load_results(csv_path: PathLike, columns: Sequence[str] = ()) -> pd.DataFrame:
    """Read a benchmark CSV, checking that the requested columns exist."""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise NotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"column(s) {missing} not found in CSV. "
            f"Available columns include: {list(df.columns)[:20]} ..."
        )
    return df


def summarize(df: pd.DataFrame, group_by: Sequence[str], metric: str) -> pd.DataFrame:
    """Count / median / quartiles of `metric` per group."""
    return (
        df.groupby(list(group_by))[metric]
        .agg(
            n="count",
            median="median",
            q1=lambda s: s.quantile(0.25),
            q3=lambda s: s.quantile(0.75),
        )
    )


def _with_group_column(df: pd.DataFrame, group_by: List[str]) -> pd.DataFrame:
    """Copy of df with one string label per row, "a | b" for several columns."""
    df = df.copy()
    df[GROUP_COL] = df[group_by].astype(str).agg(" | ".join, axis=1)
    return df


def _boxplot(
    sub: pd.DataFrame,
    metric: str,
    categories: List[str],
    palette: Dict[str, tuple],
    figsize_per_group: float,
):
    width = max(6.0, figsize_per_group * max(1, len(categories)))
    fig, ax = plt.subplots(figsize=(width, 6))
    sns.boxplot(
        data=sub,
        x=GROUP_COL,
        y=metric,
        hue=GROUP_COL,
        order=categories,
        palette=palette,
        dodge=False,
        ax=ax,
    )
    plt.setp(ax.get_xticklabels(), rotation=45, ha="right")

    handles = [mpatches.Patch(color=palette[c], label=c) for c in categories]
    ax.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 1.08),
        ncol=min(len(handles), MAX_LEGEND_COLS),
        frameon=False,
        fontsize=LEGEND_FONTSIZE,
    )
    return fig, ax


def _finish(fig, out_path: Optional[Path], show: bool) -> Optional[Path]:
    if out_path is not None:
        fig.savefig(out_path, dpi=150, bbox_inches="tight")
        print(f"Saved plot to {out_path}")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return out_path


def plot_boxplots_from_csv(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    figsize_per_group: float = 1.5,
    x_axis_label: Optional[str] = None,
    seaborn_style: str = "whitegrid",
    palette_name: str = "colorblind",
    title_template: Optional[str] = None,
    y_axis_labels: Optional[Dict[str, str]] = None,
    log_scale: bool = True,
) -> List[Path]:
    """
    Boxplots of benchmark metrics, one figure per metric.

    Parameters
    ----------
    csv_path : str or Path
        Benchmark CSV (e.g. 'outputs_batch/batch_results.csv').
    group_by : list[str]
        Column(s) that define the boxes, e.g. ['algorithm'] or
        ['layout', 'algorithm']. Several columns are joined into one
        "a | b" label.
    metrics : list[str]
        Numeric columns, e.g. ['mean_nodes_explored', 'mean_duration'].
    output_dir : str or Path or None
        Where to write box_<metric>_by_<groups>.pdf. None = don't save.
    show : bool
        plt.show() each figure; otherwise figures are closed.
    log_scale : bool
        Log y-axis when every value is positive (runtimes span decades).

    Returns
    -------
    list[Path]
        Files written (empty when output_dir is None).
    """
    group_by = list(group_by)
    metrics = list(metrics)
    df = _with_group_column(load_results(csv_path, group_by + metrics), group_by)

    out_dir = Path(output_dir) if output_dir is not None else None
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[GROUP_COL].unique())
    palette = dict(zip(categories, sns.color_palette(palette_name, n_colors=len(categories))))
    x_label = x_axis_label if x_axis_label is not None else " | ".join(group_by)

    sns.set_style(seaborn_style)
    sns.set_context("paper", font_scale=1.2)

    written: List[Path] = []
    for metric in metrics:
        sub = df[[GROUP_COL, metric]].dropna()
        if sub.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        print(f"\n[STATS] {metric}")
        stats = summarize(sub, [GROUP_COL], metric).reindex(categories)
        print(stats.to_string(float_format=lambda x: f"{x:.4g}"))

        fig, ax = _boxplot(sub, metric, categories, palette, figsize_per_group)
        title = (
            title_template.format(metric=metric)
            if title_template is not None
            else f"{metric} by {', '.join(group_by)}"
        )
        ax.set_title(title, fontsize=TITLE_FONTSIZE, pad=28)
        ax.set_xlabel(x_label, fontsize=AXIS_LABEL_FONTSIZE)
        ax.set_ylabel((y_axis_labels or {}).get(metric, metric), fontsize=AXIS_LABEL_FONTSIZE)
        if log_scale and (sub[metric] > 0).all():
            ax.set_yscale("log")
        fig.tight_layout(rect=[0, 0, 1, 0.99])

        out_path = None
        if out_dir is not None:
            safe_metric = metric.replace(".", "_").replace(" ", "_")
            out_path = out_dir / f"box_{safe_metric}_by_{'_'.join(group_by)}.pdf"
            written.append(out_path)
        _finish(fig, out_path, show)

    return written


def plot_algorithm_bars(
    csv_path: PathLike,
    out_path: Optional[PathLike] = None,
    title: str = "Pathfinding comparison",
    show: bool = False,
) -> Optional[Path]:
    """
    2x2 bar panel of per-algorithm means over every row of the CSV:
    nodes explored, comparisons, max frontier size, runtime.
    """
    columns = ["algorithm"] + [col for col, _ in BAR_PANELS]
    df = load_results(csv_path, columns)
    means = df.groupby("algorithm", sort=False)[[col for col, _ in BAR_PANELS]].mean()

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (col, panel_title) in zip(axs.ravel(), BAR_PANELS):
        ax.bar(means.index, means[col], color=sns.color_palette("colorblind", n_colors=len(means)))
        ax.set_title(panel_title)
        ax.tick_params(axis="x", rotation=30)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])

    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
    return _finish(fig, out_path, show)


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_GROUP_BY = ["algorithm"]
DEFAULT_METRICS = ["mean_duration", "mean_nodes_explored", "path_length"]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    print(f"Reading CSV: {DEFAULT_CSV}")
    print(f"Grouping by: {DEFAULT_GROUP_BY}")
    print(f"Metrics: {DEFAULT_METRICS}")

    plot_boxplots_from_csv(
        csv_path=DEFAULT_CSV,
        group_by=DEFAULT_GROUP_BY,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
        x_axis_label="pathfinding algorithm",
        title_template="Pathfinding Algorithm Comparison: {metric}",
        y_axis_labels={
            "mean_duration": "Mean runtime (s)",
            "mean_nodes_explored": "Nodes explored",
            "path_length": "Path length (cells)",
        },
    )
    plot_algorithm_bars(DEFAULT_CSV, Path(DEFAULT_OUTPUT_DIR) / "algorithm_means.pdf", show=DEFAULT_SHOW)


if __name__ == "__main__":
    _run_with_defaults()
