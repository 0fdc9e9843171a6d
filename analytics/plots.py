from __future__ import annotations

"""Matplotlib trend chart of past runs."""

import os
from typing import Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402


def plot_trend(
    df: pd.DataFrame,
    *,
    value_col: str = "accuracy",
    save_path: Optional[str | os.PathLike[str]] = None,
) -> bool:
    """Plot ``value_col`` per run, plus its smoothed line when present.

    Returns False without drawing when there is nothing to plot.
    """
    if df.empty:
        return False
    g = df.sort_values("run_idx")
    plt.figure()
    plt.plot(g["run_idx"] + 1, g[value_col], marker="o", linestyle="", label=value_col)
    smooth_col = f"{value_col}_smooth"
    if smooth_col in g.columns:
        plt.plot(g["run_idx"] + 1, g[smooth_col], linewidth=2, label=f"{value_col} (EWMA)")
    plt.xlabel("Run")
    plt.ylabel(value_col)
    plt.title(f"Trend: {value_col}")
    plt.legend()
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()
    return True
