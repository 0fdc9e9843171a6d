from __future__ import annotations

"""Smoothing utilities (EWMA by run)."""

import pandas as pd


def ewma_by_run(df: pd.DataFrame, value_col: str, span: int) -> pd.DataFrame:
    """Apply EWMA smoothing over run order.

    Returns a copy of df sorted by run_idx with a new column f"{value_col}_smooth".
    """
    g = df.sort_values("run_idx").copy()
    g[f"{value_col}_smooth"] = g[value_col].astype("float64").ewm(span=span).mean()
    return g
