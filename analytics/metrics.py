from __future__ import annotations

"""Metric computations for per-run analytics."""

import numpy as np
import pandas as pd


def compute_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """Add accuracy and score-per-second columns.

    Returns a copy with added columns:
    - accuracy: total_score / items, 0 for runs with no items
    - score_rate: points per second of average trial time, 0 when no time
    """
    out = df.copy()
    items = out["items"].astype("float64").to_numpy()
    score = out["total_score"].astype("float64").to_numpy()
    out["accuracy"] = np.divide(score, items, out=np.zeros_like(score), where=items > 0)

    trials = out["trials"].astype("float64").to_numpy()
    per_trial = np.divide(score, trials, out=np.zeros_like(score), where=trials > 0)
    avg = out["avg_duration"].astype("float64").to_numpy()
    out["score_rate"] = np.divide(per_trial, avg, out=np.zeros_like(per_trial), where=avg > 0)
    return out
