from __future__ import annotations

"""Turn stored run records into a DataFrame with derived metrics."""

from typing import Iterable

import pandas as pd

from shortterm.results.schema import DatabaseRecord

from .metrics import compute_metrics

COLUMNS = ["run_idx", "date", "trials", "items", "total_score", "avg_duration"]


def records_to_frame(records: Iterable[DatabaseRecord]) -> pd.DataFrame:
    """One row per run, in log order, with metrics added.

    - run_idx is the 0-based position in the log (oldest first).
    - items is the number of numbers shown across all trials of the run.
    """
    rows = []
    for idx, rec in enumerate(records):
        rows.append(
            {
                "run_idx": idx,
                "date": rec.date,
                "trials": len(rec.results),
                "items": sum(r.count for r in rec.results),
                "total_score": rec.total_score,
                "avg_duration": rec.avg_duration,
            }
        )
    df = pd.DataFrame(rows, columns=COLUMNS)
    df = df.astype({"run_idx": "int64", "trials": "int64", "items": "int64", "total_score": "int64", "avg_duration": "float64"})
    return compute_metrics(df)
