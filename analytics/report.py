from __future__ import annotations

"""Plain-text history table for the terminal."""

import pandas as pd


def format_history(df: pd.DataFrame, limit: int = 10) -> str:
    """Return the most recent ``limit`` runs as an aligned table, oldest first."""
    if df.empty:
        return "No runs recorded yet."
    recent = df.sort_values("run_idx").tail(limit)
    table = pd.DataFrame(
        {
            "run": recent["run_idx"] + 1,
            "date": recent["date"].astype(str).str.slice(0, 19),
            "score": recent["total_score"].astype(str) + "/" + recent["items"].astype(str),
            "accuracy": (recent["accuracy"] * 100).map(lambda v: f"{v:.1f}%"),
            "avg s": recent["avg_duration"].map(lambda v: f"{v:.2f}"),
        }
    )
    lines = [table.to_string(index=False)]
    lines.append(f"Runs: {len(df)}  Best accuracy: {df['accuracy'].max() * 100:.1f}%")
    return "\n".join(lines)
