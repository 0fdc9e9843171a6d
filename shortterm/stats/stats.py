from __future__ import annotations

"""Run summaries: per-trial and whole-run lines shown to the user."""

from ..results.schema import DatabaseRecord, TestResult


def format_trial(result: TestResult) -> str:
    """Return the feedback shown after a single trial."""
    return f"Score: {result.score}/{result.count}\nDuration: {result.duration:.2f}s"


def format_summary(record: DatabaseRecord) -> str:
    """Return a human-readable summary of a run."""
    possible = sum(r.count for r in record.results)
    lines = [
        f"Total score: {record.total_score}/{possible}",
        f"Average duration: {record.avg_duration:.2f}s",
    ]
    return "\n".join(lines)
