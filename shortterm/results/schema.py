from __future__ import annotations

"""Pydantic models for trial results and persisted run records."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TestResult(BaseModel):
    """Outcome of one display-then-recall trial."""

    model_config = ConfigDict(frozen=True)

    # Keep pytest from collecting this model as a test class.
    __test__ = False

    score: int = Field(ge=0)
    duration: float = Field(ge=0)
    count: int = Field(ge=0)

    @model_validator(mode="after")
    def _score_le_count(self) -> "TestResult":
        if self.score > self.count:
            raise ValueError("score must be <= count")
        return self


class DatabaseRecord(BaseModel):
    """Summary of one whole run, as stored in the history log."""

    model_config = ConfigDict(frozen=True)

    date: str
    avg_duration: float = Field(ge=0)
    total_score: int = Field(ge=0)
    results: List[TestResult] = Field(default_factory=list)

    @classmethod
    def from_results(cls, date: str, results: List[TestResult]) -> "DatabaseRecord":
        total_score = sum(r.score for r in results)
        avg_duration = sum(r.duration for r in results) / len(results) if results else 0.0
        return cls(date=date, avg_duration=avg_duration, total_score=total_score, results=list(results))
