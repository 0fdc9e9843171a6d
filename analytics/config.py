from __future__ import annotations

"""Analytics configuration (hyperparameters) using Pydantic."""

from pydantic import BaseModel, Field


class AnalyticsConfig(BaseModel):
    """Settings for history reports.

    - smoothing_span: EWMA span in runs (>1)
    - history_limit: number of most recent runs listed by --history (>0)
    """

    smoothing_span: int = Field(5, gt=1)
    history_limit: int = Field(10, gt=0)
