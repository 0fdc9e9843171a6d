from .config import AnalyticsConfig
from .metrics import compute_metrics
from .prepare import records_to_frame
from .smoothing import ewma_by_run
from .report import format_history
from .plots import plot_trend

__all__ = [
    "AnalyticsConfig",
    "compute_metrics",
    "records_to_frame",
    "ewma_by_run",
    "format_history",
    "plot_trend",
]
