"""Short-term memory trainer.

Shows sequences of random numbers, asks for them back, scores the recall
with a matching-prefix rule and keeps a JSON history of every run.
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]
