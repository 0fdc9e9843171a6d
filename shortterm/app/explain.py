from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with ``--explain`` and emit terse, readable lines at milestones of a
run: trial shown, token coerced, trial scored, run saved.
"""

import json
import sys
from typing import Any, Dict, TextIO

_ENABLED = False
_STREAM: TextIO | None = None


def enable(flag: bool = True, stream: TextIO | None = None) -> None:
    global _ENABLED, _STREAM
    _ENABLED = bool(flag)
    _STREAM = stream


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    out = _STREAM or sys.stderr
    try:
        data = json.dumps(payload or {}, separators=(",", ":"))
    except (TypeError, ValueError):
        data = "{}"
    print(f"[EXPLAIN] {event} :: {data}", file=out)
