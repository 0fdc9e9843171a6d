from __future__ import annotations

"""Session Manager: runs the configured trials and builds the run record.

It is front-end agnostic: the plain and full-screen terminals both plug in
through the same ``Terminal`` calls.
"""

import secrets
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..drills.recall_drill import DrillContext, RecallDrill
from ..results.schema import DatabaseRecord, TestResult
from ..stats.stats import format_summary, format_trial
from ..ui import Terminal
from .explain import trace as xtrace


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class SessionContext:
    trials: int
    dry: bool
    drill: DrillContext


class SessionManager:
    def __init__(
        self,
        cfg: Dict[str, Any],
        *,
        clock: Callable[[], float] = time.monotonic,
        randbelow: Callable[[int], int] = secrets.randbelow,
        now: Callable[[], datetime] = _local_now,
    ) -> None:
        test = cfg["test"]
        self.ctx = SessionContext(
            trials=int(test["trials"]),
            dry=bool(cfg.get("ui", {}).get("dry", False)),
            drill=DrillContext(
                minimum=int(test["min"]),
                maximum=int(test["max"]),
                numbers=int(test["numbers"]),
            ),
        )
        self._drill = RecallDrill(self.ctx.drill, clock=clock, randbelow=randbelow)
        self._now = now
        self.results: List[TestResult] = []
        self.ended_at: Optional[datetime] = None

    def run(self, terminal: Terminal) -> DatabaseRecord:
        """Run every trial on ``terminal`` and return the run record.

        In dry mode each trial's score and duration are shown and
        acknowledged before the next one, followed by a run summary.
        """
        xtrace("run_started", {"trials": self.ctx.trials, "numbers": self.ctx.drill.numbers})
        terminal.clear()
        self.results = []
        for i in range(1, self.ctx.trials + 1):
            result = self._drill.run_trial(terminal, index=i)
            if self.ctx.dry:
                terminal.inform(format_trial(result))
                terminal.wait_confirm()
                terminal.clear()
            self.results.append(result)

        self.ended_at = self._now()
        record = DatabaseRecord.from_results(self.ended_at.isoformat(sep=" "), self.results)
        if self.ctx.dry:
            terminal.inform(format_summary(record))
        return record
