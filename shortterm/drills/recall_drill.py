from __future__ import annotations

"""Number recall drill: show a sequence, hide it, ask for it back."""

import secrets
import time
from dataclasses import dataclass
from typing import Callable, List

from ..app.explain import trace as xtrace
from ..results.schema import TestResult
from ..ui import Terminal
from ..util.randomness import generate_numbers
from .scoring import parse_numbers, prefix_score


@dataclass(frozen=True)
class DrillContext:
    """Parameters shared by every trial of a run."""

    minimum: int
    maximum: int
    numbers: int


class RecallDrill:
    def __init__(
        self,
        ctx: DrillContext,
        *,
        clock: Callable[[], float] = time.monotonic,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        self.ctx = ctx
        self.clock = clock
        self.randbelow = randbelow

    def next_sequence(self) -> List[int]:
        return generate_numbers(self.ctx.minimum, self.ctx.maximum, self.ctx.numbers, randbelow=self.randbelow)

    def run_trial(self, terminal: Terminal, index: int = 1) -> TestResult:
        """Run one trial on ``terminal`` and score it.

        Duration runs from just before the numbers appear until the answer
        is confirmed, so memorising time counts.
        """
        expected = self.next_sequence()
        started = self.clock()
        terminal.show(" ".join(str(n) for n in expected))
        xtrace("trial_shown", {"index": index, "numbers": len(expected)})
        terminal.wait_confirm()
        terminal.clear()

        answer = terminal.read_answer()
        finished = self.clock()
        terminal.clear()

        actual = parse_numbers(answer)
        score = prefix_score(expected, actual)
        duration = max(finished - started, 0.0)
        xtrace("trial_scored", {"index": index, "score": score, "duration": round(duration, 3)})
        return TestResult(score=score, duration=duration, count=self.ctx.numbers)
