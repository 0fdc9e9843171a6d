from __future__ import annotations

"""Answer parsing and prefix scoring."""

from typing import List, Sequence

from ..app.explain import trace as xtrace


def parse_numbers(text: str) -> List[int]:
    """Split a typed answer on whitespace into integers.

    Tokens that are not integers count as 0 so the position is kept.
    """
    numbers: List[int] = []
    for position, token in enumerate(text.split()):
        try:
            numbers.append(int(token))
        except ValueError:
            xtrace("coerced_token", {"position": position, "token": token})
            numbers.append(0)
    return numbers


def prefix_score(expected: Sequence[int], actual: Sequence[int]) -> int:
    """Count leading positions where both sequences agree.

    Stops at the first mismatch or when the shorter sequence runs out, so a
    single early slip forfeits everything after it.
    """
    score = 0
    for want, got in zip(expected, actual):
        if want != got:
            break
        score += 1
    return score
