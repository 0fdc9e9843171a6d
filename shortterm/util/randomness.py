from __future__ import annotations

"""Random number sequences for recall trials."""

import secrets
from typing import Callable, List


# Upper bound on rejected draws for a single element before giving up.
MAX_DRAWS_PER_NUMBER = 10_000


def generate_numbers(
    minimum: int,
    maximum: int,
    count: int,
    *,
    randbelow: Callable[[int], int] = secrets.randbelow,
) -> List[int]:
    """Draw ``count`` integers uniformly from ``[minimum, maximum)``.

    Every value is sampled from ``[0, maximum)`` with a cryptographically
    strong source and redrawn while it falls below ``minimum``. Repeated
    values are allowed.

    Args:
        minimum: Smallest value that may appear.
        maximum: Exclusive upper bound of the sampling range.
        count: How many numbers to produce; zero yields an empty list.
        randbelow: Source of ``[0, n)`` draws, replaceable in tests.

    Raises:
        ValueError: If the bounds or count are unusable.
        RuntimeError: If a single element keeps drawing below ``minimum``.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if maximum <= 0:
        raise ValueError(f"maximum must be positive, got {maximum}")
    if minimum >= maximum:
        raise ValueError(f"minimum ({minimum}) must be below maximum ({maximum})")

    numbers: List[int] = []
    for _ in range(count):
        for _attempt in range(MAX_DRAWS_PER_NUMBER):
            value = randbelow(maximum)
            if value >= minimum:
                numbers.append(value)
                break
        else:
            raise RuntimeError(
                f"no draw reached minimum {minimum} after {MAX_DRAWS_PER_NUMBER} attempts"
            )
    return numbers
