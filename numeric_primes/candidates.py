"""
Prime candidate generation.

Every prime is 2 or odd, so the candidates for discovery are 2 followed by
the odd numbers from 3 upward. A negative starting value produces the same
magnitudes, negated.
"""

import math
from typing import Iterator, Optional

from .widths import BIG, Width


def _magnitudes(n: int, ceiling: Optional[int]) -> Iterator[int]:
    if n > 2:
        if n % 2 == 0:
            n += 1
    else:
        yield 2
        n = 3

    if ceiling is None:
        while True:
            yield n
            n += 2

    # Stop short of the ceiling so that n + 2 can never overflow the width.
    while n < ceiling:
        yield n
        n += 2


def starting_at(value: int, width: Width = BIG) -> Iterator[int]:
    """
    An increasing (in magnitude) sequence of all odd numbers excluding one,
    but including two, beginning with the value provided.

    Args:
        value: Where to start. A negative value yields negated candidates.
        width: Bounds the sequence to what the width can represent. Unsigned
            requests stop before max_value - 1, negative requests before
            signed_max. BIG is unbounded.

    Raises:
        ValueOutOfRangeError: If value does not fit the width
    """
    width.check(value)

    if value < 0:
        ceiling = width.signed_max
        return (-n for n in _magnitudes(-value, ceiling))

    ceiling = None if width.max_value is None else width.max_value - 1
    return _magnitudes(value, ceiling)


def starting_at_float(value: float) -> Iterator[int]:
    """
    Candidates for a float starting point.

    Negative values are floored and non-negative values ceiled, so the first
    candidate is never closer to zero than the value itself.

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot generate candidates from {value}")

    start = math.floor(value) if value < 0 else math.ceil(value)
    return starting_at(start, BIG)
