"""
Deterministic primality by the 6k+-1 wheel.

Every prime above 3 has the form 6k-1 or 6k+1, so after ruling out 2 and 3
only those divisors need to be tried, up to the square root of the value.

The divisor loop is bounded per width: once the divisor passes the largest
value whose square fits the current width, the test resumes in the next
wider width from the same divisor, so no work is repeated.
"""

import logging
from typing import Optional

from .primality import PrimalityBase, PrimalityBigIntBase, PrimalityU32Base, PrimalityU64Base
from .utils.number_utils import to_integer
from .widths import BIG, U32 as U32_WIDTH, U64 as U64_WIDTH, Width, width_of

logger = logging.getLogger(__name__)


def is_prime_from(value: int, divisor: int = 6, width: Width = BIG) -> bool:
    """
    Test value against 6k+-1 divisors starting at divisor.

    Args:
        value: Positive value not divisible by 2 or 3
        divisor: Multiple of 6 to resume from
        width: Width whose arithmetic the loop starts in

    Returns:
        True if no divisor up to sqrt(value) + 1 divides value
    """
    max_divisor = width.max_divisor
    while divisor * divisor - 2 * divisor + 1 <= value:
        if value % (divisor - 1) == 0:
            return False

        if value % (divisor + 1) == 0:
            return False

        divisor += 6

        if max_divisor is not None and divisor > max_divisor:
            logger.debug(f"Divisor {divisor} exceeds {width} range for {value}, resuming in {width.wider}")
            width = width.wider
            max_divisor = width.max_divisor

    return True


def is_prime(value: int) -> bool:
    """
    Return True if value is prime (negative values by magnitude).

    Example:
        >>> is_prime(8191)
        True
        >>> is_prime(-25)
        False
    """
    value = abs(to_integer(value))
    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0 or value % 3 == 0:
        return False

    return is_prime_from(value, 6, width_of(value))


class U32(PrimalityU32Base):
    """Polynomial discovery over 32-bit values."""

    def _is_prime_internal(self, value: int) -> bool:
        return is_prime_from(value, 6, U32_WIDTH)


class U64(PrimalityU64Base):
    """Polynomial discovery over 64-bit values."""

    def _is_prime_internal(self, value: int) -> bool:
        return is_prime_from(value, 6, U64_WIDTH)


class BigInt(PrimalityBigIntBase):
    """Polynomial discovery over arbitrary precision values."""

    def __init__(self, small: Optional[PrimalityBase] = None):
        super().__init__(small or U64())

    def _is_prime_internal(self, value: int) -> bool:
        return is_prime_from(value, 6, BIG)
