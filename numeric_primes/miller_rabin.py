"""
Miller-Rabin primality testing.

Two flavors:
- is_prime: deterministic for 64-bit values. Fixed witness sets are proven
  sufficient below known bounds, so no randomness is involved. Arithmetic
  goes through the fixed-width modular kernel.
- is_probable_prime: probabilistic for arbitrary precision values, using
  `certainty` random bases drawn from the OS entropy source. Composites are
  rejected with probability at least 1 - 4**-certainty; primes are never
  rejected.
"""

import logging
import secrets
from typing import Optional

from .config import get_settings
from .constants import U64_MAX, get_witnesses
from .primality import PrimalityBase, PrimalityBigIntBase, PrimalityU64Base
from .utils.modular import mulmod, mulmod_big, powmod, powmod_big
from .utils.number_utils import calculate_bit_length, to_integer
from .widths import U64 as U64_WIDTH

logger = logging.getLogger(__name__)


def _decompose(value: int):
    """Write value - 1 as d * 2**s with d odd."""
    d = value - 1
    s = 0
    while d & 1 == 0:
        d >>= 1
        s += 1
    return d, s


def _is_prime_deterministic(value: int) -> bool:
    """Witness loop for an odd 64-bit value greater than 3."""
    d, s = _decompose(value)

    for b in get_witnesses(value):
        x = powmod(min(b, value - 2), d, value)
        if x == 1 or x == value - 1:
            continue

        for _ in range(s - 1):
            x = mulmod(x, x, value)
            if x == value - 1:
                break
        else:
            return False

    return True


def is_prime(value: int) -> bool:
    """
    Deterministic Miller-Rabin test for 64-bit values.

    Negative values are tested by magnitude.

    Raises:
        ValueOutOfRangeError: If abs(value) exceeds 64 bits

    Example:
        >>> is_prime(8592868089022906369)
        True
    """
    value = abs(U64_WIDTH.check(to_integer(value)))

    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0 or value % 3 == 0:
        return False

    return _is_prime_deterministic(value)


def is_probable_prime(value: int, certainty: Optional[int] = None) -> bool:
    """
    Probabilistic Miller-Rabin test for arbitrary precision values.

    Values that fit 64 bits take the deterministic path instead.

    Args:
        value: Value to test (sign is ignored)
        certainty: Number of random rounds (default from settings)

    Returns:
        True if probably prime, False if definitely composite
    """
    value = abs(to_integer(value))

    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0:
        return False

    if value <= U64_MAX:
        return value % 3 != 0 and _is_prime_deterministic(value)

    if certainty is None:
        certainty = get_settings().probable_prime_certainty

    d, s = _decompose(value)

    # Random bases are sized to the bit length of the value and
    # rejected until they fall in [2, value - 2).
    rng = secrets.SystemRandom()
    bits = calculate_bit_length(value)

    for _ in range(certainty):
        a = rng.getrandbits(bits)
        while a < 2 or a >= value - 2:
            a = rng.getrandbits(bits)

        x = powmod_big(a, d, value)
        if x == 1 or x == value - 1:
            continue

        for _ in range(s - 1):
            x = mulmod_big(x, x, value)
            if x == 1:
                return False
            if x == value - 1:
                break
        else:
            return False

    logger.debug(f"{value} passed {certainty} probabilistic rounds")
    return True


class U64(PrimalityU64Base):
    """Deterministic Miller-Rabin discovery over 64-bit values."""

    def _is_prime_internal(self, value: int) -> bool:
        return _is_prime_deterministic(value)


class BigInt(PrimalityBigIntBase):
    """Probabilistic Miller-Rabin discovery over arbitrary precision values."""

    def __init__(self, small: Optional[PrimalityBase] = None,
                 certainty: Optional[int] = None):
        super().__init__(small or U64())
        self.certainty = certainty

    def _is_prime_internal(self, value: int) -> bool:
        return is_probable_prime(value, self.certainty)
