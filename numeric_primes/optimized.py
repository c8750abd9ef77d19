"""
The recommended primality dispatcher.

Below PERF_PIVOT the polynomial test is faster; at and above it Miller-Rabin
wins. Values beyond 64 bits are filtered by probabilistic Miller-Rabin and
then confirmed with the deterministic polynomial test. The confirmation is
slow for large primes, but no deterministic witness set exists at unbounded
magnitude (a Lucas-Selfridge stage would remove the probabilistic step).
"""

import logging
from itertools import chain
from typing import Iterator, Optional

from . import miller_rabin, polynomial
from .constants import PERF_PIVOT, U64_MAX
from .primality import PrimalityBigIntBase, PrimalityU64Base
from .widths import U32

logger = logging.getLogger(__name__)


class Optimized(PrimalityU64Base):
    """Magnitude-dispatched primality for 64-bit values."""

    def __init__(self):
        self.big = BigInt(self)

    def _is_prime_internal(self, value: int) -> bool:
        if value < PERF_PIVOT:
            return polynomial.is_prime_from(value, 6, U32)
        return miller_rabin.is_prime(value)


class BigInt(PrimalityBigIntBase):
    """Magnitude-dispatched primality for arbitrary precision values."""

    def __init__(self, small: Optional[Optimized] = None,
                 certainty: Optional[int] = None):
        super().__init__(small or Optimized())
        self.certainty = certainty

    def _is_prime_internal(self, value: int) -> bool:
        if not miller_rabin.is_probable_prime(value, self.certainty):
            return False

        logger.debug(f"{value} is a probable prime, confirming deterministically")
        return polynomial.is_prime_from(value, 6)

    def in_parallel(self, starting_at: int = 2,
                    degree_of_parallelism: Optional[int] = None) -> Iterator[int]:
        if starting_at < 0 or starting_at >= U64_MAX:
            return super().in_parallel(starting_at, degree_of_parallelism)

        # 64-bit discovery is cheaper; continue in arbitrary precision past it.
        return chain(
            self._small.in_parallel(starting_at, degree_of_parallelism),
            super().in_parallel(U64_MAX, degree_of_parallelism)
        )


Optimized.BigInt = BigInt
