"""
Prime discovery by trial division.

The baseline algorithm: a candidate is prime when none of the primes found
before it, up to its square root, divides it. Discovery is seeded with the
first 100 primes (up to 541).

The plain variants re-derive the discovered prefix on every enumeration.
The Memoized variants share one append-only cache per instance, so each
prime is discovered exactly once no matter how many enumerations run.

Time grows without bound with magnitude; this strategy is a reference
point, not something to run standalone on large values.
"""

import logging
import threading
from bisect import bisect_left
from itertools import dropwhile, islice, takewhile
from math import isqrt
from typing import Iterator, List, Optional

from .constants import FIRST_KNOWN, LAST_KNOWN
from .primality import PrimalityBase, PrimalityU32Base, PrimalityU64Base
from .utils.memoize import LazyList
from .utils.parallel import ordered_parallel_filter

logger = logging.getLogger(__name__)


def _is_known(value: int) -> bool:
    """Binary search the seed primes."""
    i = bisect_left(FIRST_KNOWN, value)
    return i < len(FIRST_KNOWN) and FIRST_KNOWN[i] == value


class _TrialDivisionMixin(PrimalityBase):
    """Discovery and testing shared by the 32 and 64-bit variants."""

    def __iter__(self) -> Iterator[int]:
        return self._all_primes()

    def _all_primes(self) -> Iterator[int]:
        yield from FIRST_KNOWN
        yield from self._all_primes_after(list(FIRST_KNOWN))

    def _all_primes_after(self, known: List[int]) -> Iterator[int]:
        for n in self._valid_prime_tests(known[-1] + 2):
            last = 1
            for p in known:
                stop = n // last  # The list of possibilities shrinks for each test.
                if p > stop:
                    known.append(n)
                    yield n
                    break
                if n % p == 0:
                    break
                last = p

    def starting_at(self, value: int) -> Iterator[int]:
        value = self.width.check(value)
        if value < 0:
            ceiling = self.width.signed_max
            return (-p for p in takewhile(lambda p: p < ceiling, self.starting_at(-value)))

        return dropwhile(lambda n: n < value, self._all_primes())

    def in_parallel(self, starting_at: int = 2,
                    degree_of_parallelism: Optional[int] = None) -> Iterator[int]:
        if starting_at < 0 or starting_at > LAST_KNOWN:
            return super().in_parallel(starting_at, degree_of_parallelism)

        def source():
            # Seed primes need no testing but keep the same ordered pipeline.
            yield from (p for p in FIRST_KNOWN if p >= starting_at)
            yield from self._valid_prime_tests(LAST_KNOWN + 2)

        return ordered_parallel_filter(source(), self.is_prime, degree_of_parallelism)

    def _is_factorable(self, value: int) -> bool:
        # Do not do a prime check first: is_prime itself factors.
        return True

    def _is_prime_internal(self, value: int) -> bool:
        if value <= LAST_KNOWN:
            return _is_known(value)

        # Prime when the factors are only the sign token and the value itself.
        return next(islice(self._factors(value), 2, None), None) is None


class _MemoizedMixin(_TrialDivisionMixin):
    """Trial division backed by a per-instance LazyList of discovered primes."""

    def __init__(self):
        self._memoized: Optional[LazyList[int]] = None
        self._memoized_lock = threading.Lock()

    def _all_primes(self) -> Iterator[int]:
        memoized = self._memoized
        if memoized is None:
            with self._memoized_lock:
                if self._memoized is None:
                    logger.debug(f"Creating prime cache for {self!r}")
                    self._memoized = LazyList(self._all_primes_memoizable())
                memoized = self._memoized
        return iter(memoized)

    def _all_primes_memoizable(self) -> Iterator[int]:
        yield from FIRST_KNOWN

        # Recursive by nature: each new prime is tested against the cache,
        # which only ever needs primes discovered before it.
        for n in self._valid_prime_tests(LAST_KNOWN + 1):
            if self.is_prime(n):
                yield n

    def _is_prime_internal(self, value: int) -> bool:
        if value <= LAST_KNOWN:
            return _is_known(value)

        root = isqrt(value)
        for p in self._all_primes():
            if p > root:
                break
            if value % p == 0:
                return False

        return True


class U32(_TrialDivisionMixin, PrimalityU32Base):
    """Trial division over 32-bit values."""


class U64(_TrialDivisionMixin, PrimalityU64Base):
    """Trial division over 64-bit values."""


class MemoizedU32(_MemoizedMixin, PrimalityU32Base):
    """Memoized trial division over 32-bit values."""


class MemoizedU64(_MemoizedMixin, PrimalityU64Base):
    """Memoized trial division over 64-bit values."""


U32.Memoized = MemoizedU32
U64.Memoized = MemoizedU64
