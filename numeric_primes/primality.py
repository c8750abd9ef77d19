"""
Base classes shared by every primality algorithm.

A primality class tests single values (is_prime), discovers primes by
filtering prime candidates (starting_at, in_parallel, iteration) and
factors values by trial division against its own discovery sequence
(factors). Subclasses supply only _is_prime_internal, which is called
for magnitudes that already passed the common triage: greater than 3 and
divisible by neither 2 nor 3.

One base exists per width. The width bounds accepted inputs and the
candidate sequence; BIG additionally routes values that fit 64 bits to a
64-bit implementation.
"""

import logging
from abc import ABC, abstractmethod
from itertools import islice, takewhile
from typing import Iterator, Optional, Tuple

from . import candidates
from .constants import U64_MAX
from .errors import ValueOutOfRangeError
from .utils.number_utils import sign_of, to_integer
from .utils.parallel import ordered_parallel_filter
from .widths import BIG, U32, U64, Width

logger = logging.getLogger(__name__)


class PrimalityBase(ABC):
    """Prime testing, discovery and factorization for one integer width."""

    width: Width = BIG

    def __iter__(self) -> Iterator[int]:
        """Iterate every prime starting at 2."""
        return self.starting_at(2)

    def __repr__(self) -> str:
        return f"{type(self).__module__}.{type(self).__qualname__}()"

    def _valid_prime_tests(self, starting_at: int = 2) -> Iterator[int]:
        return candidates.starting_at(starting_at, self.width)

    # ------------------------------------------------------------------
    # Testing
    # ------------------------------------------------------------------

    def is_prime(self, value: int) -> bool:
        """
        Return True if the value provided is prime.

        Negative values are tested by magnitude.

        Raises:
            ValueOutOfRangeError: If value does not fit this width
        """
        value = self.width.check(to_integer(value))
        return self._check(abs(value))

    def _check(self, value: int) -> bool:
        """Triage a non-negative value before the heavier algorithm."""
        if value < 2:
            return False
        if value < 4:
            return True
        if value % 2 == 0 or value % 3 == 0:
            return False
        return self._is_prime_internal(value)

    @abstractmethod
    def _is_prime_internal(self, value: int) -> bool:
        """Should only check for primes that aren't divisible by 2 or 3."""

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def starting_at(self, value: int) -> Iterator[int]:
        """
        Iterate every prime starting at the value provided (inclusive).

        A negative value produces the negated primes of increasing magnitude.
        """
        return (n for n in self._valid_prime_tests(value) if self.is_prime(n))

    def indexed(self) -> Iterator[Tuple[int, int]]:
        """
        Iterate (count, prime) pairs where count starts at 1.

        So the first entry is always (1, 2).
        """
        return enumerate(self, 1)

    def in_parallel(self, starting_at: int = 2,
                    degree_of_parallelism: Optional[int] = None) -> Iterator[int]:
        """
        Iterate every prime starting at the value provided, testing
        candidates concurrently.

        Output order is identical to starting_at().

        Args:
            starting_at: Allows for skipping ahead before checking for
                inclusive and subsequent primes
            degree_of_parallelism: Worker count (1 = sequential,
                None = configured default)
        """
        return ordered_parallel_filter(
            self._valid_prime_tests(starting_at),
            self.is_prime,
            degree_of_parallelism
        )

    def next_prime(self, after: int) -> int:
        """
        Find the next prime number after the number given.

        If after is negative, the result is the next greater magnitude
        prime as a negative number.

        Raises:
            ValueOutOfRangeError: If no larger prime fits this width
        """
        after = to_integer(after)
        start = abs(after) + 1
        if not self.width.fits(start):
            raise ValueOutOfRangeError(start, self.width.max_value,
                                       f"No prime after {after} fits {self.width}")

        found = next(self.starting_at(start if after >= 0 else -start), None)
        if found is None:
            raise ValueOutOfRangeError(after, self.width.max_value,
                                       f"No prime after {after} fits {self.width}")
        return found

    # ------------------------------------------------------------------
    # Factorization
    # ------------------------------------------------------------------

    def _is_factorable(self, value: int) -> bool:
        # For larger numbers, a quick prime check can prevent large iterations.
        return not self._check(value)

    def factors(self, value: int, omit_one_and_value: bool = False) -> Iterator[int]:
        """
        Iterate the prime factors of the provided value.

        The first element is always 0, 1 or -1 (sign retention), followed by
        the prime factors of abs(value) in non-decreasing order.

        Args:
            value: The value to factorize
            omit_one_and_value: If True, only the prime factors greater than 1
                and less than abs(value) are returned. A prime (or 0, 1)
                then yields nothing.

        Raises:
            ValueOutOfRangeError: If value does not fit this width
        """
        value = self.width.check(to_integer(value))

        if omit_one_and_value:
            magnitude = abs(value)
            return takewhile(lambda f: f != magnitude, islice(self._factors(value), 1, None))

        return self._factors(value)

    def _factors(self, value: int) -> Iterator[int]:
        if value == 0:
            yield value
            return

        yield sign_of(value)
        value = abs(value)
        if value == 1:
            return

        if self._is_factorable(value):
            last = 1
            for p in self:
                stop = value // last  # The list of possibilities shrinks for each test.
                if p > stop:
                    break
                while value % p == 0:
                    value //= p
                    yield p
                    if value == 1:
                        return
                last = p

        yield value


class PrimalityU32Base(PrimalityBase):
    """Base for 32-bit algorithms (signed values accepted by magnitude)."""
    width = U32


class PrimalityU64Base(PrimalityBase):
    """Base for 64-bit algorithms (signed values accepted by magnitude)."""
    width = U64


class PrimalityBigIntBase(PrimalityBase):
    """
    Base for arbitrary precision algorithms.

    Magnitudes that fit 64 bits are handed to the 64-bit implementation
    given at construction; _is_prime_internal only sees larger values.
    """
    width = BIG

    def __init__(self, small: PrimalityBase):
        self._small = small

    def __iter__(self) -> Iterator[int]:
        return self.starting_at(1)

    def _check(self, value: int) -> bool:
        if value <= U64_MAX:
            return self._small.is_prime(value)
        if value % 2 == 0 or value % 3 == 0:
            return False
        return self._is_prime_internal(value)
