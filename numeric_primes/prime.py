"""
Prime discovery and prime factorization over the default dispatcher.

Negative numbers are allowed and their signs are preserved: every factor
sequence starts with a sign token (1 or -1), or is just the value itself
when it cannot be factored (zero, NaN, infinite, not a whole number).

Values that fit 64 bits are factored by the 64-bit dispatcher; anything
larger by its arbitrary precision counterpart.
"""

import logging
import math
import struct
from decimal import Decimal
from typing import Iterable, Iterator, Optional, Tuple, Union

from . import candidates
from .constants import DOUBLE_EXACT_LIMIT, FLOAT_EXACT_LIMIT
from .errors import ValueOutOfRangeError
from .optimized import Optimized
from .utils.number_utils import is_whole, to_integer
from .widths import U64

logger = logging.getLogger(__name__)

NUMBERS = Optimized()

Factorable = Union[int, float, Decimal, str]


def _engine_for(value: int):
    return NUMBERS if U64.fits(value) else NUMBERS.big


# ----------------------------------------------------------------------
# Factorization
# ----------------------------------------------------------------------

def factors(value: Factorable, omit_one_and_value: bool = False) -> Iterator:
    """
    Iterate the prime factors of the provided value.

    The first element is 1 or -1 for sign retention, followed by the prime
    factors of the magnitude in non-decreasing order. Zero, NaN, infinite
    and non-whole values are returned unfactored as the only element.

    Args:
        value: int, float, Decimal or digit string to factorize
        omit_one_and_value: If True, only the prime factors greater than 1
            and less than the magnitude itself are returned. A prime, zero,
            one or unfactorable value then yields nothing.

    Raises:
        ValueOutOfRangeError: If a float exceeds 2**53 in magnitude
        TypeError: For unsupported types

    Example:
        >>> list(factors(-84))
        [-1, 2, 2, 3, 7]
        >>> list(factors(84, omit_one_and_value=True))
        [2, 2, 3, 7]
    """
    if isinstance(value, float):
        return _factors_float(value, DOUBLE_EXACT_LIMIT, omit_one_and_value)

    if isinstance(value, Decimal):
        if value.is_zero() or not is_whole(value):
            return _unfactored(value, omit_one_and_value)
        value = int(value)

    value = to_integer(value)
    return _engine_for(value).factors(value, omit_one_and_value)


def factors_single(value: float, omit_one_and_value: bool = False) -> Iterator:
    """
    Iterate the prime factors of a value with single precision semantics.

    The value is rounded to IEEE binary32 first and may not exceed 2**24 in
    magnitude, the largest contiguous integer binary32 holds exactly.

    Raises:
        ValueOutOfRangeError: If the value exceeds 2**24 in magnitude
    """
    try:
        single = struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        raise ValueOutOfRangeError(value, FLOAT_EXACT_LIMIT) from None

    return _factors_float(single, FLOAT_EXACT_LIMIT, omit_one_and_value)


def _factors_float(value: float, limit: int, omit_one_and_value: bool) -> Iterator:
    if value == 0 or not is_whole(value):
        return _unfactored(value, omit_one_and_value)

    if abs(value) > limit:
        raise ValueOutOfRangeError(value, limit,
                                   f"{value} exceeds the exact integer range of {limit}")

    whole = int(value)
    return NUMBERS.factors(whole, omit_one_and_value)


def _unfactored(value, omit_one_and_value: bool) -> Iterator:
    if omit_one_and_value:
        return iter(())
    return iter((value,))


# ----------------------------------------------------------------------
# Common factors
# ----------------------------------------------------------------------

class FactorCursor:
    """
    A cursor over one factor sequence.

    current holds the last value pulled; advance() pulls the next one and
    returns False once the sequence is exhausted.
    """

    def __init__(self, sequence: Iterator[int]):
        self._sequence = sequence
        self.current: Optional[int] = None
        self.exhausted = False

    def advance(self) -> bool:
        if self.exhausted:
            return False
        try:
            self.current = next(self._sequence)
        except StopIteration:
            self.exhausted = True
            return False
        return True

    def close(self) -> None:
        """Release the underlying generator."""
        self.exhausted = True
        close = getattr(self._sequence, 'close', None)
        if close is not None:
            close()


def common_factors(values: Iterable[Union[int, str]]) -> Iterator[int]:
    """
    Iterate the prime factors common to every distinct magnitude in values.

    Each common factor is yielded as many times as it divides every value.
    An empty collection yields nothing; a single value yields its own prime
    factors.

    Example:
        >>> list(common_factors([84, 756, 108]))
        [2, 2, 3]
    """
    magnitudes = list(dict.fromkeys(abs(to_integer(v)) for v in values))
    return _common_factors(magnitudes)


def _common_factors(magnitudes) -> Iterator[int]:
    if not magnitudes:
        return

    cursors = [FactorCursor(_engine_for(m).factors(m)) for m in magnitudes]
    try:
        # Skip the sign token. Zero (the only token of 0) shares nothing.
        for cursor in cursors:
            if not cursor.advance() or cursor.current == 0:
                return

        while True:
            current = 0  # 0 = just starting a round
            retry_index = -1
            i = 0
            while i < len(cursors):
                cursor = cursors[i]

                # The cursor at retry_index holds the value that restarted
                # this round and must be reused rather than advanced.
                if retry_index == i:
                    retry_index = -1
                elif not cursor.advance():
                    return

                if current:
                    while current > cursor.current:
                        if not cursor.advance():
                            return

                    if current < cursor.current:
                        # New candidate factor, start over anchored on it.
                        current = cursor.current
                        retry_index = i
                        i = 0
                        continue

                current = cursor.current
                i += 1

            yield current
    finally:
        for cursor in cursors:
            cursor.close()


def greatest_factor(values: Iterable[Union[int, str]]) -> int:
    """
    Return the greatest common (positive) factor of all the provided values.

    Returns 1 if none found.
    """
    return math.prod(common_factors(values))


# ----------------------------------------------------------------------
# Discovery
# ----------------------------------------------------------------------

def starting_at(value: Union[int, float] = 2) -> Iterator[int]:
    """
    Iterate every prime starting at the value provided (inclusive).

    A negative value produces negated primes of increasing magnitude.
    Floats are floored when negative and ceiled otherwise.
    """
    if isinstance(value, float):
        return (n for n in candidates.starting_at_float(value) if NUMBERS.big.is_prime(n))

    return NUMBERS.big.starting_at(to_integer(value))


def in_parallel(value: int = 2, degree_of_parallelism: Optional[int] = None) -> Iterator[int]:
    """Parallel counterpart of starting_at(); output order is identical."""
    return NUMBERS.big.in_parallel(to_integer(value), degree_of_parallelism)


def indexed() -> Iterator[Tuple[int, int]]:
    """Iterate (count, prime) pairs starting at (1, 2)."""
    return NUMBERS.big.indexed()
