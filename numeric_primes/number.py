"""
Prime detection for any supported numeric type.

int values of any size, floats and Decimals holding whole numbers, and
digit strings are accepted. Signs are ignored for testing; next_prime
preserves them.
"""

import math
from decimal import Decimal
from typing import Union

from .prime import NUMBERS
from .utils.number_utils import is_whole, to_integer

Number = Union[int, float, Decimal, str]


def is_prime(value: Number) -> bool:
    """
    Validate if a number is prime.

    Floats and Decimals that are not whole numbers (including NaN and
    infinities) are never prime.

    Example:
        >>> is_prime(2147483647)
        True
        >>> is_prime(-7.0)
        True
        >>> is_prime(7.5)
        False
    """
    if isinstance(value, (float, Decimal)):
        if not is_whole(value):
            return False
        value = int(value)

    return NUMBERS.big.is_prime(to_integer(value))


def next_prime(after: Number) -> int:
    """
    Find the next prime number after the number given.

    If the number is negative, the result is the next greater magnitude
    prime as a negative number. Negative floats are floored and positive
    floats truncated before searching.

    Raises:
        ValueError: If after is NaN or infinite

    Example:
        >>> next_prime(7)
        11
        >>> next_prime(-10)
        -11
    """
    if isinstance(after, (float, Decimal)):
        if isinstance(after, float) and not math.isfinite(after):
            raise ValueError(f"Cannot find a prime after {after}")
        if isinstance(after, Decimal) and not after.is_finite():
            raise ValueError(f"Cannot find a prime after {after}")
        after = math.floor(after) if after < 0 else int(after)

    return NUMBERS.big.next_prime(to_integer(after))
