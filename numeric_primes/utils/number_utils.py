import math
import re
from decimal import Decimal
from typing import Union

Numeric = Union[int, float, Decimal, str]


def validate_integer(number_str: str) -> bool:
    """Validate that string represents an integer, optionally signed."""
    if not isinstance(number_str, str):
        return False

    # Optional sign followed by digits only
    if not re.match(r'^[+-]?\d+$', number_str):
        return False

    digits = number_str.lstrip('+-')

    # Check for leading zeros (except single "0")
    if len(digits) > 1 and digits[0] == '0':
        return False

    return True


def to_integer(value: Numeric) -> int:
    """
    Coerce an integer-like value to int.

    Accepts int and validated digit strings. Booleans are rejected so that
    True is never silently treated as 1.

    Raises:
        TypeError: For bool or unsupported types
        ValueError: For malformed digit strings
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a supported numeric type")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        if not validate_integer(value):
            raise ValueError(f"Invalid number format: {value}")
        return int(value)

    raise TypeError(f"Unsupported type for integer conversion: {type(value).__name__}")


def calculate_bit_length(number: int) -> int:
    """Calculate bit length of the magnitude of a number."""
    if number == 0:
        return 1

    return abs(number).bit_length()


def is_whole(value: Union[float, Decimal]) -> bool:
    """Return True for finite floats/Decimals without a fractional part."""
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()

    return math.isfinite(value) and value == math.floor(value)


def sign_of(value: int) -> int:
    """Return -1 for negative values, otherwise 1."""
    return -1 if value < 0 else 1
