"""
Integer width tags.

Python integers are unbounded, so the fixed-width behaviour of the
algorithms (candidate ceilings, divisor limits, input ranges) is carried by
an explicit Width value instead of by the integer type itself.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import MAX_U32_DIVISOR, MAX_U64_DIVISOR
from .errors import ValueOutOfRangeError


@dataclass(frozen=True)
class Width:
    """An integer magnitude: 32-bit, 64-bit or arbitrary precision."""
    name: str
    bits: Optional[int] = None

    @property
    def max_value(self) -> Optional[int]:
        """Largest unsigned value, or None when unbounded."""
        if self.bits is None:
            return None
        return 2**self.bits - 1

    @property
    def signed_max(self) -> Optional[int]:
        """Largest signed value, or None when unbounded."""
        if self.bits is None:
            return None
        return 2**(self.bits - 1) - 1

    @property
    def max_divisor(self) -> Optional[int]:
        """Largest 6k+-1 divisor whose square still fits this width."""
        return _MAX_DIVISORS.get(self.name)

    @property
    def wider(self) -> 'Width':
        """The next wider width (BIG is its own successor)."""
        if self is U32:
            return U64
        return BIG

    def fits(self, value: int) -> bool:
        """Return True if abs(value) is representable in this width."""
        return self.bits is None or abs(value) <= self.max_value

    def check(self, value: int) -> int:
        """
        Validate that value fits this width.

        Returns:
            The value unchanged

        Raises:
            ValueOutOfRangeError: If abs(value) exceeds max_value
        """
        if not self.fits(value):
            raise ValueOutOfRangeError(value, self.max_value,
                                       f"Value {value} does not fit {self.name}")
        return value

    def __str__(self) -> str:
        return self.name


U32 = Width("u32", 32)
U64 = Width("u64", 64)
BIG = Width("big")

_MAX_DIVISORS = {
    "u32": MAX_U32_DIVISOR,
    "u64": MAX_U64_DIVISOR,
}


def width_of(value: int) -> Width:
    """Return the narrowest width that holds abs(value)."""
    magnitude = abs(value)
    if magnitude <= U32.max_value:
        return U32
    if magnitude <= U64.max_value:
        return U64
    return BIG
