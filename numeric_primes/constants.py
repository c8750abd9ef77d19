"""
Shared constants for prime discovery and factorization.

This module centralizes the magnitude thresholds, witness sets and seed
primes used across the primality algorithms so that every width-specific
implementation agrees on the same bounds.
"""

from typing import Tuple

# Largest unsigned 64-bit value.
U64_MAX: int = 2**64 - 1

# Largest divisor the 6k+-1 loop may reach before `divisor**2` no longer fits
# the width. Beyond these the loop resumes in the next wider width.
#   2**32 - 1 == d*d - 2*d + 1  ->  d == 65536
#   2**64 - 1 == d*d - 2*d + 1  ->  d == 4294967296
MAX_U32_DIVISOR: int = 65536
MAX_U64_DIVISOR: int = 4294967296

# Below this value the polynomial test outperforms Miller-Rabin.
# Empirically measured, see Optimized.
PERF_PIVOT: int = 805000000

# Deterministic Miller-Rabin witness sets.
# Format: (exclusive upper bound, witnesses)
# Bounds from Jaeschke (1993) / Pomerance, Selfridge & Wagstaff (1980).
MILLER_RABIN_WITNESSES: Tuple[Tuple[int, Tuple[int, ...]], ...] = (
    (4759123141, (2, 7, 61)),
    (341550071728321, (2, 3, 5, 7, 11, 13, 17)),
    (U64_MAX + 1, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
)

# Default number of random rounds for probabilistic Miller-Rabin.
DEFAULT_CERTAINTY: int = 10

# Largest contiguous integers exactly representable by IEEE floats.
# Factoring above these is not well defined.
FLOAT_EXACT_LIMIT: int = 16777216            # 2**24, binary32
DOUBLE_EXACT_LIMIT: int = 9007199254740992   # 2**53, binary64

# Seed primes for trial division (the first 100 primes).
FIRST_KNOWN: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61,
    67, 71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137,
    139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211,
    223, 227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281, 283,
    293, 307, 311, 313, 317, 331, 337, 347, 349, 353, 359, 367, 373, 379,
    383, 389, 397, 401, 409, 419, 421, 431, 433, 439, 443, 449, 457, 461,
    463, 467, 479, 487, 491, 499, 503, 509, 521, 523, 541,
)

LAST_KNOWN: int = FIRST_KNOWN[-1]


def get_witnesses(value: int) -> Tuple[int, ...]:
    """
    Get the deterministic Miller-Rabin witness set for a 64-bit value.

    Args:
        value: Odd value to be tested (must not exceed U64_MAX)

    Returns:
        Tuple of witness bases proven sufficient below the value's bound
    """
    for bound, witnesses in MILLER_RABIN_WITNESSES:
        if value < bound:
            return witnesses

    raise ValueError(f"No deterministic witness set for {value} (exceeds 64 bits)")
