"""
numeric_primes - prime testing, factorization and discovery.

Quick use:

    >>> from numeric_primes import is_prime, factors, next_prime
    >>> is_prime(2147483647)
    True
    >>> list(factors(-84))
    [-1, 2, 2, 3, 7]
    >>> next_prime(-10)
    -11

The algorithm families are available as namespaces with one discovery
class per width: Polynomial.U32, MillerRabin.BigInt, TrialDivision.U64,
TrialDivision.U64.Memoized, Optimized and Optimized.BigInt.
"""

__version__ = "1.0.0"

from . import miller_rabin as MillerRabin
from . import polynomial as Polynomial
from . import trial_division as TrialDivision
from .config import Settings, get_settings, load_settings
from .errors import PrimesError, ValueOutOfRangeError
from .logging_utils import setup_logging
from .number import is_prime, next_prime
from .optimized import Optimized
from .prime import (
    common_factors,
    factors,
    factors_single,
    greatest_factor,
    in_parallel,
    indexed,
    starting_at,
)
from .widths import BIG, U32, U64, Width

__all__ = [
    "is_prime",
    "next_prime",
    "factors",
    "factors_single",
    "common_factors",
    "greatest_factor",
    "starting_at",
    "in_parallel",
    "indexed",
    "Polynomial",
    "MillerRabin",
    "TrialDivision",
    "Optimized",
    "Width",
    "U32",
    "U64",
    "BIG",
    "Settings",
    "get_settings",
    "load_settings",
    "setup_logging",
    "PrimesError",
    "ValueOutOfRangeError",
]
