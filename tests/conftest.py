"""
Pytest configuration for numeric_primes tests.

This file adds the repository root to the Python path so tests can import
'numeric_primes' without installing it, and provides shared fixtures.
"""
import sys
from math import isqrt
from pathlib import Path

import pytest

# Add repository root to Python path
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from numeric_primes.config import get_settings  # noqa: E402


def reference_is_prime(n: int) -> bool:
    """Plain trial division, used as an oracle for small values."""
    n = abs(n)
    if n < 2:
        return False
    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


@pytest.fixture
def is_prime_reference():
    return reference_is_prime


@pytest.fixture
def primes_below_1000():
    return [n for n in range(1000) if reference_is_prime(n)]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings built from its own environment."""
    for name in ("PROBABLE_PRIME_CERTAINTY", "MAX_DEGREE_OF_PARALLELISM",
                 "PARALLEL_BATCH_SIZE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"NUMERIC_PRIMES_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
