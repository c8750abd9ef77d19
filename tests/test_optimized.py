"""
Unit tests for the optimized dispatcher.

Tests cover:
- Agreement with the other algorithms across magnitudes
- The probabilistic then deterministic stage beyond 64 bits
- Parallel discovery across the 64-bit boundary
"""
import logging
import random
from itertools import islice

import pytest
from numeric_primes import miller_rabin, polynomial, trial_division
from numeric_primes.constants import PERF_PIVOT
from numeric_primes.optimized import BigInt, Optimized

U64_MAX = 2**64 - 1


@pytest.fixture
def fast_confirmation(monkeypatch):
    """
    Replace the deterministic confirmation of big probable primes.

    Confirming a prime above 2**64 by 6k+-1 division takes minutes, so the
    confirmation is swapped for a high-certainty probabilistic test and
    its calls are recorded. The real confirmation, polynomial.is_prime_from,
    is covered directly in test_polynomial.py (TestWidthDelegation,
    including test_resume_skips_smaller_divisors).
    """
    calls = []

    def confirm(value, divisor=6, width=None):
        calls.append(value)
        return miller_rabin.is_probable_prime(value, 40)

    monkeypatch.setattr(polynomial, "is_prime_from", confirm)
    return calls


class TestDispatch:
    """Tests for Optimized on 64-bit values."""

    def test_matches_reference(self, is_prime_reference):
        engine = Optimized()
        for n in range(-500, 10000):
            assert engine.is_prime(n) == is_prime_reference(n), n

    def test_around_pivot(self):
        """Both sides of the polynomial / Miller-Rabin pivot agree."""
        engine = Optimized()
        for n in range(PERF_PIVOT - 60, PERF_PIVOT + 60):
            assert engine.is_prime(n) == polynomial.is_prime(n), n

    def test_cross_algorithm_sample(self):
        """Every algorithm agrees on a fixed sample of values up to 10**12."""
        rng = random.Random(20240229)
        engine = Optimized()
        memoized = trial_division.U64.Memoized()
        samples = [rng.randrange(2, 10**12) for _ in range(15)]
        samples += [999999999989, 10**12 - 1]

        for n in samples:
            expected = miller_rabin.is_prime(n)
            assert engine.is_prime(n) == expected, n
            assert polynomial.is_prime(n) == expected, n
            assert memoized.is_prime(n) == expected, n

    def test_big_attribute(self):
        engine = Optimized()
        assert isinstance(engine.big, BigInt)
        assert engine.big._small is engine
        assert Optimized.BigInt is BigInt


class TestBigInt:
    """Tests for Optimized.BigInt beyond 64 bits."""

    def test_small_values_routed_to_64_bit(self):
        big = BigInt()
        assert big.is_prime(8592868089022906369)
        assert not big.is_prime(U64_MAX)

    def test_composites_rejected_by_probable_stage(self, caplog):
        big = BigInt()
        with caplog.at_level(logging.DEBUG, logger="numeric_primes.optimized"):
            assert not big.is_prime(2**64 + 1)
            assert not big.is_prime((2**61 - 1) * (2**31 - 1))
            assert not big.is_prime((2**89 - 1) * (2**61 - 1))

        assert not any("confirming deterministically" in r.getMessage() for r in caplog.records)

    def test_probable_prime_confirmed(self, caplog, fast_confirmation):
        """A probable prime goes on to the confirmation stage."""
        big = BigInt()
        with caplog.at_level(logging.DEBUG, logger="numeric_primes.optimized"):
            assert big.is_prime(2**64 + 13)

        assert fast_confirmation == [2**64 + 13]
        assert any("confirming deterministically" in r.getMessage() for r in caplog.records)

    def test_confirmation_rejects_composite(self, monkeypatch):
        """The deterministic stage catches what the probable stage lets through."""
        monkeypatch.setattr(miller_rabin, "is_probable_prime", lambda value, certainty=None: True)
        assert not BigInt().is_prime(2**64 + 1)    # 274177 * 67280421310721

    def test_composite_confirmation_skipped(self, fast_confirmation):
        assert not BigInt().is_prime(2**64 + 1)
        assert fast_confirmation == []

    def test_iteration_starts_at_two(self):
        assert list(islice(BigInt(), 5)) == [2, 3, 5, 7, 11]


class TestParallel:
    """Tests for Optimized.BigInt.in_parallel."""

    def test_matches_sequential(self):
        big = Optimized().big
        sequential = list(islice(big.starting_at(2), 500))
        parallel = list(islice(big.in_parallel(2, degree_of_parallelism=3), 500))
        assert parallel == sequential

    def test_crosses_64_bit_boundary(self, fast_confirmation):
        big = Optimized().big
        found = list(islice(big.in_parallel(U64_MAX - 100, degree_of_parallelism=2), 4))
        assert found == [U64_MAX - 94, U64_MAX - 82, U64_MAX - 58, 2**64 + 13]

    def test_negative_start(self):
        big = Optimized().big
        assert list(islice(big.in_parallel(-10, 2), 3)) == [-11, -13, -17]
