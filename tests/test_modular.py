"""
Unit tests for the modular arithmetic kernel.
"""
import pytest
from numeric_primes.utils.modular import mulmod, mulmod_big, powmod, powmod_big

U64_MAX = 2**64 - 1


class TestMulmod:
    """Tests for fixed-width modular multiplication."""

    def test_small_values(self):
        """Test against the direct product for small operands."""
        for a in range(0, 40):
            for b in (0, 1, 5, 12, 39):
                assert mulmod(a, b, 13) == (a * b) % 13

    def test_near_64_bit_limit(self):
        """Test operands whose product is far beyond 64 bits."""
        mod = U64_MAX - 58
        a = U64_MAX - 1000
        b = U64_MAX - 12345
        assert mulmod(a, b, mod) == (a * b) % mod

    def test_modulus_one(self):
        """Everything is 0 modulo 1."""
        assert mulmod(123, 456, 1) == 0

    def test_invalid_modulus(self):
        """Test that non-positive moduli raise ValueError."""
        with pytest.raises(ValueError, match="Modulus must be positive"):
            mulmod(2, 3, 0)

    def test_negative_operand(self):
        with pytest.raises(ValueError):
            mulmod(-2, 3, 7)


class TestPowmod:
    """Tests for fixed-width modular exponentiation."""

    def test_matches_builtin_pow(self):
        """Test against built-in pow over a range of exponents."""
        mod = 4759123141
        for p in (0, 1, 2, 3, 10, 65, 1000, mod - 1):
            assert powmod(7, p, mod) == pow(7, p, mod)

    def test_zero_exponent(self):
        assert powmod(5, 0, 7) == 1
        assert powmod(5, 0, 1) == 0

    def test_fermat_little_theorem(self):
        """a**(p-1) == 1 (mod p) for a large 64-bit prime."""
        p = 18446744073709551557  # largest prime below 2**64
        assert powmod(2, p - 1, p) == 1
        assert powmod(3, p - 1, p) == 1


class TestBigVariants:
    """Tests for the arbitrary precision kernel."""

    def test_big_values(self):
        mod = 2**127 - 1
        a = 2**100 + 7
        b = 2**90 + 3
        assert mulmod_big(a, b, mod) == (a * b) % mod
        assert powmod_big(a, mod - 1, mod) == 1

    def test_invalid_modulus(self):
        with pytest.raises(ValueError):
            powmod_big(2, 3, -5)
