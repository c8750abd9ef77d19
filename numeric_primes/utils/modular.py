"""
Modular arithmetic kernel.

Fixed-width variants never form the full product a*b, which keeps every
intermediate below 2*mod. That is what allows the 64-bit Miller-Rabin test
to work on values near 2**64 without a wider intermediate type. The big
variants rely on native arbitrary precision.

All functions require mod > 0 and non-negative operands.
"""


def _check_operands(a: int, b: int, mod: int) -> None:
    if mod <= 0:
        raise ValueError(f"Modulus must be positive, got {mod}")
    if a < 0 or b < 0:
        raise ValueError(f"Operands must be non-negative, got {a} and {b}")


def mulmod(a: int, b: int, mod: int) -> int:
    """
    Compute (a * b) % mod by binary long multiplication.

    Walks the bits of a from most to least significant, doubling the
    accumulator and adding b on set bits, reducing after each step.

    Example:
        >>> mulmod(2**63, 2, 2**64 - 59)
        59
    """
    _check_operands(a, b, mod)

    b %= mod
    now = 0
    for i in range(a.bit_length() - 1, -1, -1):
        now <<= 1
        if now >= mod:
            now -= mod
        if (a >> i) & 1:
            now += b
            if now >= mod:
                now -= mod
    return now


def powmod(a: int, p: int, mod: int) -> int:
    """
    Compute (a ** p) % mod by binary exponentiation on top of mulmod.

    Even exponents square the base and halve; odd exponents take one factor
    of the base and continue with p - 1.
    """
    _check_operands(a, p, mod)

    result = 1 % mod
    a %= mod
    while p > 0:
        if p == 1:
            return mulmod(result, a, mod)
        if p % 2 != 0:
            result = mulmod(result, a, mod)
            p -= 1
        else:
            a = mulmod(a, a, mod)
            p //= 2
    return result


def mulmod_big(a: int, b: int, mod: int) -> int:
    """Arbitrary precision (a * b) % mod."""
    _check_operands(a, b, mod)
    return (a * b) % mod


def powmod_big(a: int, p: int, mod: int) -> int:
    """Arbitrary precision (a ** p) % mod using the built-in modular pow."""
    _check_operands(a, p, mod)
    return pow(a, p, mod)
