"""
Exception types raised by numeric_primes.

Most unsupported input shapes are handled locally (a non-whole float is
simply never prime and is returned unfactored). Only values that cannot be
represented exactly in the requested width surface as errors.
"""


class PrimesError(Exception):
    """Base class for numeric_primes errors."""


class ValueOutOfRangeError(PrimesError, ValueError):
    """
    A value lies outside the range a width or float type represents exactly.

    Attributes:
        value: The offending value
        limit: The largest magnitude accepted
    """

    def __init__(self, value, limit, message=None):
        self.value = value
        self.limit = limit
        if message is None:
            message = f"Value {value} exceeds the supported magnitude of {limit}"
        super().__init__(message)
