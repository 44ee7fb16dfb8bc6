"""Core package objects."""

import operator
from collections import namedtuple

import numpy as np

MAX_DIGITS = 256  # default ceiling on digit sequence and permutation length

Conversion = namedtuple("Conversion", ["value", "t_run"], defaults=(None,))


class FactoradicError(ValueError):
    """Base class for conversion errors."""


class CapacityExceededError(FactoradicError):
    """A representation needs more digits than the configured ceiling."""

    def __init__(self, length, max_digits):
        self.length = length
        self.max_digits = max_digits
        super().__init__(
            f"Representation needs {length} digits, exceeding the maximum of {max_digits}."
        )


class OutOfRangeError(FactoradicError):
    """A number cannot be represented with the requested number of digits."""

    def __init__(self, num, length=None):
        self.num = num
        self.length = length
        if length is None:
            msg = f"Input must be a non-negative integer, got {num}."
        else:
            msg = f"Input 'num' must be in range(factorial({length})), got {num}."
        super().__init__(msg)


class DigitOutOfRangeError(FactoradicError):
    """A factoradic digit is negative or exceeds the bound of its position."""

    def __init__(self, position, digit, bound=None):
        self.position = position
        self.digit = digit
        self.bound = bound
        if bound is None:
            msg = f"Factoradic digit {digit} at position {position} is negative."
        else:
            msg = f"Factoradic digit {digit} out of bounds at position {position}, must be in range({bound})."
        super().__init__(msg)


class InvalidPermutationError(FactoradicError):
    """A sequence is not a permutation of range(len(seq))."""

    def __init__(self, value, reason):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid permutation value {value}: {reason}.")


class ParseError(FactoradicError):
    """Malformed textual or binary input."""

    def __init__(self, token, index=None):
        self.token = token
        self.index = index
        if index is None:
            msg = f"Cannot parse input {token!r}."
        else:
            msg = f"Cannot parse token {token!r} at index {index}."
        super().__init__(msg)


class FormatError(FactoradicError):
    """A value cannot be rendered in the requested format."""

    def __init__(self, num, fmt):
        self.num = num
        self.fmt = fmt
        super().__init__(
            f"Cannot render a {num.bit_length()}-bit integer as {fmt!r}, "
            f"it exceeds the interpreter's int/str conversion limit."
        )


def check_max_digits(max_digits):
    """Validate a digit ceiling, returning it as an int."""
    max_digits = operator.index(max_digits)
    if max_digits < 1:
        raise ValueError(f"Input 'max_digits' must be positive, got {max_digits}.")
    return max_digits


def check_length(length, max_digits=MAX_DIGITS):
    """Validate a sequence length against the digit ceiling."""
    length = operator.index(length)
    if length < 0:
        raise ValueError(f"Input 'length' must be non-negative, got {length}.")
    if length > check_max_digits(max_digits):
        raise CapacityExceededError(length, max_digits)
    return length


def as_int_tuple(seq, max_digits=MAX_DIGITS):
    """Convert a sequence of integers (e.g. a NumPy array) to a tuple of int."""
    seq = tuple(operator.index(item) for item in seq)
    check_length(len(seq), max_digits)
    return seq


class RandomGeneratorMixin:
    """
    Mixin class providing a random number generating attribute and methods.

    Parameters
    ----------
    rng : int or RandomState or Generator, optional
        Random number generator seed or object.

    """

    def __init__(self, rng=None):
        self.rng = rng

    @property
    def rng(self):
        r"""The NumPy random number generator."""
        return self._rng

    @rng.setter
    def rng(self, value):
        self._rng = self.make_rng(value)

    def _get_rng(self, rng=None):
        if rng is None:
            return self.rng
        else:
            return self.make_rng(rng)

    @staticmethod
    def make_rng(rng):
        """
        Return a random number generator.

        Parameters
        ----------
        rng : int or RandomState or Generator, optional
            Random number generator seed or object.

        Returns
        -------
        Generator

        """
        if rng is None:
            return np.random.default_rng()
        elif isinstance(rng, int):
            return np.random.default_rng(rng)
        elif isinstance(rng, (np.random.Generator, np.random.RandomState)):
            return rng
        else:
            raise TypeError("Input must be None, int, or a valid NumPy random number generator.")
