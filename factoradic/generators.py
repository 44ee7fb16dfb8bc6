"""Generator objects for random permutations, factoradic sequences and numbers."""

from abc import ABC, abstractmethod

import numpy as np

from factoradic.base import MAX_DIGITS, RandomGeneratorMixin, check_length
from factoradic.digits import factoradic_to_number


class Base(RandomGeneratorMixin, ABC):
    def __init__(self, length, max_digits=MAX_DIGITS, rng=None):
        """
        Base class for sample generators.

        Parameters
        ----------
        length : int
            Sequence length, or digit count of the number range.
        max_digits : int, optional
            Ceiling on `length`.
        rng : int or RandomState or Generator, optional
            Random number generator seed or object.

        """
        super().__init__(rng)
        self.length = check_length(length, max_digits)
        self.max_digits = max_digits

    def __call__(self, n_gen, rng=None):
        """
        Call sample generator.

        Parameters
        ----------
        n_gen : int
            Number of samples to generate.
        rng : int or RandomState or Generator, optional
            NumPy random number generator or seed. Instance RNG if None.

        Yields
        ------
        tuple of int or int
            Sample.

        """
        rng = self._get_rng(rng)
        for __ in range(n_gen):
            yield self._gen_single(rng)

    @abstractmethod
    def _gen_single(self, rng):
        """Return a single sample."""
        raise NotImplementedError

    def __eq__(self, other):
        if isinstance(other, Base):
            return type(self) is type(other) and self.length == other.length
        else:
            return NotImplemented

    def summary(self):
        return f"{self.__class__.__name__}\n---\nlength: {self.length}"


class Permutations(Base):
    """Uniformly random permutations of range(length)."""

    def _gen_single(self, rng):
        return tuple(int(n) for n in rng.permutation(self.length))


class FactoradicDigits(Base):
    """Uniformly random valid factoradic sequences of fixed length."""

    def _gen_single(self, rng):
        return tuple(_randint(rng, self.length - i) for i in range(self.length))


class Numbers(FactoradicDigits):
    """Uniformly random integers in range(factorial(length))."""

    def _gen_single(self, rng):
        digits = super()._gen_single(rng)
        return factoradic_to_number(digits, max_digits=self.max_digits)


def _randint(rng, high):
    if isinstance(rng, np.random.Generator):
        return int(rng.integers(high))
    else:
        return int(rng.randint(high))
