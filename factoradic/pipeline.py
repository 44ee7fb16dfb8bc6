"""Direct conversions between integers and permutations."""

import logging

from factoradic.base import MAX_DIGITS
from factoradic.digits import factoradic_to_number, number_to_factoradic_fixed
from factoradic.lehmer import factoradic_to_permutation, permutation_to_factoradic

logger = logging.getLogger(__name__)


def number_to_permutation(num, length, max_digits=MAX_DIGITS):
    """
    Map a non-negative integer to an index sequence permutation.

    Parameters
    ----------
    num : int
        In range(factorial(length)).
    length : int
        Length of the output sequence.
    max_digits : int, optional
        Ceiling on `length`.

    Returns
    -------
    tuple of int
        Elements are unique in range(length).

    """
    digits = number_to_factoradic_fixed(num, length, max_digits)
    logger.debug(f"Factoradic: {digits}")
    return factoradic_to_permutation(digits, max_digits)


def permutation_to_number(seq, max_digits=MAX_DIGITS):
    """
    Map an index sequence permutation to a non-negative integer.

    Parameters
    ----------
    seq : Collection of int
        Elements are unique in range(len(seq)).
    max_digits : int, optional
        Ceiling on the sequence length.

    Returns
    -------
    int
        Takes values in range(factorial(len(seq))).

    """
    digits = permutation_to_factoradic(seq, max_digits)
    logger.debug(f"Factoradic: {digits}")
    return factoradic_to_number(digits, max_digits=max_digits)
