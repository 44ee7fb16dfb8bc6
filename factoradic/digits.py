"""Conversions between non-negative integers and factoradic digit sequences."""

import math
import operator

from factoradic.base import (
    MAX_DIGITS,
    CapacityExceededError,
    DigitOutOfRangeError,
    OutOfRangeError,
    as_int_tuple,
    check_length,
    check_max_digits,
)


def factorial(i):
    """
    Evaluate the factorial of a non-negative integer.

    Parameters
    ----------
    i : int
        Non-negative index.

    Returns
    -------
    int
        The product 1 * 2 * ... * i, with factorial(0) == 1.

    """
    i = operator.index(i)
    if i < 0:
        raise ValueError(f"Factorial is undefined for negative input {i}.")
    return math.factorial(i)


def factorial_floor(num, max_digits=MAX_DIGITS):
    """
    Find the largest index whose factorial does not exceed a number.

    Parameters
    ----------
    num : int
        Non-negative integer.
    max_digits : int, optional
        Ceiling on the number of factoradic digits, i.e. on the result plus one.

    Returns
    -------
    int
        Largest `i` such that factorial(i) <= num; -1 when num is 0.

    Raises
    ------
    CapacityExceededError
        If the minimal factoradic representation of `num` needs more than `max_digits` digits.

    """
    num = _check_num(num)
    max_digits = check_max_digits(max_digits)

    place, radix = -1, 1  # radix == factorial(place + 1)
    while radix <= num:
        place += 1
        if place + 1 > max_digits:
            raise CapacityExceededError(place + 1, max_digits)
        radix *= place + 1

    return place


def number_to_factoradic(num, max_digits=MAX_DIGITS):
    """
    Map a non-negative integer to its minimal factoradic digit sequence.

    Parameters
    ----------
    num : int
        Non-negative integer.
    max_digits : int, optional
        Ceiling on the number of output digits.

    Returns
    -------
    tuple of int
        Digits, most-significant first. The last digit is always 0.

    Examples
    --------
    >>> number_to_factoradic(23)
    (3, 2, 1, 0)

    """
    num = _check_num(num)
    place_max = factorial_floor(num, max_digits)

    digits = []
    rem = num
    radix = factorial(max(place_max, 0))
    for place in range(place_max, 0, -1):
        digit, rem = divmod(rem, radix)
        digits.append(digit)
        radix //= place
    digits.append(rem)

    return tuple(digits)


def number_to_factoradic_fixed(num, length, max_digits=MAX_DIGITS):
    """
    Map a non-negative integer to a factoradic digit sequence of a given length.

    Parameters
    ----------
    num : int
        In range(factorial(length)).
    length : int
        Number of output digits.
    max_digits : int, optional
        Ceiling on `length`.

    Returns
    -------
    tuple of int
        Digits, most-significant first, padded with leading zeros.

    Raises
    ------
    OutOfRangeError
        If `num` is negative or not less than factorial(length).

    """
    length = check_length(length, max_digits)
    num = _check_num(num)
    if num >= factorial(length):
        raise OutOfRangeError(num, length)

    digits = []
    rem = num
    radix = factorial(max(length - 1, 0))
    for place in range(length - 1, -1, -1):
        digit, rem = divmod(rem, radix)
        digits.append(digit)
        radix //= max(place, 1)

    return tuple(digits)


def factoradic_to_number(digits, strict=False, max_digits=MAX_DIGITS):
    """
    Map a factoradic digit sequence to a non-negative integer.

    Digits are only required to be non-negative. A digit exceeding its place
    bound still contributes `digit * factorial(place)`, but the result will
    not map back to the same sequence; pass `strict=True` to reject it.

    Parameters
    ----------
    digits : Collection of int
        Digits, most-significant first.
    strict : bool, optional
        Enables place bound checking, see `check_factoradic`.
    max_digits : int, optional
        Ceiling on the number of input digits.

    Returns
    -------
    int

    """
    digits = as_int_tuple(digits, max_digits)
    if strict:
        check_factoradic(digits, max_digits)

    num, radix = 0, 1
    for place, digit in enumerate(reversed(digits)):
        if digit < 0:
            raise DigitOutOfRangeError(len(digits) - 1 - place, digit)
        radix *= max(place, 1)
        num += digit * radix

    return num


def check_factoradic(digits, max_digits=MAX_DIGITS):
    """
    Validate that each digit is a valid index at its position.

    Returns
    -------
    tuple of int
        The validated digits.

    Raises
    ------
    DigitOutOfRangeError
        For the first digit not in range(len(digits) - position).

    """
    digits = as_int_tuple(digits, max_digits)
    length = len(digits)
    for position, digit in enumerate(digits):
        if not 0 <= digit < length - position:
            raise DigitOutOfRangeError(position, digit, length - position)

    return digits


def _check_num(num):
    num = operator.index(num)
    if num < 0:
        raise OutOfRangeError(num)
    return num
