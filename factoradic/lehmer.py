"""Lehmer code conversions between factoradic digit sequences and permutations."""

from factoradic.base import MAX_DIGITS, DigitOutOfRangeError, InvalidPermutationError, as_int_tuple


def factoradic_to_permutation(digits, max_digits=MAX_DIGITS):
    """
    Map a factoradic digit sequence to an index sequence permutation.

    Each digit selects, by position, one of the elements not yet used.

    Parameters
    ----------
    digits : Collection of int
        Digit at position `p` must be in range(len(digits) - p).
    max_digits : int, optional
        Ceiling on the sequence length.

    Returns
    -------
    tuple of int
        Elements are unique in range(len(digits)).

    Raises
    ------
    DigitOutOfRangeError
        If a digit is not a valid index into the remaining elements.

    """
    digits = as_int_tuple(digits, max_digits)
    length = len(digits)

    seq_rem = list(range(length))  # remaining elements
    seq = []
    for i, k in enumerate(digits):
        if not 0 <= k < length - i:
            raise DigitOutOfRangeError(i, k, length - i)
        seq.append(seq_rem.pop(k))

    return tuple(seq)


def permutation_to_factoradic(seq, max_digits=MAX_DIGITS):
    """
    Map an index sequence permutation to its factoradic digit sequence.

    Parameters
    ----------
    seq : Collection of int
        Elements are unique in range(len(seq)).
    max_digits : int, optional
        Ceiling on the sequence length.

    Returns
    -------
    tuple of int
        Digit at position `p` is in range(len(seq) - p).

    Raises
    ------
    InvalidPermutationError
        If an element is out of range or repeated.

    """
    seq = check_permutation(seq, max_digits)

    seq_rem = list(range(len(seq)))  # remaining elements
    digits = []
    for n in seq:
        k = seq_rem.index(n)  # position of index in remaining elements
        digits.append(k)
        del seq_rem[k]

    return tuple(digits)


def check_permutation(seq, max_digits=MAX_DIGITS):
    """Validate that a sequence holds each of range(len(seq)) exactly once."""
    seq = as_int_tuple(seq, max_digits)
    length = len(seq)

    seen = [False] * length
    for n in seq:
        if not 0 <= n < length:
            raise InvalidPermutationError(n, f"outside range({length})")
        if seen[n]:
            raise InvalidPermutationError(n, "duplicate")
        seen[n] = True

    return seq
