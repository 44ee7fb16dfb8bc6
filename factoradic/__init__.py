from .base import (
    MAX_DIGITS,
    CapacityExceededError,
    DigitOutOfRangeError,
    FactoradicError,
    FormatError,
    InvalidPermutationError,
    OutOfRangeError,
    ParseError,
)
from .digits import (
    check_factoradic,
    factoradic_to_number,
    factorial,
    factorial_floor,
    number_to_factoradic,
    number_to_factoradic_fixed,
)
from .lehmer import check_permutation, factoradic_to_permutation, permutation_to_factoradic
from .pipeline import number_to_permutation, permutation_to_number

__all__ = [
    'MAX_DIGITS',
    'FactoradicError',
    'CapacityExceededError',
    'OutOfRangeError',
    'DigitOutOfRangeError',
    'InvalidPermutationError',
    'ParseError',
    'FormatError',
    'factorial',
    'factorial_floor',
    'number_to_factoradic',
    'number_to_factoradic_fixed',
    'factoradic_to_number',
    'check_factoradic',
    'factoradic_to_permutation',
    'permutation_to_factoradic',
    'check_permutation',
    'number_to_permutation',
    'permutation_to_number',
]
