from math import factorial

from factoradic import (
    factoradic_to_number,
    factoradic_to_permutation,
    number_to_factoradic,
    number_to_permutation,
    permutation_to_factoradic,
    permutation_to_number,
)
from factoradic.formats import format_digits
from factoradic.generators import Permutations

seed = 12345

# Integer to factoradic and back
num = 463
digits = number_to_factoradic(num)
print(format_digits(digits, label="Factoradic"))
print(f"Decimal: {factoradic_to_number(digits)}")


# Lehmer code of a permutation
seq = factoradic_to_permutation(digits)
print(format_digits(seq, label="Permutation"))
print(format_digits(permutation_to_factoradic(seq), label="Factoradic"))


# Rank random permutations of a deck of cards
length = 52
for seq in Permutations(length, rng=seed)(3):
    rank = permutation_to_number(seq)
    assert number_to_permutation(rank, length) == seq
    print(f"{rank} / {factorial(length)}")
