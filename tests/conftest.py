import sys

import pytest


@pytest.fixture
def int_str_limit():
    """Pin the interpreter's int/str conversion limit to its default of 4300 digits."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")

    limit_prev = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(limit_prev)
