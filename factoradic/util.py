"""Common utilities."""

from functools import wraps
from time import perf_counter

from factoradic.base import Conversion


def eval_wrapper(func):
    """Wrap a conversion, creating a function that outputs runtime in addition to its value."""

    @wraps(func)
    def timed_func(*args, **kwargs):
        t_start = perf_counter()
        value = func(*args, **kwargs)
        t_run = perf_counter() - t_start

        return Conversion(value, t_run)

    return timed_func
