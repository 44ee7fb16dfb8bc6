"""
Text and binary formats for numbers and digit sequences.

Digit sequences and permutations are written as one line of comma-separated
integers, e.g. ``3,2,1,0``. Numbers are either decimal text (``dec``) or raw
unsigned big-endian bytes (``raw``).
"""

import re

from factoradic.base import FormatError, ParseError

FORMATS = ("dec", "raw")

_int_pattern = re.compile(r"-?[0-9]+")
_uint_pattern = re.compile(r"[0-9]+")


def parse_digits(line):
    """
    Parse a line of comma-separated integers.

    Parameters
    ----------
    line : str
        Text line; a trailing newline and whitespace around tokens are ignored.

    Returns
    -------
    tuple of int

    Raises
    ------
    ParseError
        If the line is empty or a token is not an integer.

    """
    text = line.strip()
    if not text:
        raise ParseError(line)

    digits = []
    for index, token in enumerate(text.split(",")):
        token = token.strip()
        if _int_pattern.fullmatch(token) is None:
            raise ParseError(token, index)
        try:
            digits.append(int(token))
        except ValueError:  # exceeds the interpreter's int/str conversion limit
            raise ParseError(token[:16] + "...", index) from None

    return tuple(digits)


def format_digits(digits, label=None):
    """Render integers as ``3,2,1,0``, or ``Label: [3, 2, 1, 0]`` when labelled."""
    if label is None:
        return ",".join(str(d) for d in digits)
    return f"{label}: [{', '.join(str(d) for d in digits)}]"


def parse_decimal(text):
    """Parse an unsigned decimal integer."""
    token = text.strip()
    if _uint_pattern.fullmatch(token) is None:
        raise ParseError(token)
    try:
        return int(token)
    except ValueError:  # exceeds the interpreter's int/str conversion limit
        raise ParseError(token[:16] + "...") from None


def from_bytes(data):
    """Import an unsigned big-endian byte buffer."""
    if not data:
        raise ParseError(data)
    return int.from_bytes(data, "big")


def to_bytes(num):
    """Export a non-negative integer as a minimal big-endian byte buffer; zero is one null byte."""
    n_bytes = max((num.bit_length() + 7) // 8, 1)
    return num.to_bytes(n_bytes, "big")


def read_digits(stream):
    """Read a digit sequence from the first line of a text stream."""
    return parse_digits(stream.readline())


def write_digits(stream, digits, label=None):
    """Write a digit sequence as one line of a text stream."""
    stream.write(format_digits(digits, label) + "\n")


def read_number(stream, fmt="dec"):
    """
    Read a number from a stream.

    Parameters
    ----------
    stream : file object
        Text stream for 'dec', binary stream for 'raw'.
    fmt : {'dec', 'raw'}
        Number format.

    Returns
    -------
    int

    """
    _check_format(fmt)
    if fmt == "raw":
        return from_bytes(stream.read())
    return parse_decimal(stream.readline())


def format_number(num, fmt="dec", label=None):
    """
    Render a number for output.

    Returns
    -------
    str or bytes
        Newline-terminated text for 'dec', a byte buffer for 'raw'.

    Raises
    ------
    FormatError
        If the number has too many decimal digits to convert to text.

    """
    _check_format(fmt)
    if fmt == "raw":
        return to_bytes(num)
    try:
        text = str(num)
    except ValueError:  # exceeds the interpreter's int/str conversion limit
        raise FormatError(num, fmt) from None
    if label is None:
        return text + "\n"
    return f"{label}: {text}\n"


def write_number(stream, num, fmt="dec", label=None):
    """Write a number to a stream, see `read_number`."""
    stream.write(format_number(num, fmt, label))


def _check_format(fmt):
    if fmt not in FORMATS:
        raise ValueError(f"Format must be one of {FORMATS}, got {fmt!r}.")
