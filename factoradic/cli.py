"""
Command-line interface.

Usage:
    factoradic -m 1 -i number.txt            # decimal to factoradic
    echo 3,2,1,0 | factoradic -m 2           # factoradic to decimal
    factoradic -m 5 -f 8 -s raw -i key.bin   # raw number to permutation of length 8

Results go to stdout (or -o); errors are logged to stderr.
"""

import argparse
import logging
import sys
from contextlib import ExitStack, contextmanager
from functools import partial

from factoradic import digits, formats, lehmer, pipeline
from factoradic.base import MAX_DIGITS, FactoradicError
from factoradic.util import eval_wrapper

logger = logging.getLogger(__name__)

# mode: (input kind, output kind, output label, description)
MODES = {
    1: ("number", "digits", "Factoradic", "Decimal to Factoradic"),
    2: ("digits", "number", "Decimal", "Factoradic to Decimal"),
    3: ("digits", "digits", "Permutation", "Factoradic to Permutation"),
    4: ("digits", "digits", "Factoradic", "Permutation to Factoradic"),
    5: ("number", "digits", "Permutation", "Decimal to Permutation"),
    6: ("digits", "number", "Decimal", "Permutation to Decimal"),
}


def _non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def make_parser():
    modes_help = "\n".join(f" {mode} = {info[3]}" for mode, info in MODES.items())
    parser = argparse.ArgumentParser(
        prog="factoradic",
        description="Convert between integers, factoradic digits and permutations.",
        epilog=f"Modes:\n{modes_help}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-m", "--mode", type=int, choices=sorted(MODES), default=1, help="conversion mode")
    parser.add_argument("-i", "--input", help="input file (default: stdin)")
    parser.add_argument("-o", "--output", help="output file (default: stdout)")
    parser.add_argument(
        "-f", "--fixed", type=_non_negative_int, help="fixed digit count / permutation length (modes 1 and 5)"
    )
    parser.add_argument("-s", "--input-format", choices=formats.FORMATS, default="dec", help="number input format")
    parser.add_argument("-S", "--output-format", choices=formats.FORMATS, default="dec", help="number output format")
    parser.add_argument("--label", action="store_true", help="label the output, e.g. 'Factoradic: [1, 0]'")
    parser.add_argument("--strict", action="store_true", help="reject digits exceeding their place bound (mode 2)")
    parser.add_argument(
        "--max-digits", type=_positive_int, default=MAX_DIGITS, help=f"length ceiling (default: {MAX_DIGITS})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log conversion stages and timing")
    return parser


@contextmanager
def _stream_logger(level):
    pkg_logger = logging.getLogger("factoradic")
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    level_prev = pkg_logger.level
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    try:
        yield pkg_logger
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.setLevel(level_prev)


def convert(mode, value, fixed=None, strict=False, max_digits=MAX_DIGITS):
    """Run the core conversion selected by a CLI mode."""
    if mode == 1:
        if fixed is None:
            return digits.number_to_factoradic(value, max_digits)
        return digits.number_to_factoradic_fixed(value, fixed, max_digits)
    elif mode == 2:
        return digits.factoradic_to_number(value, strict, max_digits)
    elif mode == 3:
        return lehmer.factoradic_to_permutation(value, max_digits)
    elif mode == 4:
        return lehmer.permutation_to_factoradic(value, max_digits)
    elif mode == 5:
        return pipeline.number_to_permutation(value, fixed, max_digits)
    elif mode == 6:
        return pipeline.permutation_to_number(value, max_digits)
    else:
        raise ValueError(f"Unknown mode {mode}.")


def _open(stack, path, fmt, mode):
    binary = fmt == "raw"
    if path is None:
        stream = sys.stdin if mode == "r" else sys.stdout
        return stream.buffer if binary else stream
    if binary:
        return stack.enter_context(open(path, mode + "b"))
    return stack.enter_context(open(path, mode, encoding="ascii"))


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    in_kind, out_kind, label, description = MODES[args.mode]
    if in_kind != "number" and args.input_format == "raw":
        parser.error(f"mode {args.mode} reads a digit list, raw input is not supported")
    if out_kind != "number" and args.output_format == "raw":
        parser.error(f"mode {args.mode} writes a digit list, raw output is not supported")
    if args.mode == 5 and args.fixed is None:
        parser.error("-f/--fixed is required for mode 5")
    if args.mode not in (1, 5) and args.fixed is not None:
        parser.error(f"-f/--fixed applies to modes 1 and 5 only, not mode {args.mode}")

    with _stream_logger(logging.DEBUG if args.verbose else logging.INFO):
        logger.debug(f"Mode {args.mode}: {description}")
        try:
            with ExitStack() as stack:
                fin = _open(stack, args.input, args.input_format, "r")
                if in_kind == "number":
                    value = formats.read_number(fin, args.input_format)
                else:
                    value = formats.read_digits(fin)

                convert_ = eval_wrapper(
                    partial(convert, args.mode, fixed=args.fixed, strict=args.strict, max_digits=args.max_digits)
                )
                result, t_run = convert_(value)
                logger.debug(f"Converted in {t_run:.6f} s")

                label = label if args.label else None
                if out_kind == "number":
                    output = formats.format_number(result, args.output_format, label)
                else:
                    output = formats.format_digits(result, label) + "\n"

                fout = _open(stack, args.output, args.output_format, "w")
                fout.write(output)
                fout.flush()
        except (FactoradicError, OSError, UnicodeDecodeError) as err:
            logger.error(err)
            return 1

    return 0
