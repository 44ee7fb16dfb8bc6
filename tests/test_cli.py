import io
import logging
import sys
from math import factorial

import pytest

from factoradic.cli import convert, main
from factoradic.formats import from_bytes


def run(tmp_path, text, *args, binary=False):
    in_path = tmp_path / "in.bin"
    out_path = tmp_path / "out.txt"
    if binary:
        in_path.write_bytes(text)
    else:
        in_path.write_text(text)
    code = main(["-i", str(in_path), "-o", str(out_path), *args])
    return code, out_path


@pytest.mark.parametrize(
    "mode, text, output",
    [
        ("1", "23\n", "3,2,1,0\n"),
        ("2", "3,2,1,0\n", "23\n"),
        ("3", "2,1,0\n", "2,1,0\n"),
        ("4", "1,2,0\n", "1,1,0\n"),
        ("6", "2,1,0\n", "5\n"),
    ],
)
def test_modes(tmp_path, mode, text, output):
    code, out_path = run(tmp_path, text, "-m", mode)
    assert code == 0
    assert out_path.read_text() == output


def test_fixed(tmp_path):
    code, out_path = run(tmp_path, "23", "-m", "1", "-f", "6")
    assert code == 0
    assert out_path.read_text() == "0,0,3,2,1,0\n"

    code, out_path = run(tmp_path, "5", "-m", "5", "-f", "3")
    assert code == 0
    assert out_path.read_text() == "2,1,0\n"


def test_label(tmp_path):
    code, out_path = run(tmp_path, "23", "-m", "1", "--label")
    assert out_path.read_text() == "Factoradic: [3, 2, 1, 0]\n"

    code, out_path = run(tmp_path, "3,2,1,0", "-m", "2", "--label")
    assert out_path.read_text() == "Decimal: 23\n"


def test_raw(tmp_path):
    code, out_path = run(tmp_path, b"\x01\xcf", "-m", "1", "-s", "raw", binary=True)
    assert code == 0
    assert out_path.read_text() == "3,4,1,0,1,0\n"

    code, out_path = run(tmp_path, "3,4,1,0,1,0", "-m", "2", "-S", "raw")
    assert code == 0
    assert out_path.read_bytes() == b"\x01\xcf"


def test_stdout(tmp_path, capsys):
    in_path = tmp_path / "in.txt"
    in_path.write_text("2,0,1\n")
    assert main(["-m", "6", "-i", str(in_path)]) == 0
    assert capsys.readouterr().out == "4\n"


@pytest.mark.parametrize(
    "mode, text, args",
    [
        ("3", "3,0,0", ()),
        ("4", "0,0,1", ()),
        ("2", "1,a,0", ()),
        ("2", "5,0,0", ("--strict",)),
        ("1", "-5", ()),
        ("1", "6", ("-f", "3")),
        ("5", "120", ("-f", "5")),
        ("1", "24", ("--max-digits", "4")),
    ],
)
def test_errors(tmp_path, capsys, mode, text, args):
    code, out_path = run(tmp_path, text, "-m", mode, *args)
    assert code == 1
    assert not out_path.exists()
    assert "ERROR" in capsys.readouterr().err


def test_missing_input(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="factoradic"):
        code = main(["-i", str(tmp_path / "missing.txt")])
    assert code == 1
    assert any(record.levelno == logging.ERROR for record in caplog.records)


@pytest.mark.parametrize(
    "args",
    [
        ("-m", "5"),
        ("-m", "3", "-s", "raw"),
        ("-m", "1", "-S", "raw"),
        ("-m", "7"),
        ("-m", "2", "-f", "3"),
        ("-m", "6", "-f", "3"),
        ("-f", "-1"),
        ("--max-digits", "0"),
    ],
)
def test_usage_errors(args):
    with pytest.raises(SystemExit) as exc_info:
        main(list(args))
    assert exc_info.value.code == 2


def test_verbose(tmp_path, capsys):
    code, out_path = run(tmp_path, "5", "-m", "5", "-f", "3", "-v")
    assert code == 0
    err = capsys.readouterr().err
    assert "Decimal to Permutation" in err
    assert "Converted in" in err


def test_handlers_removed(tmp_path):
    pkg_logger = logging.getLogger("factoradic")
    n_handlers = len(pkg_logger.handlers)
    run(tmp_path, "23", "-m", "1")
    assert len(pkg_logger.handlers) == n_handlers


def test_convert():
    assert convert(1, 23) == (3, 2, 1, 0)
    assert convert(1, 23, fixed=5) == (0, 3, 2, 1, 0)
    assert convert(2, (5, 0, 0)) == 10
    assert convert(5, 5, fixed=3) == (2, 1, 0)
    with pytest.raises(ValueError):
        convert(9, 0)


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3,2,1,0\n"))
    assert main(["-m", "2"]) == 0
    assert capsys.readouterr().out == "23\n"

    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["-m", "5", "-f", "3", "--label"]) == 0
    assert capsys.readouterr().out == "Permutation: [2, 1, 0]\n"


def test_long_digit_token(tmp_path, capsys, int_str_limit):
    code, out_path = run(tmp_path, "9" * 5000 + ",0", "-m", "2")
    assert code == 1
    assert not out_path.exists()
    assert "ERROR" in capsys.readouterr().err


def test_unprintable_result(tmp_path, capsys, int_str_limit):
    # leading digit times 255! has more decimal digits than the conversion limit
    text = "9" * 4000 + ",0" * 255
    code, out_path = run(tmp_path, text, "-m", "2")
    assert code == 1
    assert not out_path.exists()
    assert "ERROR" in capsys.readouterr().err

    code, out_path = run(tmp_path, text, "-m", "2", "-S", "raw")
    assert code == 0
    assert from_bytes(out_path.read_bytes()) == int("9" * 4000) * factorial(255)
