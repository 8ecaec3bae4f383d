import pytest
from hypothesis import given
from hypothesis.strategies import integers, text

from randomfile.config import (
    FileConfig,
    InsufficientArgumentsError,
    SizeTooLargeError,
    check_arguments,
    is_numeric_positive,
    parse_size,
)
from randomfile.constants import MAX_FILE_SIZE


@pytest.mark.parametrize("value", ["1", "42", "007", "1000000", str(MAX_FILE_SIZE)])
def test_is_numeric_positive_accepts(value):
    assert is_numeric_positive(value)


@pytest.mark.parametrize("value", ["", "0", "000", "+5", "-5", " 5", "5 ", "1.5", "1e3", "abc", "١٢"])
def test_is_numeric_positive_rejects(value):
    assert not is_numeric_positive(value)


@given(integers(min_value=1, max_value=MAX_FILE_SIZE))
def test_parse_size_accepts_all_positive_in_range(n):
    assert parse_size(str(n)) == n


@given(text(alphabet="0123456789", min_size=1))
def test_is_numeric_positive_matches_nonzero(value):
    assert is_numeric_positive(value) == (int(value) != 0)


def test_parse_size_leading_zeros():
    assert parse_size("0010") == 10


def test_parse_size_overflow():
    with pytest.raises(SizeTooLargeError):
        parse_size(str(MAX_FILE_SIZE + 1))
    with pytest.raises(SizeTooLargeError):
        parse_size("9" * 40)


def test_parse_size_invalid():
    with pytest.raises(InsufficientArgumentsError):
        parse_size("0")


def test_check_arguments_basic():
    assert check_arguments(["out.bin", "1024"]) == FileConfig("out.bin", 1024, False)


@pytest.mark.parametrize(
    "args",
    [
        ["out.bin", "1024", "-o"],
        ["out.bin", "1024", "extra", "-o"],
        ["-o", "1024"],
    ],
)
def test_check_arguments_overwrite_anywhere(args):
    assert check_arguments(args).overwrite


def test_check_arguments_ignores_extra():
    conf = check_arguments(["out.bin", "5", "whatever", "else"])
    assert conf == FileConfig("out.bin", 5, False)


@pytest.mark.parametrize("args", [[], ["out.bin"], ["out.bin", "abc"], ["out.bin", "0"], ["1024", "out.bin"]])
def test_check_arguments_insufficient(args):
    with pytest.raises(InsufficientArgumentsError):
        check_arguments(args)


def test_check_arguments_too_big():
    with pytest.raises(SizeTooLargeError):
        check_arguments(["out.bin", "18446744073709551616"])
