from unittest import mock

import pytest

from cub3d.libft.printf import (
    format_hex,
    format_int,
    format_pointer,
    format_unsigned,
    printf,
    sprintf,
)


def test_format_int_minimum():
    assert format_int(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -99999, 2147483647])
def test_format_int_matches_python_in_range(n):
    assert int(format_int(n)) == n


def test_format_int_wraps_overflow():
    assert format_int(2147483648) == "-2147483648"


def test_format_unsigned_wraps_negative():
    assert format_unsigned(-1) == format_unsigned(2**32 - 1)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 4096, 2**32 - 1])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 0xDEADBEEF])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, False), 16) == n
    assert format_hex(n, True) == format_hex(n, False).upper()


def test_format_hex_has_no_prefix_or_padding():
    text = format_hex(1, False)
    assert text == "1"


def test_format_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFF1234, 2**48 + 5])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_sprintf_mixed_conversions():
    result = sprintf("%s:%d:%c", "map", 42, "Z")
    assert result == "map:" + format_int(42) + ":Z"


def test_sprintf_null_string():
    assert sprintf("%s", None) == "(null)"


def test_sprintf_percent_literal():
    assert sprintf("100%%") == "100%"


def test_sprintf_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_sprintf_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_sprintf_hex_and_unsigned_match_helpers():
    assert sprintf("%x|%X|%u", 3054, 3054, -5) == "|".join(
        [format_hex(3054, False), format_hex(3054, True), format_unsigned(-5)]
    )


def test_sprintf_pointer_matches_helper():
    assert sprintf("%p", 4096) == format_pointer(4096)


def test_sprintf_char_from_int():
    assert sprintf("%c", ord("Q")) == "Q"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_sprintf_rejects_non_string_for_s():
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_printf_none_format():
    assert printf(None) == -1


def test_printf_without_terminal(capsys):
    with mock.patch("os.isatty", return_value=False):
        assert printf("hello") == -1
    assert capsys.readouterr().out == ""


def test_printf_writes_and_counts(capsys):
    with mock.patch("os.isatty", return_value=True):
        count = printf("%s=%i\n", "width", 1600)
    out = capsys.readouterr().out
    assert out == sprintf("%s=%i\n", "width", 1600)
    assert count == len(out)