import pytest

from cub3d.libft.convert import atoi, atol, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("+17abc", 17),
        ("\t\n\v\f\r 255", 255),
        ("0", 0),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected
    assert atol(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "+-5", "  x12", "--3"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0
    assert atol(text) == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12,34") == 12
    assert atoi("255 ") == 255


def test_atoi_wraps_at_32_bits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_atol_does_not_wrap_32_bit_values():
    assert atol("2147483648") == 2147483648


def test_atol_wraps_at_64_bits():
    assert atol("9223372036854775808") == -9223372036854775808


@pytest.mark.parametrize("n", [0, 7, -7, 1234, -98765, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    text = itoa(n)
    assert atoi(text) == n
    assert text == str(n)


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")