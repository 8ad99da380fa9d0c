import string

import pytest

from pipeshell.chars import (
    atoi,
    intlen,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+17", 17),
        ("\v\f\r 8", 8),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "   ", "-", "+-5", "--5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


@pytest.mark.parametrize("number", [0, 5, -5, 10, -10, 99999, -2147483647])
def test_intlen_matches_itoa_length(number):
    assert intlen(number) == len(itoa(number))


def test_itoa_negative_has_sign():
    assert itoa(-123) == "-123"


def test_classification_over_ascii():
    for code in range(128):
        char = chr(code)
        assert is_alpha(char) == (char in string.ascii_letters)
        assert is_digit(char) == (char in string.digits)
        assert is_alnum(char) == (is_alpha(char) or is_digit(char))
        assert is_ascii(char)
        assert is_print(char) == (32 <= code <= 126)


def test_non_ascii_characters():
    assert not is_ascii("é")
    assert not is_alpha("é")
    assert not is_print("é")


def test_integer_codes_are_accepted():
    assert is_digit(ord("5"))
    assert not is_ascii(-1)
    assert not is_ascii(128)


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_case_conversion_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_lower(to_upper(lower)) == lower


@pytest.mark.parametrize("char", list("09 !~{@[`") + ["é"])
def test_case_conversion_leaves_others_alone(char):
    assert to_lower(char) == char
    assert to_upper(char) == char


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")