import string

import pytest

from berquest.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(0, 256))
def test_classifiers_match_ascii_tables(code):
    ch = chr(code)
    assert is_alpha(code) == (ch in string.ascii_letters)
    assert is_digit(code) == (ch in string.digits)
    assert is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert is_ascii(code) == (code < 128)


def test_is_print_boundaries():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_negative_code_is_not_ascii():
    assert not is_ascii(-1)


def test_classifiers_accept_strings():
    assert is_alpha("q")
    assert not is_alpha("5")
    assert is_digit("5")


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_classifier_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_on_codes_keeps_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_atoi_itoa_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"
    assert atoi("-2147483648") == -2147483648


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+42") == 42
    assert atoi("   -42abc") == -42


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("12 34") == 12


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")