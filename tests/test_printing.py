import io

import pytest

from berquest.printing import (
    c_format,
    format_hex,
    format_pointer,
    format_unsigned,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_plain_text_passes_through():
    assert c_format("steps : ") == "steps : "


def test_null_string_conversion():
    assert c_format("%s", None) == "(null)"


def test_string_conversion():
    assert c_format("[%s]", "map") == "[map]"


def test_null_pointer_conversion():
    assert c_format("%p", 0) == "(nil)"


def test_pointer_round_trip():
    address = 0xDEADBEEF1234
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_int_min_is_printed():
    assert c_format("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert c_format("%i", 2**31) == "-2147483648"


def test_signed_decimal_matches_input():
    assert c_format("%d moves", 42) == "42 moves"


def test_percent_escape():
    assert c_format("100%%") == "100%"


def test_trailing_lone_percent_is_printed():
    assert c_format("abc%") == "abc%"


def test_unknown_conversion_prints_nothing_and_takes_no_argument():
    assert c_format("%q%d", 7) == "7"


@pytest.mark.parametrize("value", ["A", 65])
def test_char_conversion(value):
    assert c_format("%c", value) == "A"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        c_format("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        c_format("%d", "seven")


@pytest.mark.parametrize("n", [0, 1, 9, 10, 12345, 2**31, 2**32 - 1])
def test_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 10, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_hex(n, False)
    upper = format_hex(n, True)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_hex_conversions_in_format():
    assert c_format("%x/%X", 255, 255) == "ff/FF"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("you won after %d moves %s", 12, "!", stream=out)
    assert out.getvalue() == "you won after 12 moves !"
    assert count == len(out.getvalue())


def test_put_char_and_str():
    out = io.StringIO()
    assert put_char("x", stream=out) == 1
    assert put_str("yz", stream=out) == 2
    assert out.getvalue() == "xyz"


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("Error : No valid path", stream=out)
    assert out.getvalue() == "Error : No valid path\n"


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, stream=out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -98765])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, stream=out)
    assert int(out.getvalue()) == n


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, stream=io.StringIO())