import io

import pytest

from fdfview.fdprint import (
    format_hex,
    format_pointer,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
    sprintf,
)


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("z", out)
    put_char(ord("y"), out)
    assert out.getvalue() == "zy"


def test_put_str_and_none():
    out = io.StringIO()
    put_str("hello", out)
    put_str(None, out)
    assert out.getvalue() == "hello"


def test_put_endl_appends_newline_and_skips_none():
    out = io.StringIO()
    put_endl("line", out)
    put_endl(None, out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_put_defaults_to_stdout(capsys):
    put_str("abc")
    assert capsys.readouterr().out == "abc"


def test_format_hex_cases():
    assert format_hex(0) == "0"
    assert format_hex(255) == "ff"
    assert format_hex(255, upper=True) == "FF"


@pytest.mark.parametrize("n", [1, 16, 4095, 123456789, 2**40])
def test_format_hex_round_trip(n):
    assert int(format_hex(n), 16) == n
    assert format_hex(n, upper=True) == format_hex(n).upper()


def test_format_hex_negative_rejected():
    with pytest.raises(ValueError):
        format_hex(-1)


def test_format_pointer():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"
    text = format_pointer(48879)
    assert text.startswith("0x")
    assert int(text, 16) == 48879


def test_sprintf_plain_and_percent():
    assert sprintf("100%% done") == "100% done"


def test_sprintf_conversions():
    assert sprintf("%c-%s-%d-%i", "a", "word", 12, -3) == "a-word-12--3"


def test_sprintf_null_string():
    assert sprintf("%s", None) == "(null)"


def test_sprintf_int_min():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_sprintf_unsigned_wraps_negative():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert int(sprintf("%x", -1), 16) == 2**32 - 1


def test_sprintf_hex_case():
    assert sprintf("%x", 3054) == format_hex(3054)
    assert sprintf("%X", 3054) == format_hex(3054, upper=True)


def test_sprintf_pointer():
    assert sprintf("%p", None) == "0x0"
    assert sprintf("%p", 4096) == format_pointer(4096)


def test_sprintf_trailing_percent_dropped():
    assert sprintf("abc%") == "abc"


def test_sprintf_unknown_conversion():
    with pytest.raises(ValueError):
        sprintf("%q", 1)


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_writes_and_returns_length(capsys):
    count = printf("Error: %s %d\n", "code", 5)
    out = capsys.readouterr().out
    assert out == sprintf("Error: %s %d\n", "code", 5)
    assert count == len(out)


def test_printf_empty(capsys):
    assert printf("") == 0
    assert capsys.readouterr().out == ""