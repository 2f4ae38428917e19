import io

import pytest

from minishell.printf import format_simple, write_simple


def test_plain_text_unchanged():
    assert format_simple("hello world") == "hello world"


def test_null_string():
    assert format_simple("%s", None) == "(null)"


def test_string_and_percent():
    assert format_simple("%s%%", "abc") == "abc%"


def test_char_from_str_and_int():
    assert format_simple("%c", "Z") == "Z"
    assert format_simple("%c", 65) == "A"


@pytest.mark.parametrize("n", [0, 7, -42, 2**31 - 1, -(2**31)])
def test_decimal_in_range(n):
    assert format_simple("%d", n) == str(n)
    assert format_simple("%i", n) == str(n)


def test_decimal_wraps_to_int32():
    assert int(format_simple("%d", 2**31)) == 2**31 - 2**32


def test_unsigned_of_negative():
    assert int(format_simple("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    low = format_simple("%x", n)
    assert int(low, 16) == n
    assert format_simple("%X", n) == low.upper()
    assert low == low.lower()


def test_pointer():
    text = format_simple("%p", 123456)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 123456
    assert format_simple("%p", 0) == "0x0"


def test_unknown_conversion_drops_percent():
    assert format_simple("a%qb") == "aqb"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_simple("%d")


def test_write_simple_returns_count():
    stream = io.StringIO()
    count = write_simple(stream, "%s=%d\n", "key", 5)
    assert stream.getvalue() == "key=5\n"
    assert count == len(stream.getvalue())