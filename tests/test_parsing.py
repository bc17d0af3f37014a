import pytest

from wireframe.parsing import (
    MapFormatError,
    atoi,
    parse_color,
    parse_height,
    parse_point,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+5", 5),
        ("\t\n 7", 7),
        ("12abc", 12),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_converts_leading_integer(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "-+5", "+", "abc", ""])
def test_atoi_returns_zero_on_overflow_or_no_digits(text):
    assert atoi(text) == 0


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), ("-0", 0), ("+000", 0), ("10", 10), ("-3", -3), ("007", 7)],
)
def test_parse_height_accepts_valid(text, expected):
    assert parse_height(text) == expected


@pytest.mark.parametrize(
    "text", ["", "+", "-", "1a", "99999999999", "1.5", " 1", "--1", "0x10"]
)
def test_parse_height_rejects_invalid(text):
    with pytest.raises(MapFormatError):
        parse_height(text)


def test_parse_height_round_trip():
    for value in (-1000, -1, 0, 1, 255, 2147483647):
        assert parse_height(str(value)) == value


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0xFF", 0xFF),
        ("0xff", 0xFF),
        ("0xFFFFFF", 0xFFFFFF),
        ("0x0", 0),
        ("255", 255),
        ("0", 0),
        ("16777215", 0xFFFFFF),
    ],
)
def test_parse_color_accepts_valid(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize(
    "text",
    ["0xFfF", "0x", "0x1234567", "0xGG", "00", "016", "16777216", "0X10", "-1", ""],
)
def test_parse_color_rejects_invalid(text):
    with pytest.raises(MapFormatError):
        parse_color(text)


def test_parse_color_hex_round_trip():
    for value in (0x000001, 0x123456, 0xABCDEF, 0xFFFFFF):
        assert parse_color(f"0x{value:x}") == value
        assert parse_color(f"0x{value:X}") == value
        assert parse_color(str(value)) == value


def test_parse_point_without_color_uses_white():
    assert parse_point("5") == (5, 0xFFFFFF)


def test_parse_point_with_hex_color():
    assert parse_point("-2,0xFF0000") == (-2, 0xFF0000)


def test_parse_point_with_decimal_color():
    assert parse_point("3,255") == (3, 255)


@pytest.mark.parametrize("token", ["5,", ",0xFF", "a,0xFF", "1,2,3", "", "1,0xZZ"])
def test_parse_point_rejects_invalid(token):
    with pytest.raises(MapFormatError):
        parse_point(token)


def test_map_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_point("x")