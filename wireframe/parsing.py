"""Validation and conversion of the tokens that make up a height-map file.

Each token of a map line is ``<height>`` or ``<height>,<color>``. A color is
either ``0x`` followed by one to six hex digits of a single letter case, or
a decimal number from 0 to 0xFFFFFF without leading zeros.
"""

from __future__ import annotations

DEFAULT_COLOR = 0xFFFFFF
MAX_COLOR = 0xFFFFFF

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_DIGITS = frozenset("0123456789")
_UPPER_HEX = frozenset("ABCDEF")
_LOWER_HEX = frozenset("abcdef")
_HEX_DIGITS = _DIGITS | _UPPER_HEX | _LOWER_HEX
_WHITESPACE = frozenset(" \t\n\v\f\r")


class MapFormatError(ValueError):
    """Raised when a map token is not a valid height or color."""


def _all_digits(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def atoi(text: str) -> int:
    """Convert a leading decimal integer, returning 0 if it overflows 32 bits.

    Leading whitespace is skipped; a sign counts only when a digit follows it.
    Conversion stops at the first non-digit.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if (
        pos < length
        and text[pos] in "+-"
        and pos + 1 < length
        and text[pos + 1] in _DIGITS
    ):
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    result = 0
    while pos < length and text[pos] in _DIGITS:
        result = result * 10 + sign * int(text[pos])
        if result > _INT_MAX or result < _INT_MIN:
            return 0
        pos += 1
    return result


def parse_height(text: str) -> int:
    """Parse a height: an optionally signed decimal integer that fits 32 bits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body:
        raise MapFormatError(f"missing digits in height {text!r}")
    if not _all_digits(body):
        raise MapFormatError(f"invalid height {text!r}")
    value = atoi(text)
    if value == 0:
        # Zero is only accepted when it really is zero, not an overflow.
        if any(ch != "0" for ch in text[1:]) or text[0] not in "0+-":
            raise MapFormatError(f"height out of range {text!r}")
    return value


def _parse_hex_color(digits: str) -> int:
    if not digits or len(digits) > 6:
        raise MapFormatError(f"hex color must have 1 to 6 digits: {digits!r}")
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise MapFormatError(f"invalid hex color {digits!r}")
    has_upper = any(ch in _UPPER_HEX for ch in digits)
    has_lower = any(ch in _LOWER_HEX for ch in digits)
    if has_upper and has_lower:
        raise MapFormatError(f"mixed-case hex color {digits!r}")
    return int(digits, 16)


def _parse_decimal_color(text: str) -> int:
    if not _all_digits(text):
        raise MapFormatError(f"invalid decimal color {text!r}")
    value = atoi(text)
    if value != 0 and text.startswith("0"):
        raise MapFormatError(f"leading zero in color {text!r}")
    if value == 0 and len(text) != 1:
        raise MapFormatError(f"invalid decimal color {text!r}")
    if value < 0 or value > MAX_COLOR:
        raise MapFormatError(f"color out of range {text!r}")
    return value


def parse_color(text: str) -> int:
    """Parse the color part of a token (the text after the comma)."""
    if text.startswith("0x"):
        return _parse_hex_color(text[2:])
    return _parse_decimal_color(text)


def parse_point(token: str) -> tuple[int, int]:
    """Parse a map token into ``(height, color)``.

    A token without a comma gets the default white color.
    """
    height_text, comma, color_text = token.partition(",")
    if not comma:
        color = DEFAULT_COLOR
    elif not color_text:
        raise MapFormatError(f"empty color in {token!r}")
    else:
        color = parse_color(color_text)
    return parse_height(height_text), color