"""Command-line field parsing and fixed-width hex encoding.

Each lighting command is built from up to four kinds of field. Every kind
has a parser (raw string -> validated value) and an encoder (value -> the
fixed-width lowercase hex that goes into the payload):

    Kind        Accepted input          Default     Encoded
    color       RRGGBB or RGB, '#' ok   (required)  6 hex
    rate        100-60000 (ms)          10000       4 hex
    brightness  1-100 (%)               100         2 hex
    toggle      on / off                (required)  2 hex

Parsers raise ArgumentValidationError; nothing is encoded from a value that
did not pass its check.
"""

import re
from typing import Any, Callable, Union

from gled.exceptions import ArgumentValidationError
from gled.models import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_RATE,
    MAX_BRIGHTNESS,
    MAX_RATE,
    MIN_BRIGHTNESS,
    MIN_RATE,
    Color,
    FieldKind,
    Toggle,
)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")

FieldValue = Union[Color, int, Toggle]


def parse_color(raw: str) -> Color:
    """
    Parse a hex color.

    Accepts 6-digit (``ff8000``) and 3-digit (``f80``) forms, with or without
    a leading ``#``. In the 3-digit form each nibble is doubled, so ``f``
    becomes ``ff`` (n * 17).

    Raises:
        ArgumentValidationError: If the color is missing or malformed
    """
    if not raw:
        raise ArgumentValidationError("color", raw, "no color argument found")

    digits = raw[1:] if raw.startswith("#") else raw
    if len(digits) not in (3, 6) or not _HEX_DIGITS.fullmatch(digits):
        raise ArgumentValidationError("color", raw, "expected 3 or 6 hex digits")

    if len(digits) == 6:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    else:
        r, g, b = (int(nibble, 16) * 17 for nibble in digits)
    return Color(r=r, g=g, b=b)


def _parse_bounded_int(field: str, raw: str, default: int, low: int, high: int) -> int:
    if raw == "":
        return default
    if not _DECIMAL.fullmatch(raw):
        raise ArgumentValidationError(field, raw, "not a base-10 integer")
    value = int(raw)
    if not low <= value <= high:
        raise ArgumentValidationError(field, raw, f"out of range ({low}-{high})")
    return value


def parse_rate(raw: str) -> int:
    """Parse an effect rate in milliseconds (empty string -> 10000)."""
    return _parse_bounded_int("rate", raw, DEFAULT_RATE, MIN_RATE, MAX_RATE)


def parse_brightness(raw: str) -> int:
    """Parse a brightness percentage (empty string -> 100)."""
    return _parse_bounded_int(
        "brightness", raw, DEFAULT_BRIGHTNESS, MIN_BRIGHTNESS, MAX_BRIGHTNESS
    )


def parse_toggle(raw: str) -> Toggle:
    """Parse exactly 'on' or 'off'."""
    if raw == Toggle.ON.value:
        return Toggle.ON
    if raw == Toggle.OFF.value:
        return Toggle.OFF
    raise ArgumentValidationError("toggle", raw, "expected 'on' or 'off'")


def encode_color(color: Color) -> str:
    return color.to_hex()


def encode_rate(rate: int) -> str:
    return f"{rate:04x}"


def encode_brightness(brightness: int) -> str:
    return f"{brightness:02x}"


def encode_toggle(toggle: Toggle) -> str:
    return f"{toggle.code:02x}"


_PARSERS: dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.COLOR: parse_color,
    FieldKind.RATE: parse_rate,
    FieldKind.BRIGHTNESS: parse_brightness,
    FieldKind.TOGGLE: parse_toggle,
}

_ENCODERS: dict[FieldKind, Callable[[Any], str]] = {
    FieldKind.COLOR: encode_color,
    FieldKind.RATE: encode_rate,
    FieldKind.BRIGHTNESS: encode_brightness,
    FieldKind.TOGGLE: encode_toggle,
}


def parse_field(kind: FieldKind, raw: str) -> FieldValue:
    """Parse a raw command-line string as the given field kind."""
    return _PARSERS[kind](raw)


def encode_field(kind: FieldKind, value: FieldValue) -> str:
    """Encode an already validated value as fixed-width lowercase hex."""
    return _ENCODERS[kind](value)


def validate_field(kind: FieldKind, raw: str) -> str:
    """
    Validate a raw string and return its payload encoding.

    Args:
        kind: Which field the string is for
        raw: The string as typed by the user

    Returns:
        Fixed-width lowercase hex (6, 4, 2 or 2 digits depending on kind)

    Raises:
        ArgumentValidationError: If the string fails parsing or range checks

    Example:
        >>> validate_field(FieldKind.COLOR, "#f00")
        'ff0000'
        >>> validate_field(FieldKind.RATE, "")
        '2710'
    """
    return encode_field(kind, parse_field(kind, raw))
