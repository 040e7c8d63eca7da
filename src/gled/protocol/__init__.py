"""Field validation and LED command encoding."""

from .command import BODY_SIZE, ENVELOPE, PAYLOAD_SIZE, LedCommandBuilder
from .fields import (
    encode_brightness,
    encode_color,
    encode_field,
    encode_rate,
    encode_toggle,
    parse_brightness,
    parse_color,
    parse_field,
    parse_rate,
    parse_toggle,
    validate_field,
)

__all__ = [
    "BODY_SIZE",
    "ENVELOPE",
    "PAYLOAD_SIZE",
    "LedCommandBuilder",
    "encode_brightness",
    "encode_color",
    "encode_field",
    "encode_rate",
    "encode_toggle",
    "parse_brightness",
    "parse_color",
    "parse_field",
    "parse_rate",
    "parse_toggle",
    "validate_field",
]
