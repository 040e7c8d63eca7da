"""Argument and encoding exceptions.

This module defines exceptions raised before any USB access happens:
- ArgumentValidationError: A command-line field is malformed or out of range
- PayloadEncodingError: The encoded command is not valid hex (internal error)
"""

from typing import Any

from .base import GledError

# Accepted formats, shown as recovery hints
_FIELD_FORMATS = {
    "color": "RRGGBB or RGB hex, with or without a leading '#' (e.g. ff0000, #f00)",
    "rate": "100-60000 (number of milliseconds, default 10000)",
    "brightness": "1-100 (percentage, default 100)",
    "toggle": "on|off",
}


class ArgumentValidationError(GledError):
    """A command-line field failed parsing or range checking."""

    def __init__(self, field: str, value: Any, reason: str):
        """
        Initialize argument validation error.

        Args:
            field: The field kind that failed (color, rate, brightness, toggle)
            value: The raw value as given by the user
            reason: Why the value is invalid
        """
        user_msg = f"Invalid {field} argument {value!r}: {reason}"

        recovery = None
        if field in _FIELD_FORMATS:
            recovery = f"Expected {field}: {_FIELD_FORMATS[field]}"

        super().__init__(
            user_message=user_msg,
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.reason = reason


class PayloadEncodingError(GledError):
    """The command hex string could not be decoded into bytes."""

    def __init__(self, hex_string: str, parse_error: str):
        """
        Initialize payload encoding error.

        Args:
            hex_string: The hex string that failed to decode
            parse_error: The decoder's error message
        """
        super().__init__(
            user_message="Internal error: could not encode the LED command",
            technical_message=f"Error converting data from hex string {hex_string!r}: {parse_error}",
        )
        self.hex_string = hex_string
        self.parse_error = parse_error
