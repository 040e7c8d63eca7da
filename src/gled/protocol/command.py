"""
LED command payload builder for the Logitech G102/G203 Prodigy.

Payload Format
==============

Every command is a 20-byte HID report. A fixed envelope wraps an 11-byte
body that depends on the lighting mode::

    11 ff 0e [11-byte body] 00 00 00 00 00 00
    └──┬───┘                └───────┬───────┘
    header                       padding

Bodies (hex, fields substituted)::

    solid    3b 00 01 RR GG BB 00 00 00 00 00
    cycle    3b 00 02 00 00 00 00 00 [rate:2] [bright:1]
    breathe  3b 00 03 RR GG BB [rate:2] 00 [bright:1] 00
    intro    5b 00 01 [toggle:1] 00 00 00 00 00 00 00
             │  └─┬─┘
             │    └─ sub-command (effect number)
             └─ feature (0x3b = LED effect, 0x5b = startup effect)

Rate is big-endian milliseconds, brightness a percentage and toggle
0x01 (on) or 0x02 (off). Every field has a fixed width, so every body is
22 hex characters and every payload 20 bytes by construction.

Example
-------

``solid ff0000``::

    11ff0e 3b0001ff00000000000000 000000000000

Key Design Principle
--------------------

This module is the lowest level that knows about bytes. It takes validated
command models and never touches USB; the controller above it hands the
result to a transport.
"""

from gled.exceptions import PayloadEncodingError
from gled.models import (
    BreatheCommand,
    Color,
    CycleCommand,
    IntroCommand,
    LightingCommand,
    SolidCommand,
    Toggle,
)

from .fields import encode_brightness, encode_color, encode_rate, encode_toggle

ENVELOPE = "11ff0e{body}000000000000"

BODY_SIZE = 11
PAYLOAD_SIZE = 20


class LedCommandBuilder:
    """Builds G102/G203 LED command bodies and payloads."""

    def solid(self, color: Color) -> str:
        """Build solid color body."""
        return "3b0001" + encode_color(color) + "0000000000"

    def cycle(self, rate: int, brightness: int) -> str:
        """Build color cycle body."""
        return "3b0002" + "0000000000" + encode_rate(rate) + encode_brightness(brightness)

    def breathe(self, color: Color, rate: int, brightness: int) -> str:
        """Build breathing body."""
        return (
            "3b0003"
            + encode_color(color)
            + encode_rate(rate)
            + "00"
            + encode_brightness(brightness)
            + "00"
        )

    def intro(self, toggle: Toggle) -> str:
        """Build startup effect toggle body."""
        return "5b0001" + encode_toggle(toggle) + "00000000000000"

    def body(self, command: LightingCommand) -> str:
        """
        Build the mode-specific body for a command.

        Raises:
            TypeError: If command is not one of the four lighting commands
        """
        if isinstance(command, SolidCommand):
            return self.solid(command.color)
        if isinstance(command, CycleCommand):
            return self.cycle(command.rate, command.brightness)
        if isinstance(command, BreatheCommand):
            return self.breathe(command.color, command.rate, command.brightness)
        if isinstance(command, IntroCommand):
            return self.intro(command.toggle)
        raise TypeError(f"Unsupported lighting command: {type(command).__name__}")

    def to_hex(self, command: LightingCommand) -> str:
        """Build the full payload as a hex string (body inside the envelope)."""
        return ENVELOPE.format(body=self.body(command))

    def payload(self, command: LightingCommand) -> bytes:
        """
        Build the raw payload bytes sent in the control transfer.

        Raises:
            PayloadEncodingError: If the hex string does not decode
        """
        data = self.to_hex(command)
        try:
            return bytes.fromhex(data)
        except ValueError as e:
            raise PayloadEncodingError(data, str(e)) from e
