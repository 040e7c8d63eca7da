"""Enumerations for the LED controller."""

from enum import Enum


class LightingMode(str, Enum):
    """LED lighting modes supported by the mouse."""

    SOLID = "solid"  # Fixed color
    CYCLE = "cycle"  # Cycle through all colors
    BREATHE = "breathe"  # Single color fading in and out
    INTRO = "intro"  # Startup effect on/off


class Toggle(str, Enum):
    """On/off switch for the startup effect."""

    ON = "on"
    OFF = "off"

    @property
    def code(self) -> int:
        """Byte sent to the device (on=0x01, off=0x02)."""
        return 0x01 if self is Toggle.ON else 0x02


class FieldKind(str, Enum):
    """Kinds of command-line field accepted by the lighting commands."""

    COLOR = "color"
    RATE = "rate"
    BRIGHTNESS = "brightness"
    TOGGLE = "toggle"
