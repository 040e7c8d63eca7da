"""Data models for the LED controller."""

from .color import Color
from .commands import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_RATE,
    MAX_BRIGHTNESS,
    MAX_RATE,
    MIN_BRIGHTNESS,
    MIN_RATE,
    BreatheCommand,
    CycleCommand,
    IntroCommand,
    LightingCommand,
    SolidCommand,
)
from .config import DeviceConfig
from .enums import FieldKind, LightingMode, Toggle

__all__ = [
    "DEFAULT_BRIGHTNESS",
    "DEFAULT_RATE",
    "MAX_BRIGHTNESS",
    "MAX_RATE",
    "MIN_BRIGHTNESS",
    "MIN_RATE",
    # Commands
    "BreatheCommand",
    # Models
    "Color",
    "CycleCommand",
    "DeviceConfig",
    # Enums
    "FieldKind",
    "IntroCommand",
    "LightingCommand",
    "LightingMode",
    "SolidCommand",
    "Toggle",
]
