"""gled: LED control for the Logitech G102 and G203 Prodigy gaming mice."""

__version__ = "0.1.0"

from .devices import LedController
from .models import (
    BreatheCommand,
    Color,
    CycleCommand,
    DeviceConfig,
    IntroCommand,
    SolidCommand,
    Toggle,
)
from .protocol import LedCommandBuilder

__all__ = [
    "BreatheCommand",
    "Color",
    "CycleCommand",
    "DeviceConfig",
    "IntroCommand",
    "LedCommandBuilder",
    "LedController",
    "SolidCommand",
    "Toggle",
]
