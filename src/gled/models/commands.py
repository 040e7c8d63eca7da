"""Lighting command models.

The four lighting modes form a closed set: every command is exactly one of
``SolidCommand``, ``CycleCommand``, ``BreatheCommand`` or ``IntroCommand``,
tagged by its ``mode`` field. ``LightingCommand`` is the discriminated union
of all four, so a plain dict can be validated straight into the right
variant:

    >>> from pydantic import TypeAdapter
    >>> TypeAdapter(LightingCommand).validate_python({"mode": LightingMode.INTRO, "toggle": "on"})
    IntroCommand(mode=<LightingMode.INTRO: 'intro'>, toggle=<Toggle.ON: 'on'>)
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .color import Color
from .enums import LightingMode, Toggle

# Effect period in milliseconds
MIN_RATE = 100
MAX_RATE = 60000
DEFAULT_RATE = 10000

# Brightness in percent. The lower bound is 1, not 0.
MIN_BRIGHTNESS = 1
MAX_BRIGHTNESS = 100
DEFAULT_BRIGHTNESS = 100


class SolidCommand(BaseModel):
    """Show a single fixed color."""

    model_config = ConfigDict(frozen=True)

    mode: Literal[LightingMode.SOLID] = LightingMode.SOLID
    color: Color


class CycleCommand(BaseModel):
    """Cycle through all colors."""

    model_config = ConfigDict(frozen=True)

    mode: Literal[LightingMode.CYCLE] = LightingMode.CYCLE
    rate: int = Field(
        default=DEFAULT_RATE,
        ge=MIN_RATE,
        le=MAX_RATE,
        description="Cycle period in milliseconds",
    )
    brightness: int = Field(
        default=DEFAULT_BRIGHTNESS,
        ge=MIN_BRIGHTNESS,
        le=MAX_BRIGHTNESS,
        description="Brightness in percent",
    )


class BreatheCommand(BaseModel):
    """Fade a single color in and out."""

    model_config = ConfigDict(frozen=True)

    mode: Literal[LightingMode.BREATHE] = LightingMode.BREATHE
    color: Color
    rate: int = Field(
        default=DEFAULT_RATE,
        ge=MIN_RATE,
        le=MAX_RATE,
        description="Breathing period in milliseconds",
    )
    brightness: int = Field(
        default=DEFAULT_BRIGHTNESS,
        ge=MIN_BRIGHTNESS,
        le=MAX_BRIGHTNESS,
        description="Brightness in percent",
    )


class IntroCommand(BaseModel):
    """Enable or disable the startup effect."""

    model_config = ConfigDict(frozen=True)

    mode: Literal[LightingMode.INTRO] = LightingMode.INTRO
    toggle: Toggle


LightingCommand = Annotated[
    Union[SolidCommand, CycleCommand, BreatheCommand, IntroCommand],
    Field(discriminator="mode"),
]
