"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The mouse takes one byte per channel, so no device-specific conversion
    is needed beyond hex formatting.

    The model is frozen so commands built from it are immutable and hashable.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to the 6-digit lowercase hex used in command payloads.

        Returns:
            str: Hex color string in format 'rrggbb' (no leading '#')

        Example:
            >>> color = Color(r=255, g=0, b=0)
            >>> color.to_hex()
            'ff0000'
        """
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"
