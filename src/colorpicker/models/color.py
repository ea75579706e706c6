"""Color and coordinate models shared by the picker core and front ends."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Plain tuple forms used by the pure conversion functions
RGB = tuple[int, int, int]
HSV = tuple[float, float, float]


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    This is the canonical representation held by the selection state and
    handed to observers. Conversion functions work on plain tuples; use
    `to_rgb_tuple()` / `from_rgb_tuple()` at the boundary.

    The model is frozen so states built from it can be compared and hashed.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int) -> int:
        """Ensure RGB values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("RGB values must be between 0 and 255")
        return v

    @classmethod
    def white(cls) -> "Color":
        """Create white, the color of an untouched picker."""
        return cls(r=255, g=255, b=255)

    @classmethod
    def from_rgb_tuple(cls, rgb: RGB) -> "Color":
        """Create a color from an (r, g, b) tuple."""
        r, g, b = rgb
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_hex(cls, text: str) -> "Color | None":
        """Parse a hex string ('#fff', 'ff8800', ...).

        Returns:
            The color, or None if the text is not 3 or 6 hex digits
        """
        from colorpicker.colors.conversion import hex_to_rgb

        rgb = hex_to_rgb(text)
        return cls.from_rgb_tuple(rgb) if rgb is not None else None

    @classmethod
    def from_hsv(cls, hsv: HSV) -> "Color":
        """Create a color from (hue, saturation, value)."""
        from colorpicker.colors.conversion import hsv_to_rgb

        return cls.from_rgb_tuple(hsv_to_rgb(hsv))

    def to_rgb_tuple(self) -> RGB:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hsv(self) -> HSV:
        """Convert to (hue, saturation, value)."""
        from colorpicker.colors.conversion import rgb_to_hsv

        return rgb_to_hsv(self.to_rgb_tuple())

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#ff0000').

        Returns:
            str: Hex color string in format '#rrggbb'

        Example:
            >>> color = Color(r=255, g=0, b=0)
            >>> color.to_hex()
            '#ff0000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class Coordinate(BaseModel):
    """A point in surface-local space (cells for the terminal front end)."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
