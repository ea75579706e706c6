"""Selection state record and surface geometry."""

from pydantic import BaseModel, ConfigDict, Field

from .color import HSV, Color, Coordinate


class SurfaceGeometry(BaseModel):
    """Dimensions of the selection surface and the hue strip.

    Coordinates on the surface range over [0, surface_width] x
    [0, surface_height]; hue positions range over [0, hue_width].
    """

    model_config = ConfigDict(frozen=True)

    surface_width: int = Field(default=48, gt=0, description="Surface width")
    surface_height: int = Field(default=16, gt=0, description="Surface height")
    hue_width: int = Field(default=48, gt=0, description="Hue strip width")


class SelectionState(BaseModel):
    """
    Canonical picker selection.

    Instances are immutable; the state machine replaces the whole record on
    every edit so observers never see a partially updated state.

    Attributes:
        hue: Pure hue sample (saturation and value at 100)
        color: Canonical selected color
        hue_position: Hue selector position along the strip
        surface_coordinate: Selector position on the saturation/value surface
    """

    model_config = ConfigDict(frozen=True)

    hue: Color = Field(default_factory=lambda: Color(r=255, g=0, b=0))
    color: Color = Field(default_factory=Color.white)
    hue_position: float = 0.0
    surface_coordinate: Coordinate = Field(default_factory=Coordinate)

    @property
    def hsv(self) -> HSV:
        """HSV form of the canonical color."""
        return self.color.to_hsv()

    @property
    def hex(self) -> str:
        """Hex form of the canonical color."""
        return self.color.to_hex()
