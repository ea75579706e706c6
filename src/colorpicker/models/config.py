"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from colorpicker.model_manager.persistence import PydanticPersistence

from .enums import InputMode
from .selection import SurfaceGeometry

DEFAULT_CONFIG_PATH = Path.home() / ".colorpicker" / "config.json"


class PickerConfig(BaseModel):
    """Application configuration and settings."""

    # Geometry (terminal cells)
    surface_width: int = Field(default=48, gt=0, description="Saturation/value surface width")
    surface_height: int = Field(default=16, gt=0, description="Saturation/value surface height")
    hue_width: int = Field(default=48, gt=0, description="Hue strip width")

    # Startup
    initial_color: str | None = Field(
        default=None,
        description="Hex color to seed the picker with when --color is not given",
    )
    input_mode: InputMode = Field(
        default=InputMode.HEX, description="Text fields shown at startup (hex, rgb or hsv)"
    )

    # Text input policy
    numeric_parse_fallback: int = Field(
        default=255,
        ge=0,
        le=255,
        description=(
            "Value substituted when an RGB/HSV field holds non-numeric text. "
            "Clamped afterwards like any typed value."
        ),
    )

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str | None) -> str | None:
        """Reject initial colors that are not 3 or 6 hex digits."""
        if v is None:
            return v
        from colorpicker.colors.conversion import hex_to_rgb

        if hex_to_rgb(v) is None:
            raise ValueError("initial_color must be a hex color like '#ff8800' or 'f80'")
        return v

    def geometry(self) -> SurfaceGeometry:
        """Surface geometry described by this config."""
        return SurfaceGeometry(
            surface_width=self.surface_width,
            surface_height=self.surface_height,
            hue_width=self.hue_width,
        )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorpicker/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
