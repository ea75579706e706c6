"""Data models for the color picker."""

from .color import HSV, RGB, Color, Coordinate
from .config import PickerConfig
from .enums import DragState, InitState, InputMode
from .selection import SelectionState, SurfaceGeometry

__all__ = [
    # Models
    "Color",
    "Coordinate",
    "PickerConfig",
    "SelectionState",
    "SurfaceGeometry",
    # Enums
    "DragState",
    "InitState",
    "InputMode",
    # Tuple aliases
    "HSV",
    "RGB",
]
