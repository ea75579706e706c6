"""Reusable UI widgets for the TUI."""

from .color_input import ColorInputPanel, CommitOnBlurInput
from .hue_strip import HueStripWidget
from .surface import SurfaceWidget
from .swatch_bar import SwatchBar

__all__ = [
    "ColorInputPanel",
    "CommitOnBlurInput",
    "HueStripWidget",
    "SurfaceWidget",
    "SwatchBar",
]
