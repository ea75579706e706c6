"""colorpicker: synchronized hue / saturation-value / text color picker."""

__version__ = "0.1.0"

# Core
from .core import DragController, SelectionStateMachine, TextInputResolver
from .models import Color, SelectionState

__all__ = [
    "Color",
    "DragController",
    "SelectionState",
    "SelectionStateMachine",
    "TextInputResolver",
]
