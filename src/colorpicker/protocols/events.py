"""Domain events for observer pattern.

This module defines events that can occur within the picker:
- Picker events: Selection state changes
- Pointer events: Raw pointer input delivered to drag controllers
"""

from dataclasses import dataclass
from enum import Enum


class PickerEvent(Enum):
    """Events from the selection state machine."""

    SURFACE_SELECTOR_CHANGED = "surface_selector_changed"  # Surface selector moved
    HUE_CHANGED = "hue_changed"                            # Hue selector moved
    COLOR_CHANGED = "color_changed"                        # Canonical color changed by an edit
    TEXT_COMMITTED = "text_committed"                      # Text fields committed a color
    SEEDED = "seeded"                                      # Initial color applied


@dataclass(frozen=True)
class PointerEvent:
    """
    Raw pointer position plus the origin of the surface it is measured against.

    Attributes:
        screen_x: Pointer x in device (screen) coordinates
        screen_y: Pointer y in device (screen) coordinates
        origin_x: Surface left edge in device coordinates
        origin_y: Surface top edge in device coordinates
    """

    screen_x: float
    screen_y: float
    origin_x: float = 0.0
    origin_y: float = 0.0

    @property
    def local_x(self) -> float:
        """Pointer x relative to the surface."""
        return self.screen_x - self.origin_x

    @property
    def local_y(self) -> float:
        """Pointer y relative to the surface."""
        return self.screen_y - self.origin_y
