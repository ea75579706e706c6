"""Enums for picker modes and lifecycle states."""

from enum import Enum


class InputMode(str, Enum):
    """Which text fields the input panel shows."""

    HEX = "hex"
    RGB = "rgb"
    HSV = "hsv"


class InitState(Enum):
    """One-shot seeding state of a selection state machine."""

    UNINITIALIZED = "uninitialized"  # No seed and no edit yet
    INITIALIZED = "initialized"      # Seeded, or edited before any seed arrived


class DragState(Enum):
    """Pointer state of a drag controller."""

    IDLE = "idle"
    DRAGGING = "dragging"
