"""Protocol definitions for the picker's observer patterns.

This package contains protocols and events specific to the picker:
- Events: Selection changes and raw pointer input
- Observers: Protocols for components that react to these events
"""

from .events import PickerEvent, PointerEvent
from .observers import PickerObserver, PointerListener, PointerSource

__all__ = [
    # Events
    "PickerEvent",
    "PointerEvent",
    # Observers
    "PickerObserver",
    "PointerListener",
    "PointerSource",
]
