"""Observer protocol definitions for picker and pointer events.

This module contains protocols for:
- Picker observers: React to selection state changes (rendering, callers)
- Pointer listeners: Receive globally observed pointer moves and releases
- Pointer sources: Hosts that deliver global pointer events to listeners
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colorpicker.models import SelectionState

from .events import PickerEvent, PointerEvent


@runtime_checkable
class PickerObserver(Protocol):
    """
    Observer that receives selection state changes.

    This protocol allows loose coupling between the selection state machine
    and the views that render it. Any object implementing this protocol can
    observe the picker.
    """

    def on_picker_event(self, event: "PickerEvent", state: "SelectionState") -> None:
        """
        Handle selection state changes.

        Args:
            event: What changed
            state: The complete new state (already stored)

        Error Handling:
            Exceptions raised by observers are caught and logged. They do not
            propagate to the edit that triggered them.
        """
        ...


@runtime_checkable
class PointerListener(Protocol):
    """Receives pointer events observed outside the originating surface."""

    def on_pointer_move(self, event: "PointerEvent") -> None:
        """Handle a pointer move anywhere on screen."""
        ...

    def on_pointer_release(self, event: "PointerEvent") -> None:
        """Handle a pointer release anywhere on screen."""
        ...


@runtime_checkable
class PointerSource(Protocol):
    """
    Host-side provider of global pointer events.

    A subscribed listener receives every move and release until it is
    unsubscribed, regardless of where the pointer is.
    """

    def subscribe(self, listener: PointerListener) -> None:
        """Start delivering global pointer events to listener."""
        ...

    def unsubscribe(self, listener: PointerListener) -> None:
        """Stop delivering pointer events to listener."""
        ...
