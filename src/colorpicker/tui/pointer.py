"""Textual pointer source backed by mouse capture."""

import logging

from textual import events
from textual.widget import Widget

from colorpicker.protocols import PointerEvent, PointerListener

logger = logging.getLogger(__name__)


class WidgetPointerCapture:
    """
    PointerSource that captures the mouse for a widget while subscribed.

    While the mouse is captured, Textual routes every move and release to
    the capturing widget, wherever the pointer is. The widget forwards those
    events here with `dispatch_move` / `dispatch_release`.
    """

    def __init__(self, widget: Widget) -> None:
        self._widget = widget
        self._listeners: list[PointerListener] = []

    @property
    def active(self) -> bool:
        """Check if anyone is subscribed (the mouse is captured)."""
        return bool(self._listeners)

    def subscribe(self, listener: PointerListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)
        self._widget.capture_mouse()

    def unsubscribe(self, listener: PointerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
        if not self._listeners and self._widget.is_mounted:
            self._widget.release_mouse()

    def pointer_event(self, event: events.MouseEvent) -> PointerEvent:
        """Build a PointerEvent measured against the widget's content origin."""
        origin = self._widget.content_region
        return PointerEvent(
            screen_x=event.screen_x,
            screen_y=event.screen_y,
            origin_x=origin.x,
            origin_y=origin.y,
        )

    def dispatch_move(self, event: events.MouseMove) -> None:
        pointer = self.pointer_event(event)
        for listener in list(self._listeners):
            listener.on_pointer_move(pointer)

    def dispatch_release(self, event: events.MouseUp) -> None:
        pointer = self.pointer_event(event)
        for listener in list(self._listeners):
            listener.on_pointer_release(pointer)
