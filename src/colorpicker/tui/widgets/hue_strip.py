"""Hue strip widget."""

from rich.color import Color as RichColor
from rich.segment import Segment
from rich.style import Style
from textual import events
from textual.strip import Strip
from textual.widget import Widget

from colorpicker.core import DragController, SelectionStateMachine
from colorpicker.tui.painting import contrast_color, paint_hue_strip
from colorpicker.tui.pointer import WidgetPointerCapture

MARKER = "◆"


class HueStripWidget(Widget):
    """
    One-row hue strip. Dragging along it moves the hue selector; the
    surface selector stays where it is.
    """

    DEFAULT_CSS = """
    HueStripWidget {
        height: 1;
        margin: 0 0 1 0;
    }
    """

    def __init__(self, machine: SelectionStateMachine, **kwargs) -> None:
        """
        Initialize hue strip widget.

        Args:
            machine: Picker state machine
        """
        super().__init__(**kwargs)
        self.machine = machine
        self.styles.width = machine.geometry.hue_width + 1
        self.capture = WidgetPointerCapture(self)
        self.drag = DragController(
            "hue",
            self.capture,
            width=machine.geometry.hue_width,
            height=0,
            on_change=lambda coord: machine.set_hue(coord.x),
        )

    def render_line(self, y: int) -> Strip:
        """Render the strip with the hue marker."""
        if y > 0:
            return Strip.blank(self.size.width)

        colors = paint_hue_strip(self.machine.geometry.hue_width)
        marker_x = round(self.machine.state.hue_position)

        segments = []
        for x, rgb in enumerate(colors):
            style = Style(bgcolor=RichColor.from_rgb(*rgb))
            if x == marker_x:
                style += Style(color=RichColor.from_rgb(*contrast_color(rgb)))
                segments.append(Segment(MARKER, style))
            else:
                segments.append(Segment(" ", style))
        return Strip(segments, len(colors))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.drag.press(self.capture.pointer_event(event))
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.capture.active:
            self.capture.dispatch_move(event)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.capture.active:
            self.capture.dispatch_release(event)

    def on_unmount(self) -> None:
        self.drag.close()
