"""Saturation/value surface widget."""

from rich.color import Color as RichColor
from rich.segment import Segment
from rich.style import Style
from textual import events
from textual.strip import Strip
from textual.widget import Widget

from colorpicker.core import DragController, SelectionStateMachine
from colorpicker.tui.painting import contrast_color, paint_surface
from colorpicker.tui.pointer import WidgetPointerCapture

MARKER = "◯"


def _cell(text: str, bg: tuple[int, int, int], fg: tuple[int, int, int] | None = None) -> Segment:
    style = Style(bgcolor=RichColor.from_rgb(*bg))
    if fg is not None:
        style += Style(color=RichColor.from_rgb(*fg), bold=True)
    return Segment(text, style)


class SurfaceWidget(Widget):
    """
    Paints the saturation/value surface for the current hue and turns mouse
    drags into surface selector edits.

    Presentation only: the selection lives in the state machine. The app
    calls `refresh()` when the picker changes.
    """

    DEFAULT_CSS = """
    SurfaceWidget {
        margin: 0 0 1 0;
    }
    """

    def __init__(self, machine: SelectionStateMachine, **kwargs) -> None:
        """
        Initialize surface widget.

        Args:
            machine: Picker state machine
        """
        super().__init__(**kwargs)
        self.machine = machine
        geometry = machine.geometry
        self.styles.width = geometry.surface_width + 1
        self.styles.height = geometry.surface_height + 1
        self.capture = WidgetPointerCapture(self)
        self.drag = DragController(
            "surface",
            self.capture,
            width=geometry.surface_width,
            height=geometry.surface_height,
            on_change=machine.set_surface_selector,
        )

    def render_line(self, y: int) -> Strip:
        """Render one row of the surface with the selector marker."""
        geometry = self.machine.geometry
        if y > geometry.surface_height:
            return Strip.blank(self.size.width)

        state = self.machine.state
        row = paint_surface(
            state.hue.to_rgb_tuple(), geometry.surface_width, geometry.surface_height
        )[y]
        marker_x = round(state.surface_coordinate.x)
        marker_y = round(state.surface_coordinate.y)

        segments = []
        for x, rgb in enumerate(row):
            if x == marker_x and y == marker_y:
                segments.append(_cell(MARKER, rgb, contrast_color(rgb)))
            else:
                segments.append(_cell(" ", rgb))
        return Strip(segments, len(row))

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
