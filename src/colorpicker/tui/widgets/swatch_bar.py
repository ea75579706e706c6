"""Swatch bar showing the picked color."""

from textual.widgets import Static

from colorpicker.models import SelectionState


class SwatchBar(Static):
    """
    Status line with a color swatch and the color in all three notations.
    """

    DEFAULT_CSS = """
    SwatchBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }
    """

    def show_state(self, state: SelectionState) -> None:
        """Update the swatch from a selection state."""
        color = state.color
        h, s, v = state.hsv
        hex_code = color.to_hex()
        self.update(
            f"[on {hex_code}]      [/] {hex_code.upper()} | "
            f"rgb({color.r}, {color.g}, {color.b}) | "
            f"hsv({h}, {s:.0f}%, {v:.0f}%)"
        )
