"""Color input exceptions.

Edits made inside the picker never raise (bad text falls back or is
clamped). ColorParseError is for colors supplied from outside, such as the
command line, where there is no current color to fall back to.
"""

from .base import ColorPickerError


class ColorParseError(ColorPickerError):
    """A color string could not be understood."""

    def __init__(self, text: str, reason: str = "not a hex or r,g,b color"):
        """
        Initialize color parse error.

        Args:
            text: The text that failed to parse
            reason: Why it failed
        """
        super().__init__(
            user_message=f"Could not read color '{text}': {reason}",
            technical_message=f"Color parse failed for {text!r}: {reason}",
            recoverable=True,
            recovery_hint=(
                "Use a hex color ('#ff8800', 'f80') or three channels 0-255 ('255,136,0')"
            ),
        )
        self.text = text
        self.reason = reason
