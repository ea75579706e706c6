"""Parsing of colors given on the command line."""

from colorpicker.colors.conversion import hex_to_rgb, is_valid_rgb
from colorpicker.exceptions import ColorParseError
from colorpicker.models import Color


def parse_color(text: str) -> Color:
    """
    Parse a color given as hex or as comma-separated channels.

    Example:
        >>> parse_color("#f80").to_hex()
        '#ff8800'
        >>> parse_color("255, 136, 0").to_hex()
        '#ff8800'

    Raises:
        ColorParseError: If text is neither form, or a channel is out of range
    """
    text = text.strip()

    if "," in text:
        parts = [part.strip() for part in text.split(",")]
        try:
            channels = [int(part) for part in parts]
        except ValueError:
            raise ColorParseError(text, "channels must be whole numbers")
        if not is_valid_rgb(channels):
            raise ColorParseError(text, "expected three channels between 0 and 255")
        return Color.from_rgb_tuple(tuple(channels))

    rgb = hex_to_rgb(text)
    if rgb is None:
        raise ColorParseError(text)
    return Color.from_rgb_tuple(rgb)
