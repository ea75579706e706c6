"""Mapping between picker geometry and colors.

Two mappers live here:

- The hue spectrum mapper turns a position along the hue strip into a fully
  saturated RGB sample by interpolating straight between the strip's color
  stops. Going through RGB directly (rather than degrees -> HSV -> RGB)
  keeps the sample identical to the rendered gradient.
- The surface mapper composes a white overlay (saturation, left to right)
  and a black overlay (value, top to bottom) over a hue sample.
"""

from colorpicker.models.color import HSV, RGB, Coordinate

from . import HUE_STOPS
from .conversion import clamp, round_half_up

RED: RGB = (255, 0, 0)


def hue_from_position(x: float, width: float) -> RGB:
    """
    Sample the hue strip.

    Args:
        x: Position along the strip (0 = left edge)
        width: Strip width

    Returns:
        Fully saturated RGB sample. Positions outside the strip (or a
        non-positive width) fall back to pure red.

    Example:
        >>> hue_from_position(33, 100)
        (0, 0, 255)
    """
    if width <= 0:
        return RED

    position = x / width
    for start, end in zip(HUE_STOPS, HUE_STOPS[1:]):
        if start.position <= position <= end.position:
            t = (position - start.position) / (end.position - start.position)
            return tuple(
                round_half_up(a * (1 - t) + b * t)
                for a, b in zip(start.color.to_rgb_tuple(), end.color.to_rgb_tuple())
            )

    return RED


def position_from_hue(hue: float) -> float:
    """
    Inverse of `hue_from_position`, normalized to [0, 1].

    Hue decreases along the strip (red 360 -> purple 300 -> blue 240 -> ...
    -> red 0), so the position is interpolated between the stops' degrees.
    Hue 0 maps to the left edge.

    Args:
        hue: Hue in degrees (wrapped modulo 360)
    """
    hue = hue % 360
    if hue == 0:
        return 0.0

    for start, end in zip(HUE_STOPS, HUE_STOPS[1:]):
        if end.degrees <= hue <= start.degrees:
            t = (start.degrees - hue) / (start.degrees - end.degrees)
            return start.position + t * (end.position - start.position)

    return 0.0


def color_from_surface_position(
    hue: RGB, x: float, y: float, width: float, height: float
) -> RGB:
    """
    Sample the saturation/value surface.

    The surface is the hue sample under a white overlay fading out from the
    left edge and a black overlay fading in towards the bottom edge. Each
    overlay is rounded separately, the way the two gradient layers are
    composited.

    Args:
        hue: Fully saturated hue sample
        x: Horizontal position (0 = white edge)
        y: Vertical position (0 = top, full value)
        width: Surface width
        height: Surface height

    Returns:
        (r, g, b); (0, 0) is white and (width, height) is black
    """
    white = (width - x) / width if width > 0 else 1.0
    black = y / height if height > 0 else 0.0
    white_channel = round_half_up(white * 255)

    result = []
    for channel in hue:
        c = round_half_up(channel * (1 - white)) + white_channel
        c = round_half_up(c * (1 - black))
        result.append(int(clamp(c, 0, 255)))
    return tuple(result)


def surface_position_from_hsv(hsv: HSV, width: float, height: float) -> Coordinate:
    """Place the surface selector for a color's saturation and value."""
    _, s, v = hsv
    return Coordinate(x=s / 100 * width, y=(1 - v / 100) * height)
