"""Pure conversions between RGB, HSV and hex representations.

All functions work on plain tuples so they can be used without building
models:

- RGB: ``(r, g, b)`` integers in 0-255
- HSV: ``(hue, saturation, value)`` with hue in [0, 360) and s/v in [0, 100]
- Hex: ``'#rrggbb'`` (parsing also accepts ``'rgb'`` shorthand and no ``#``)

Rounding uses `round_half_up` everywhere so ``.5`` ties behave the same as
the gradients drawn by the front end.
"""

import math
import re
from collections.abc import Sequence

from colorpicker.models.color import HSV, RGB

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """Bound value into [low, high]."""
    return max(low, min(value, high))


def rgb_to_hsv(rgb: RGB) -> HSV:
    """
    Convert RGB to HSV.

    Args:
        rgb: (r, g, b) with channels 0-255

    Returns:
        (hue, saturation, value): hue rounded to a whole degree in [0, 360),
        saturation and value rounded to 2 decimals in [0, 100]

    Example:
        >>> rgb_to_hsv((255, 0, 0))
        (0, 100.0, 100.0)
    """
    r, g, b = rgb
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    if delta == 0:
        # Achromatic
        hue = 0
    else:
        if high == r:
            sector = ((g - b) / delta) % 6
        elif high == g:
            sector = (b - r) / delta + 2
        else:
            sector = (r - g) / delta + 4
        hue = round_half_up(sector * 60) % 360

    saturation = delta / high if high != 0 else 0.0
    value = high / 255

    return (hue, round(saturation * 100, 2), round(value * 100, 2))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    Convert HSV to RGB.

    Hue is wrapped into [0, 360) and saturation/value are clamped to
    [0, 100] before conversion, so the result is always a valid RGB triple.

    Args:
        hsv: (hue, saturation, value)

    Returns:
        (r, g, b) with channels 0-255
    """
    h, s, v = hsv
    h = h % 360
    s = clamp(s, 0, 100) / 100
    v = clamp(v, 0, 100) / 100

    chroma = v * s
    intermediate = chroma * (1 - abs((h / 60) % 2 - 1))
    match = v - chroma

    if h < 60:
        r, g, b = chroma, intermediate, 0.0
    elif h < 120:
        r, g, b = intermediate, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, intermediate
    elif h < 240:
        r, g, b = 0.0, intermediate, chroma
    elif h < 300:
        r, g, b = intermediate, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, intermediate

    return tuple(int(clamp(round_half_up((c + match) * 255), 0, 255)) for c in (r, g, b))


def hex_to_rgb(text: str) -> RGB | None:
    """
    Parse a hex color.

    Accepts an optional leading '#' followed by exactly 3 or 6 hex digits.
    The 3-digit form is expanded by doubling each digit ('f80' -> 'ff8800').

    Returns:
        (r, g, b), or None if the text doesn't match. Callers decide what to
        fall back to.
    """
    found = HEX_PATTERN.fullmatch(text)
    if found is None:
        return None

    digits = found.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGB) -> str:
    """Format (r, g, b) as '#rrggbb' (lowercase)."""
    return "#" + "".join(f"{channel:02x}" for channel in rgb)


def is_valid_rgb(value: object) -> bool:
    """Check that value is a 3-element sequence of ints in 0-255."""
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 3:
        return False
    return all(
        isinstance(channel, int) and not isinstance(channel, bool) and 0 <= channel <= 255
        for channel in value
    )
