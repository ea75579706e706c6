"""Pure painters for the picker surfaces.

Each painter returns a grid of RGB cells and depends only on its inputs, so
widgets can cache the result until the hue changes. Cell (col, row) is the
color at surface coordinate (x=col, y=row); a surface of width W therefore
has W + 1 columns, so both edges are reachable.
"""

from functools import lru_cache

from colorpicker.colors.spectrum import color_from_surface_position, hue_from_position
from colorpicker.models import RGB


@lru_cache(maxsize=32)
def paint_surface(hue: RGB, width: int, height: int) -> tuple[tuple[RGB, ...], ...]:
    """
    Paint the saturation/value surface for a hue.

    Returns:
        height + 1 rows of width + 1 colors
    """
    return tuple(
        tuple(color_from_surface_position(hue, x, y, width, height) for x in range(width + 1))
        for y in range(height + 1)
    )


@lru_cache(maxsize=8)
def paint_hue_strip(width: int) -> tuple[RGB, ...]:
    """Paint the hue strip: width + 1 fully saturated colors."""
    return tuple(hue_from_position(x, width) for x in range(width + 1))


def contrast_color(rgb: RGB) -> RGB:
    """Black or white, whichever reads better on top of rgb."""
    r, g, b = rgb
    luma = 0.299 * r + 0.587 * g + 0.114 * b
    return (0, 0, 0) if luma > 140 else (255, 255, 255)
