"""Color definitions and the conversion engine.

This package is the single source of truth for color math in the picker:

- `conversion`: pure RGB / HSV / hex conversions
- `spectrum`: hue strip and saturation/value surface mappers

## Hue Strip Stops

The hue strip is drawn as a linear gradient through fixed stops. Hue
*decreases* from left to right:

```
position  0.00   0.15    0.33   0.49   0.67    0.84    1.00
color     RED    PURPLE  BLUE   TEAL   GREEN   YELLOW  RED
degrees   360    300     240    180    120     60      0
```

The segments are not equal in width; they follow the stops of the
rendered gradient so that sampling a position gives exactly the painted
color.

## Usage

```python
from colorpicker.colors import COLORS
from colorpicker.colors.spectrum import hue_from_position

hue_from_position(0.33 * 48, 48)   # (0, 0, 255)
COLORS.BLUE.to_hex()               # '#0000ff'
```
"""

from typing import NamedTuple

from colorpicker.models import Color


class COLORS:
    """Named colors used by the hue strip and the front end."""

    RED: Color = Color(r=255, g=0, b=0)
    """Pure red - both ends of the hue strip"""

    PURPLE: Color = Color(r=255, g=0, b=255)
    """Purple (magenta) - 300 degrees"""

    BLUE: Color = Color(r=0, g=0, b=255)
    """Pure blue - 240 degrees"""

    TEAL: Color = Color(r=0, g=255, b=255)
    """Teal (cyan) - 180 degrees"""

    GREEN: Color = Color(r=0, g=255, b=0)
    """Pure green - 120 degrees"""

    YELLOW: Color = Color(r=255, g=255, b=0)
    """Pure yellow - 60 degrees"""

    WHITE: Color = Color(r=255, g=255, b=255)
    """Pure white - top-left corner of the surface"""

    BLACK: Color = Color(r=0, g=0, b=0)
    """Black - bottom edge of the surface"""


class HueStop(NamedTuple):
    """A color stop on the hue strip."""

    position: float
    degrees: float
    color: Color


HUE_STOPS: tuple[HueStop, ...] = (
    HueStop(0.0, 360, COLORS.RED),
    HueStop(0.15, 300, COLORS.PURPLE),
    HueStop(0.33, 240, COLORS.BLUE),
    HueStop(0.49, 180, COLORS.TEAL),
    HueStop(0.67, 120, COLORS.GREEN),
    HueStop(0.84, 60, COLORS.YELLOW),
    HueStop(1.0, 0, COLORS.RED),
)

__all__ = ["COLORS", "HUE_STOPS", "HueStop"]
