"""Resolve text typed into the hex/RGB/HSV fields into selection edits."""

import logging
import re
from dataclasses import dataclass

from colorpicker.colors.conversion import clamp, hex_to_rgb, hsv_to_rgb, rgb_to_hsv
from colorpicker.models import InputMode

from .state_machine import SelectionStateMachine

logger = logging.getLogger(__name__)

# Leading integer, like a lenient integer parse: "42px" -> 42, " -7" -> -7
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

DEFAULT_PARSE_FALLBACK = 255

# Inclusive (low, high) per channel index
RGB_RANGES = ((0, 255), (0, 255), (0, 255))
HSV_RANGES = ((0, 360), (0, 100), (0, 100))


def parse_channel(text: str, fallback: int = DEFAULT_PARSE_FALLBACK) -> int:
    """
    Parse a numeric field.

    Empty text counts as 0. Text that doesn't start with an integer yields
    `fallback`. Range clamping is left to the caller.

    Example:
        >>> parse_channel("12abc")
        12
        >>> parse_channel("abc")
        255
    """
    if not text:
        return 0
    found = _INT_PREFIX.match(text)
    if found is None:
        return fallback
    return int(found.group(1))


@dataclass(frozen=True)
class Committed:
    """Hex field shows the canonical color."""


@dataclass(frozen=True)
class Editing:
    """Hex field holds text being typed; nothing is applied until commit."""

    draft: str


HexFieldState = Committed | Editing


class TextInputResolver:
    """
    Turns field text into `set_from_text` edits on a state machine.

    Numeric fields (RGB, HSV) apply on every change: the text is parsed,
    clamped to the channel's range and combined with the other two channels
    of the current color.

    The hex field buffers while the user types (``Editing(draft)``) so
    incomplete strings like ``"ff8"`` are allowed; `commit_hex()` is the
    only path from the hex field into the state machine.
    """

    def __init__(
        self,
        machine: SelectionStateMachine,
        mode: InputMode = InputMode.HEX,
        parse_fallback: int = DEFAULT_PARSE_FALLBACK,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            machine: State machine to commit edits to
            mode: Initially visible fields
            parse_fallback: Value used when a numeric field isn't a number
        """
        self.machine = machine
        self.mode = mode
        self.parse_fallback = parse_fallback
        self._hex_field: HexFieldState = Committed()

    # =================================================================
    # Mode & display
    # =================================================================

    def set_mode(self, mode: InputMode | str) -> None:
        """Switch the visible fields. Any pending hex draft is dropped."""
        self.mode = InputMode(mode)
        self._hex_field = Committed()

    @property
    def hex_field(self) -> HexFieldState:
        """Current hex field sub-state."""
        return self._hex_field

    @property
    def hex_text(self) -> str:
        """Text for the hex field: the draft while editing, else the color."""
        if isinstance(self._hex_field, Editing):
            return self._hex_field.draft
        return self.machine.color.to_hex()[1:].upper()

    @property
    def rgb_fields(self) -> tuple[str, str, str]:
        """Text for the three RGB fields."""
        r, g, b = self.machine.color.to_rgb_tuple()
        return (str(r), str(g), str(b))

    @property
    def hsv_fields(self) -> tuple[str, str, str]:
        """Text for the three HSV fields (saturation/value as whole numbers)."""
        h, s, v = self.machine.color.to_hsv()
        return (str(h), f"{s:.0f}", f"{v:.0f}")

    # =================================================================
    # Numeric fields
    # =================================================================

    def set_rgb_channel(self, index: int, text: str) -> None:
        """
        Apply text typed into one RGB field.

        Args:
            index: 0 (red), 1 (green) or 2 (blue)
            text: Raw field text
        """
        low, high = RGB_RANGES[index]
        value = int(clamp(parse_channel(text, self.parse_fallback), low, high))

        rgb = list(self.machine.color.to_rgb_tuple())
        rgb[index] = value
        rgb = tuple(rgb)

        logger.debug(f"RGB field {index} = {text!r} -> {rgb}")
        self.machine.set_from_text(rgb_to_hsv(rgb), rgb)

    def set_hsv_channel(self, index: int, text: str) -> None:
        """
        Apply text typed into one HSV field.

        Args:
            index: 0 (hue), 1 (saturation) or 2 (value)
            text: Raw field text
        """
        low, high = HSV_RANGES[index]
        value = int(clamp(parse_channel(text, self.parse_fallback), low, high))

        hsv = list(self.machine.color.to_hsv())
        hsv[index] = value
        hsv = tuple(hsv)

        logger.debug(f"HSV field {index} = {text!r} -> {hsv}")
        self.machine.set_from_text(hsv, hsv_to_rgb(hsv))

    # =================================================================
    # Hex field
    # =================================================================

    def edit_hex(self, text: str) -> None:
        """Buffer hex text while the field has focus."""
        self._hex_field = Editing(draft=text)

    def cancel_hex_edit(self) -> None:
        """Drop the draft; the field shows the canonical color again."""
        self._hex_field = Committed()

    def commit_hex(self) -> bool:
        """
        Apply the buffered hex text.

        Invalid text is not rejected: the picker jumps to the current hue at
        full saturation and value instead.

        Returns:
            True if the draft was valid hex. False if the fallback was
            applied or there was nothing to commit.
        """
        if not isinstance(self._hex_field, Editing):
            return False

        draft = self._hex_field.draft.strip()
        self._hex_field = Committed()

        rgb = hex_to_rgb(draft)
        if rgb is not None:
            logger.debug(f"Hex field committed {draft!r} -> {rgb}")
            self.machine.set_from_text(rgb_to_hsv(rgb), rgb)
            return True

        hue = rgb_to_hsv(self.machine.state.hue.to_rgb_tuple())[0]
        hsv = (hue, 100, 100)
        logger.debug(f"Invalid hex {draft!r}, maximizing current hue {hue}")
        self.machine.set_from_text(hsv, hsv_to_rgb(hsv))
        return False
