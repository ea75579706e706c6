"""Pointer drag controller for one picker surface."""

import logging
from collections.abc import Callable

from colorpicker.colors.conversion import clamp
from colorpicker.models import Coordinate, DragState
from colorpicker.protocols import PointerEvent, PointerSource

logger = logging.getLogger(__name__)


class DragController:
    """
    Idle/Dragging state machine turning pointer input into clamped coordinates.

    A press on the surface starts a drag session and applies the pressed
    coordinate immediately. While dragging, the controller is subscribed to
    the host's global pointer source so moves and the final release are seen
    even outside the surface. The subscription is held only while dragging
    and is released on every way out of the session:

    - pointer release (anywhere on screen)
    - `close()` / leaving a ``with`` block (forced teardown)
    - an exception raised while applying a coordinate

    Each surface owns its own controller; two controllers may be dragging
    at the same time, they do not coordinate with each other.

    Example:
        ```python
        surface_drag = DragController(
            "surface", source, width=48, height=16,
            on_change=machine.set_surface_selector,
        )
        hue_drag = DragController(
            "hue", source, width=48, height=0,
            on_change=lambda coord: machine.set_hue(coord.x),
        )
        ```
    """

    def __init__(
        self,
        name: str,
        source: PointerSource,
        width: float,
        height: float,
        on_change: Callable[[Coordinate], object],
    ) -> None:
        """
        Initialize the drag controller.

        Args:
            name: Surface name for logging (e.g., "surface", "hue")
            source: Host that delivers global pointer moves/releases
            width: Surface width; x is clamped to [0, width]
            height: Surface height; y is clamped to [0, height] (0 for a strip)
            on_change: Called with each clamped coordinate
        """
        self.name = name
        self.width = width
        self.height = height
        self._source = source
        self._on_change = on_change
        self._state = DragState.IDLE

    @property
    def state(self) -> DragState:
        """Current drag state."""
        return self._state

    @property
    def is_dragging(self) -> bool:
        """Check if a drag session is active."""
        return self._state is DragState.DRAGGING

    def clamp_event(self, event: PointerEvent) -> Coordinate:
        """Translate a pointer event into a surface-local, clamped coordinate."""
        return Coordinate(
            x=clamp(event.local_x, 0, self.width),
            y=clamp(event.local_y, 0, self.height),
        )

    # =================================================================
    # Transitions
    # =================================================================

    def press(self, event: PointerEvent) -> None:
        """
        Start a drag session (Idle -> Dragging) and apply the press location.

        A press while already dragging just re-applies the coordinate.
        """
        if self._state is DragState.IDLE:
            self._source.subscribe(self)
            self._state = DragState.DRAGGING
            logger.debug(f"{self.name} drag started")
        self._apply(event)

    def on_pointer_move(self, event: PointerEvent) -> None:
        """Apply a globally observed move (Dragging -> Dragging)."""
        if self._state is DragState.DRAGGING:
            self._apply(event)

    def on_pointer_release(self, event: PointerEvent) -> None:
        """End the drag session (Dragging -> Idle); no coordinate update."""
        if self._state is DragState.DRAGGING:
            self._end()

    def close(self) -> None:
        """Forced teardown: end any active session and release the subscription."""
        if self._state is DragState.DRAGGING:
            logger.debug(f"{self.name} drag torn down while active")
            self._end()

    def __enter__(self) -> "DragController":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    # =================================================================
    # Internals
    # =================================================================

    def _apply(self, event: PointerEvent) -> None:
        coord = self.clamp_event(event)
        try:
            self._on_change(coord)
        except Exception:
            logger.error(f"{self.name} drag update failed, ending session", exc_info=True)
            self._end()
            raise

    def _end(self) -> None:
        self._state = DragState.IDLE
        try:
            self._source.unsubscribe(self)
        finally:
            logger.debug(f"{self.name} drag ended")
