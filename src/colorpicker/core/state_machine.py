"""Selection state machine: the single writer of the picker's color."""

import logging

from colorpicker.colors.conversion import clamp, hsv_to_rgb, rgb_to_hsv
from colorpicker.colors.spectrum import (
    color_from_surface_position,
    hue_from_position,
    position_from_hue,
    surface_position_from_hsv,
)
from colorpicker.model_manager import ObserverManager
from colorpicker.models import (
    HSV,
    RGB,
    Color,
    Coordinate,
    InitState,
    SelectionState,
    SurfaceGeometry,
)
from colorpicker.protocols import PickerEvent, PickerObserver

logger = logging.getLogger(__name__)


class SelectionStateMachine:
    """
    Owns the canonical selection and dispatches changes to observers.

    This class is the single source of truth for the picker. Views never
    write the state directly; they call one of the edit operations, each of
    which builds a complete new `SelectionState`, stores it, and only then
    notifies observers:

    - `set_surface_selector`: drag on the saturation/value surface
    - `set_hue`: drag on the hue strip
    - `set_from_text`: committed hex/RGB/HSV text
    - `seed_from_initial_color`: one-time initial color

    The state is always derivable from the two selector positions:
    `derive_color()` recomputes the color from them and matches the stored
    color within rounding. The exception is a seeded color, which is stored
    exactly as given; the next edit recomputes from positions again.
    """

    def __init__(
        self,
        geometry: SurfaceGeometry | None = None,
        initial_color: Color | None = None,
    ) -> None:
        """
        Initialize the state machine.

        Args:
            geometry: Surface and hue strip dimensions
            initial_color: Optional color to seed the picker with
        """
        self.geometry = geometry or SurfaceGeometry()
        self._state = SelectionState()
        self._init_state = InitState.UNINITIALIZED
        self._observers = ObserverManager[PickerObserver](observer_type_name="picker")

        if initial_color is not None:
            self.seed_from_initial_color(initial_color)

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: PickerObserver) -> None:
        """Register an observer to receive picker events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: PickerObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # Queries
    # =================================================================

    @property
    def state(self) -> SelectionState:
        """Current selection (immutable snapshot)."""
        return self._state

    @property
    def init_state(self) -> InitState:
        """Whether the one-time seed window is still open."""
        return self._init_state

    @property
    def color(self) -> Color:
        """Current canonical color."""
        return self._state.color

    def derive_color(self) -> Color:
        """Recompute the color from the selector positions alone."""
        hue = hue_from_position(self._state.hue_position, self.geometry.hue_width)
        return self._surface_color(hue, self._state.surface_coordinate)

    # =================================================================
    # Edits
    # =================================================================

    def set_surface_selector(self, coord: Coordinate) -> SelectionState:
        """
        Move the surface selector.

        Args:
            coord: New selector position (clamped to the surface)

        Returns:
            The new state
        """
        coord = self._clamp_coordinate(coord)
        color = self._surface_color(self._state.hue.to_rgb_tuple(), coord)
        self._commit(
            self._state.model_copy(update={"surface_coordinate": coord, "color": color}),
            PickerEvent.SURFACE_SELECTOR_CHANGED,
            PickerEvent.COLOR_CHANGED,
        )
        return self._state

    def set_hue(self, position: float) -> SelectionState:
        """
        Move the hue selector, keeping the surface selector where it is.

        Args:
            position: New position along the hue strip (clamped to the strip)

        Returns:
            The new state
        """
        position = clamp(position, 0, self.geometry.hue_width)
        hue = hue_from_position(position, self.geometry.hue_width)
        color = self._surface_color(hue, self._state.surface_coordinate)
        self._commit(
            self._state.model_copy(
                update={
                    "hue": Color.from_rgb_tuple(hue),
                    "hue_position": position,
                    "color": color,
                }
            ),
            PickerEvent.HUE_CHANGED,
            PickerEvent.COLOR_CHANGED,
        )
        return self._state

    def set_from_text(self, hsv: HSV, rgb: RGB) -> SelectionState:
        """
        Apply a color typed into the text fields.

        Args:
            hsv: Validated (hue, saturation, value)
            rgb: The matching RGB, stored as the canonical color

        Returns:
            The new state
        """
        self._commit(
            self._state_for(hsv, rgb),
            PickerEvent.TEXT_COMMITTED,
            PickerEvent.COLOR_CHANGED,
        )
        return self._state

    def seed_from_initial_color(self, color: Color) -> bool:
        """
        Seed the picker with an initial color (first time only).

        The color is stored exactly; RGB -> HSV -> RGB is not the identity
        for every color, so it is not re-derived from the selector positions.

        Args:
            color: The initial color

        Returns:
            True if the seed was applied, False if the picker was already
            seeded or edited
        """
        if self._init_state is not InitState.UNINITIALIZED:
            logger.warning(f"Ignoring initial color {color.to_hex()}: picker already initialized")
            return False

        rgb = color.to_rgb_tuple()
        logger.info(f"Seeding picker with {color.to_hex()}")
        self._commit(self._state_for(rgb_to_hsv(rgb), rgb), PickerEvent.SEEDED)
        return True

    # =================================================================
    # Internals
    # =================================================================

    def _state_for(self, hsv: HSV, rgb: RGB) -> SelectionState:
        """Build the state for a color given in both forms."""
        h, _, _ = hsv
        geometry = self.geometry
        return SelectionState(
            hue=Color.from_rgb_tuple(hsv_to_rgb((h, 100, 100))),
            color=Color.from_rgb_tuple(rgb),
            hue_position=position_from_hue(h) * geometry.hue_width,
            surface_coordinate=self._clamp_coordinate(
                surface_position_from_hsv(hsv, geometry.surface_width, geometry.surface_height)
            ),
        )

    def _surface_color(self, hue: RGB, coord: Coordinate) -> Color:
        return Color.from_rgb_tuple(
            color_from_surface_position(
                hue,
                coord.x,
                coord.y,
                self.geometry.surface_width,
                self.geometry.surface_height,
            )
        )

    def _clamp_coordinate(self, coord: Coordinate) -> Coordinate:
        return Coordinate(
            x=clamp(coord.x, 0, self.geometry.surface_width),
            y=clamp(coord.y, 0, self.geometry.surface_height),
        )

    def _commit(self, state: SelectionState, *events: PickerEvent) -> None:
        """Store the new state, then notify observers of each event in order."""
        self._state = state
        self._init_state = InitState.INITIALIZED
        logger.debug(
            f"Selection -> {state.color.to_hex()} hue_position={state.hue_position:.2f} "
            f"surface=({state.surface_coordinate.x:.2f}, {state.surface_coordinate.y:.2f})"
        )
        for event in events:
            self._observers.notify("on_picker_event", event, state)
