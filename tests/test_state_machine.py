"""Tests for the selection state machine and its events."""

from unittest.mock import Mock, call

import pytest

from colorpicker.colors.spectrum import position_from_hue
from colorpicker.core import SelectionStateMachine
from colorpicker.models import Color, Coordinate, InitState, SurfaceGeometry
from colorpicker.protocols import PickerEvent, PickerObserver


class TestSelectionStateMachine:
    """Test state machine functionality."""

    @pytest.mark.unit
    def test_create_state_machine(self, machine):
        """A new picker is white, hue red, and waiting for a seed."""
        assert machine.color == Color.white()
        assert machine.state.hue == Color(r=255, g=0, b=0)
        assert machine.init_state is InitState.UNINITIALIZED

    @pytest.mark.unit
    def test_register_and_unregister_observer(self, machine):
        observer = Mock(spec=PickerObserver)
        machine.register_observer(observer)
        machine.unregister_observer(observer)

        machine.set_hue(10)
        observer.on_picker_event.assert_not_called()

    @pytest.mark.unit
    def test_surface_selector_events(self, machine):
        """Surface edits emit SURFACE_SELECTOR_CHANGED then COLOR_CHANGED."""
        observer = Mock(spec=PickerObserver)
        machine.register_observer(observer)

        state = machine.set_surface_selector(Coordinate(x=48, y=0))

        assert state.color == Color(r=255, g=0, b=0)
        assert observer.on_picker_event.call_args_list == [
            call(PickerEvent.SURFACE_SELECTOR_CHANGED, state),
            call(PickerEvent.COLOR_CHANGED, state),
        ]

    @pytest.mark.unit
    def test_surface_selector_is_clamped(self, machine):
        state = machine.set_surface_selector(Coordinate(x=100, y=-5))
        assert state.surface_coordinate == Coordinate(x=48, y=0)

    @pytest.mark.unit
    def test_hue_events_keep_surface_selector(self, machine):
        """Hue edits emit HUE_CHANGED then COLOR_CHANGED; the surface selector stays."""
        machine.set_surface_selector(Coordinate(x=48, y=0))
        observer = Mock(spec=PickerObserver)
        machine.register_observer(observer)

        state = machine.set_hue(position_from_hue(120) * 48)

        assert state.hue == Color(r=0, g=255, b=0)
        assert state.color == Color(r=0, g=255, b=0)
        assert state.surface_coordinate == Coordinate(x=48, y=0)
        assert observer.on_picker_event.call_args_list == [
            call(PickerEvent.HUE_CHANGED, state),
            call(PickerEvent.COLOR_CHANGED, state),
        ]

    @pytest.mark.unit
    def test_hue_position_is_clamped(self, machine):
        assert machine.set_hue(1000).hue_position == 48
        assert machine.set_hue(-3).hue_position == 0

    @pytest.mark.unit
    def test_set_from_text(self, machine):
        """Text edits place both selectors for the typed color."""
        observer = Mock(spec=PickerObserver)
        machine.register_observer(observer)

        state = machine.set_from_text((240, 100, 100), (0, 0, 255))

        assert state.color == Color(r=0, g=0, b=255)
        assert state.hue == Color(r=0, g=0, b=255)
        assert state.hue_position == pytest.approx(0.33 * 48)
        assert state.surface_coordinate == Coordinate(x=48, y=0)
        assert observer.on_picker_event.call_args_list == [
            call(PickerEvent.TEXT_COMMITTED, state),
            call(PickerEvent.COLOR_CHANGED, state),
        ]

    @pytest.mark.unit
    def test_set_from_text_gray_keeps_red_hue(self, machine):
        state = machine.set_from_text((0, 0, 50), (128, 128, 128))
        assert state.hue == Color(r=255, g=0, b=0)
        assert state.surface_coordinate == Coordinate(x=0, y=8)

    @pytest.mark.unit
    def test_color_derivable_from_positions(self, machine):
        """Recomputing from the selectors reproduces the stored color."""
        machine.set_from_text((32, 100, 100), (255, 136, 0))
        derived = machine.derive_color()
        stored = machine.color
        assert all(
            abs(a - b) <= 1 for a, b in zip(derived.to_rgb_tuple(), stored.to_rgb_tuple())
        )

        machine.set_surface_selector(Coordinate(x=30, y=5))
        assert machine.derive_color() == machine.color

    @pytest.mark.unit
    def test_any_edit_initializes(self, machine):
        machine.set_surface_selector(Coordinate(x=1, y=1))
        assert machine.init_state is InitState.INITIALIZED

    @pytest.mark.unit
    def test_observer_errors_do_not_block_edits(self, machine):
        """A failing observer doesn't stop the edit or other observers."""
        failing = Mock(spec=PickerObserver)
        failing.on_picker_event.side_effect = RuntimeError("boom")
        healthy = Mock(spec=PickerObserver)
        machine.register_observer(failing)
        machine.register_observer(healthy)

        state = machine.set_surface_selector(Coordinate(x=48, y=16))

        assert state.color == Color(r=0, g=0, b=0)
        assert healthy.on_picker_event.call_count == 2


class TestSeeding:
    """Test the one-time initial color."""

    @pytest.mark.unit
    def test_seed_stores_color_exactly(self, machine):
        observer = Mock(spec=PickerObserver)
        machine.register_observer(observer)

        assert machine.seed_from_initial_color(Color(r=255, g=2, b=0))

        assert machine.color == Color(r=255, g=2, b=0)
        assert machine.state.surface_coordinate == Coordinate(x=48, y=0)
        assert machine.init_state is InitState.INITIALIZED
        observer.on_picker_event.assert_called_once_with(PickerEvent.SEEDED, machine.state)

    @pytest.mark.unit
    def test_second_seed_is_ignored(self, machine):
        machine.seed_from_initial_color(Color(r=10, g=20, b=30))
        assert not machine.seed_from_initial_color(Color(r=200, g=0, b=0))
        assert machine.color == Color(r=10, g=20, b=30)

    @pytest.mark.unit
    def test_seed_after_edit_is_ignored(self, machine):
        machine.set_hue(20)
        before = machine.state
        assert not machine.seed_from_initial_color(Color(r=200, g=0, b=0))
        assert machine.state == before

    @pytest.mark.unit
    def test_constructor_seed(self):
        machine = SelectionStateMachine(
            geometry=SurfaceGeometry(surface_width=10, surface_height=10, hue_width=10),
            initial_color=Color(r=0, g=0, b=255),
        )
        assert machine.color == Color(r=0, g=0, b=255)
        assert machine.init_state is InitState.INITIALIZED
        assert machine.state.hue_position == pytest.approx(3.3)
