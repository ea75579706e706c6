"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorpicker.core import SelectionStateMachine, TextInputResolver
from colorpicker.models import SurfaceGeometry


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def geometry():
    """Default picker geometry (48 x 16 surface, 48 wide hue strip)."""
    return SurfaceGeometry()


@pytest.fixture
def machine(geometry):
    """Unseeded state machine (white, hue red)."""
    return SelectionStateMachine(geometry=geometry)


@pytest.fixture
def resolver(machine):
    """Text input resolver bound to the machine fixture."""
    return TextInputResolver(machine)


class FakePointerSource:
    """PointerSource that records subscriptions."""

    def __init__(self):
        self.listeners = []
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0

    def subscribe(self, listener):
        self.subscribe_calls += 1
        if listener not in self.listeners:
            self.listeners.append(listener)

    def unsubscribe(self, listener):
        self.unsubscribe_calls += 1
        if listener in self.listeners:
            self.listeners.remove(listener)


@pytest.fixture
def pointer_source():
    """Fake global pointer source."""
    return FakePointerSource()
