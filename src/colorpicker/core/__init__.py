"""Picker core: selection state, drag handling and text input resolution."""

from .drag import DragController
from .state_machine import SelectionStateMachine
from .text_input import Committed, Editing, HexFieldState, TextInputResolver, parse_channel

__all__ = [
    "Committed",
    "DragController",
    "Editing",
    "HexFieldState",
    "SelectionStateMachine",
    "TextInputResolver",
    "parse_channel",
]
