"""Textual front end for the color picker."""

from .app import ColorPickerApp

__all__ = ["ColorPickerApp"]
