"""Main TUI application."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from colorpicker.core import SelectionStateMachine, TextInputResolver
from colorpicker.models import Color, PickerConfig, SelectionState
from colorpicker.protocols import PickerEvent

from .decorators import handle_action_errors
from .widgets import ColorInputPanel, HueStripWidget, SurfaceWidget, SwatchBar

logger = logging.getLogger(__name__)


class ColorPickerApp(App[Color | None]):
    """
    Textual TUI for the color picker.

    This is a PURE UI layer: the selection state machine owns the color and
    the app only renders it. Implements PickerObserver via structural
    subtyping (no explicit inheritance to avoid metaclass conflicts between
    App and Protocol).

    The app's return value is the picked color, or None when cancelled.
    """

    TITLE = "Color Picker"

    CSS = """
    #picker {
        padding: 1 2;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Pick", show=True, priority=True),
        Binding("escape", "cancel", "Cancel", show=True),
        Binding("ctrl+s", "save_color", "Save as Startup Color", show=True),
    ]

    # =================================================================
    # Initialization & Lifecycle
    # =================================================================

    def __init__(
        self,
        config: PickerConfig | None = None,
        initial_color: Color | None = None,
        config_path: Path | None = None,
    ):
        """
        Initialize the picker application.

        Args:
            config: Picker configuration (defaults if None)
            initial_color: Color to seed the picker with. Falls back to the
                config's initial_color, then to white.
            config_path: Where ctrl+s saves the config (default location if None)
        """
        super().__init__()
        self.config = config or PickerConfig()
        self.config_path = config_path

        if initial_color is None and self.config.initial_color is not None:
            initial_color = Color.from_hex(self.config.initial_color)

        self.machine = SelectionStateMachine(
            geometry=self.config.geometry(),
            initial_color=initial_color,
        )
        self.resolver = TextInputResolver(
            self.machine,
            mode=self.config.input_mode,
            parse_fallback=self.config.numeric_parse_fallback,
        )

        self._surface: SurfaceWidget | None = None
        self._hue_strip: HueStripWidget | None = None
        self._inputs: ColorInputPanel | None = None
        self._swatch: SwatchBar | None = None
        logger.info("ColorPickerApp created")

    def compose(self) -> ComposeResult:
        yield Header()
        self._surface = SurfaceWidget(self.machine, id="surface")
        self._hue_strip = HueStripWidget(self.machine, id="hue-strip")
        self._inputs = ColorInputPanel(self.resolver, id="color-inputs")
        self._swatch = SwatchBar(id="swatch")
        with Vertical(id="picker"):
            yield self._surface
            yield self._hue_strip
            yield self._inputs
        yield self._swatch
        yield Footer()

    def on_mount(self) -> None:
        self.machine.register_observer(self)
        self._swatch.show_state(self.machine.state)

    def on_unmount(self) -> None:
        self.machine.unregister_observer(self)

    # =================================================================
    # PickerObserver Protocol Implementation
    # =================================================================

    def on_picker_event(self, event: PickerEvent, state: SelectionState) -> None:
        """Re-render on every color change (other events are paired with one)."""
        if event not in (PickerEvent.COLOR_CHANGED, PickerEvent.SEEDED):
            return
        self._surface.refresh()
        self._hue_strip.refresh()
        self._swatch.show_state(state)
        self._inputs.refresh_fields()

    # =================================================================
    # Actions
    # =================================================================

    def action_quit(self) -> None:
        """Exit, returning the current color."""
        logger.info(f"Picked {self.machine.color.to_hex()}")
        self.exit(self.machine.color)

    def action_cancel(self) -> None:
        """Exit without picking."""
        logger.info("Picker cancelled")
        self.exit(None)

    @handle_action_errors("save startup color")
    def action_save_color(self) -> None:
        """Store the current color as the startup color in the config file."""
        hex_code = self.machine.color.to_hex()
        self.config = self.config.model_copy(update={"initial_color": hex_code})
        self.config.save(self.config_path)
        self.notify(f"Saved {hex_code} as startup color")
