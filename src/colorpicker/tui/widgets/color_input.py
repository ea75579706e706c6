"""Text fields for typing a color as hex, RGB or HSV."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Select

from colorpicker.core import TextInputResolver
from colorpicker.models import InputMode

MODE_OPTIONS = [("Hex", InputMode.HEX.value), ("RGB", InputMode.RGB.value), ("HSV", InputMode.HSV.value)]


class CommitOnBlurInput(Input):
    """Input that also submits when it loses focus."""

    def __init__(self, *args, **kwargs):
        """Initialize with submit tracking."""
        super().__init__(*args, **kwargs)
        self._just_submitted = False

    async def action_submit(self) -> None:
        """Submit on Enter, and remember it so the following blur doesn't resubmit."""
        self._just_submitted = True
        await super().action_submit()

    def _on_blur(self, event) -> None:
        """Submit when losing focus (e.g., via Tab or a click elsewhere)."""
        if self._just_submitted:
            self._just_submitted = False
        else:
            self.post_message(self.Submitted(self, self.value))
        super()._on_blur(event)


class ColorInputPanel(Horizontal):
    """
    Mode selector plus the text fields for the current mode.

    RGB and HSV fields apply on every keystroke. The hex field buffers its
    text and only applies it on Enter or when focus leaves it.
    """

    DEFAULT_CSS = """
    ColorInputPanel {
        height: auto;
    }

    ColorInputPanel Select {
        width: 12;
    }

    ColorInputPanel Input {
        width: 10;
    }

    ColorInputPanel #hex-input {
        width: 14;
    }
    """

    def __init__(self, resolver: TextInputResolver, **kwargs) -> None:
        """
        Initialize the input panel.

        Args:
            resolver: Resolver that turns field text into picker edits
        """
        super().__init__(**kwargs)
        self.resolver = resolver

    def compose(self) -> ComposeResult:
        yield Select(
            MODE_OPTIONS,
            value=self.resolver.mode.value,
            allow_blank=False,
            id="mode-select",
        )
        yield CommitOnBlurInput(value=self.resolver.hex_text, id="hex-input", classes="hex-field")
        for index, text in enumerate(self.resolver.rgb_fields):
            yield Input(value=text, id=f"rgb-{index}", classes="rgb-field")
        for index, text in enumerate(self.resolver.hsv_fields):
            yield Input(value=text, id=f"hsv-{index}", classes="hsv-field")

    def on_mount(self) -> None:
        self._show_mode_fields()

    def refresh_fields(self) -> None:
        """
        Show the canonical color in every field.

        The hex field keeps its draft while editing. A focused numeric field
        keeps what the user typed until focus leaves it.
        """
        with self.prevent(Input.Changed):
            self.query_one("#hex-input", Input).value = self.resolver.hex_text
            for prefix, texts in (("rgb", self.resolver.rgb_fields), ("hsv", self.resolver.hsv_fields)):
                for index, text in enumerate(texts):
                    field = self.query_one(f"#{prefix}-{index}", Input)
                    if not field.has_focus:
                        field.value = text

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.refresh_fields()

    def _show_mode_fields(self) -> None:
        mode = self.resolver.mode
        for field in self.query(".hex-field"):
            field.display = mode is InputMode.HEX
        for field in self.query(".rgb-field"):
            field.display = mode is InputMode.RGB
        for field in self.query(".hsv-field"):
            field.display = mode is InputMode.HSV

    def on_select_changed(self, event: Select.Changed) -> None:
        """Switch between hex, RGB and HSV fields."""
        event.stop()
        if event.value == self.resolver.mode.value:
            return
        self.resolver.set_mode(event.value)
        self._show_mode_fields()
        self.refresh_fields()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Route typed text to the resolver."""
        event.stop()
        field_id = event.input.id or ""

        if field_id == "hex-input":
            if event.value != self.resolver.hex_text:
                self.resolver.edit_hex(event.value)
            return

        kind, _, index_text = field_id.partition("-")
        index = int(index_text)
        if kind == "rgb" and event.value != self.resolver.rgb_fields[index]:
            self.resolver.set_rgb_channel(index, event.value)
        elif kind == "hsv" and event.value != self.resolver.hsv_fields[index]:
            self.resolver.set_hsv_channel(index, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit the hex draft."""
        event.stop()
        if event.input.id == "hex-input":
            self.resolver.commit_hex()
            self.refresh_fields()
