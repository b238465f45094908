"""Search bar with the postal code input and submit button."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input


class SearchBar(Horizontal):
    """Postal code input plus a submit control."""

    class Submitted(Message):
        """Message sent when the user submits a postal code."""

        def __init__(self, postal_code: str) -> None:
            super().__init__()
            self.postal_code = postal_code

    class InputChanged(Message):
        """Message sent when the input text changes."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        padding: 0 1;
    }

    SearchBar #postal-code {
        width: 1fr;
    }

    SearchBar #btn-submit {
        margin-left: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Postal code", id="postal-code")
        yield Button("Get forecast", id="btn-submit", variant="primary")

    @property
    def value(self) -> str:
        return self.query_one("#postal-code", Input).value

    def set_value(self, text: str) -> None:
        """Set the input text without emitting a submission."""
        self.query_one("#postal-code", Input).value = text

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.InputChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-submit":
            event.stop()
            self.post_message(self.Submitted(self.value))
