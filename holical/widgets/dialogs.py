"""Modal dialogs for errors and opening paths."""

from typing import ClassVar

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static


class ErrorDialog(ModalScreen[None]):
    """Blocking error notification; input is captured until it is dismissed."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
    ]

    CSS = """
    ErrorDialog {
        align: center middle;
    }

    #error-dialog {
        width: 60;
        height: auto;
        background: $panel;
        border: thick $error;
        padding: 1 2;
    }

    #error-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
        color: $error;
    }

    #error-ok {
        margin-top: 1;
    }
    """

    def __init__(self, title: str, message: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.title_text = title
        self.error_message = message

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="error-dialog"):
            yield Static(Text(self.title_text), id="error-title")
            yield Static(Text(self.error_message), id="error-message")
            yield Button("OK", id="error-ok", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Close the dialog."""
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


class PathDialog(ModalScreen[str | None]):
    """Modal dialog asking for a path to open, e.g. a shared article link."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    PathDialog {
        align: center middle;
    }

    #path-dialog {
        width: 80;
        height: auto;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    #path-dialog-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    #button-row {
        grid-size: 2;
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    Button {
        margin: 0 1;
    }
    """

    def __init__(self, title: str = "Open path", **kwargs) -> None:
        super().__init__(**kwargs)
        self.title_text = title

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="path-dialog"):
            yield Static(Text(self.title_text), id="path-dialog-title")
            yield Input(placeholder="/articles/colombia/07-agosto-batalla-de-boyaca", id="path")
            with Grid(id="button-row"):
                yield Button("Open", id="open-button", variant="primary")
                yield Button("Cancel", id="cancel-button", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "cancel-button":
            self.dismiss(None)
        elif event.button.id == "open-button":
            self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit()

    def submit(self) -> None:
        """Dismiss with the entered path, accepting full URLs."""
        value = self.query_one("#path", Input).value.strip()
        if not value:
            self.notify("Please enter a path", severity="warning")
            return
        self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)
