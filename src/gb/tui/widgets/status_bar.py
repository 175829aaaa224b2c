"""Status bar widget for the branch browser."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Bottom bar with the key hints and the outcome of the last action."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, footer: str) -> None:
        """Initialize the status bar.

        Args:
            footer: Static instruction text, always shown
        """
        super().__init__()
        self._footer = footer
        self._message: str | None = None
        self._is_error = False

    @property
    def message(self) -> str | None:
        return self._message

    def on_mount(self) -> None:
        self._refresh_display()

    def set_message(self, message: str | None, *, is_error: bool = False) -> None:
        """Show message next to the key hints, or clear it with None.

        Args:
            message: Text to show
            is_error: Draw the message as an error
        """
        self._message = message
        self._is_error = is_error
        self._refresh_display()

    def _refresh_display(self) -> None:
        text = Text(self._footer)
        if self._message:
            text.append("  │  ", style="dim")
            text.append(self._message, style="bold red" if self._is_error else "bold")
        self.update(text)
