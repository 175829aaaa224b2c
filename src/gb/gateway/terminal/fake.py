"""Fake Terminal implementation for testing."""

from gb.gateway.terminal.abc import Terminal


class FakeTerminal(Terminal):
    """In-memory fake that reports a configured TTY state.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, is_interactive: bool, is_stdout_tty: bool | None = None) -> None:
        """Create FakeTerminal with configured TTY state.

        Args:
            is_interactive: Whether to report stdin as interactive (TTY)
            is_stdout_tty: Whether to report stdout as a TTY.
                If None, defaults to is_interactive.
        """
        self._is_interactive = is_interactive
        self._is_stdout_tty = is_stdout_tty if is_stdout_tty is not None else is_interactive

    def is_stdin_interactive(self) -> bool:
        return self._is_interactive

    def is_stdout_tty(self) -> bool:
        return self._is_stdout_tty
