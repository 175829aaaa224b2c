"""Real terminal implementation using sys.stdin.isatty() and os.isatty()."""

import os
import sys

from gb.gateway.terminal.abc import Terminal


class RealTerminal(Terminal):
    """Production implementation using sys.stdin.isatty() and os.isatty()."""

    def is_stdin_interactive(self) -> bool:
        return sys.stdin.isatty()

    def is_stdout_tty(self) -> bool:
        return os.isatty(1)
