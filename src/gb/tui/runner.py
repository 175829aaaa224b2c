"""TUI runner abstraction for testability.

This module provides an ABC for running the Textual browser, enabling CLI
routing tests without starting the Textual event loop or touching the
terminal.
"""

from abc import ABC, abstractmethod

from gb.tui.app import BranchSwitcherApp


class TuiRunner(ABC):
    """Abstract interface for running TUI applications."""

    @abstractmethod
    def run(self, app: BranchSwitcherApp) -> int:
        """Run the TUI application until it exits.

        Args:
            app: The BranchSwitcherApp instance to run

        Returns:
            Process exit code reported by the app
        """
        ...


class RealTuiRunner(TuiRunner):
    """Production implementation that runs the Textual event loop.

    App.run() enters raw mode and the alternate screen and restores both on
    every exit path, including unhandled exceptions in the app.
    """

    def run(self, app: BranchSwitcherApp) -> int:
        app.run()
        return app.return_code or 0


class FakeTuiRunner(TuiRunner):
    """Test implementation that captures apps without running the event loop."""

    def __init__(self, *, return_code: int = 0) -> None:
        """Create FakeTuiRunner with empty app tracking.

        Args:
            return_code: Exit code reported for every captured app
        """
        self._apps_run: list[BranchSwitcherApp] = []
        self._return_code = return_code

    def run(self, app: BranchSwitcherApp) -> int:
        self._apps_run.append(app)
        return self._return_code

    @property
    def apps_run(self) -> list[BranchSwitcherApp]:
        """Get the list of apps that were passed to run().

        This property is for test assertions only.
        """
        return self._apps_run
