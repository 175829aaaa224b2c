"""Main Textual application for the interactive branch browser."""

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Header

from gb.tui.input.logic import LoopStatus
from gb.tui.session import BranchSession
from gb.tui.widgets.branch_list import BranchList
from gb.tui.widgets.status_bar import StatusBar


class BranchSwitcherApp(App):
    """Interactive TUI for browsing and checking out local branches.

    Every key press is handed to the BranchSession; the screen is redrawn from
    the session's render plan afterwards. Textual owns raw mode and the
    alternate screen and restores the terminal however run() exits.
    """

    TITLE = "gb"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: BranchSession, *, repo_label: str = "") -> None:
        """Initialize the browser.

        Args:
            session: Session holding the selection state
            repo_label: Repository shown in the header
        """
        super().__init__()
        self._session = session
        self._branch_list: BranchList | None = None
        self._status_bar: StatusBar | None = None
        self.sub_title = repo_label

    @property
    def session(self) -> BranchSession:
        return self._session

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        plan = self._session.render()
        yield Header()
        yield BranchList()
        yield StatusBar(plan.footer)

    def on_mount(self) -> None:
        """Draw the initial state after mounting."""
        self._branch_list = self.query_one(BranchList)
        self._status_bar = self.query_one(StatusBar)
        self._redraw()

    def on_key(self, event: events.Key) -> None:
        """Feed one key to the session, then exit or redraw."""
        event.stop()
        status = self._session.handle_key(event.key)
        if status == LoopStatus.EXITING:
            self.exit()
            return
        self._redraw()

    def _redraw(self) -> None:
        if self._branch_list is not None:
            self._branch_list.show_plan(self._session.render())

        if self._status_bar is None:
            return
        error = self._session.error
        if error is not None:
            self._status_bar.set_message(str(error), is_error=True)
        else:
            self._status_bar.set_message(self._session.message)
