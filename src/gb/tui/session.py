"""Interaction loop state for the branch browser.

BranchSession owns the SelectionState and loop status and applies one key at
a time. It knows nothing about Textual, so the whole loop can be driven from
plain tests; BranchSwitcherApp only feeds it keys and redraws.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gb.core.snapshot import BranchSnapshot
from gb.errors import GbError
from gb.gateway.git.abc import Git
from gb.tui.input.logic import (
    CheckoutSelected,
    LoopStatus,
    MoveCursor,
    Quit,
    interpret_key,
)
from gb.tui.render.logic import RenderPlan, project
from gb.tui.state.types import SelectionState

logger = logging.getLogger(__name__)


class BranchSession:
    """Apply key presses to the selection state, invoking git for checkouts.

    Checkout failures are recoverable: the state is left untouched, the loop
    stays RUNNING and the error is exposed through `error` until the next key.
    """

    def __init__(self, git: Git, repo_root: Path, snapshot: BranchSnapshot) -> None:
        """Create a session from a startup snapshot.

        Args:
            git: Git gateway used for checkouts
            repo_root: Path to the repository
            snapshot: Branches and checked-out branch captured at startup
        """
        self._git = git
        self._repo_root = repo_root
        self._state = SelectionState.from_snapshot(snapshot.branches, snapshot.current_branch)
        self._status = LoopStatus.RUNNING
        self._error: GbError | None = None
        self._message: str | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def status(self) -> LoopStatus:
        return self._status

    @property
    def error(self) -> GbError | None:
        """Failure from the most recent key, None if it succeeded."""
        return self._error

    @property
    def message(self) -> str | None:
        """Informational message from the most recent key."""
        return self._message

    def render(self) -> RenderPlan:
        return project(self._state)

    def handle_key(self, key: str) -> LoopStatus:
        """Interpret and apply one key press.

        Keys received after the loop is EXITING are ignored.

        Args:
            key: Name of the pressed key

        Returns:
            Loop status after applying the key
        """
        if self._status == LoopStatus.EXITING:
            return self._status

        self._error = None
        self._message = None

        action = interpret_key(self._state, key)
        if isinstance(action, Quit):
            self._status = LoopStatus.EXITING
        elif isinstance(action, MoveCursor):
            self._state = self._state.move_cursor(action.direction)
        elif isinstance(action, CheckoutSelected):
            self._checkout(action.branch, action.index)
        return self._status

    def _checkout(self, branch: str, index: int) -> None:
        try:
            self._git.checkout_branch(self._repo_root, branch)
        except GbError as err:
            logger.warning("Checkout of %s failed: %s", branch, err)
            self._error = err
            return
        logger.info("Checked out %s", branch)
        self._state = self._state.mark_checked_out(index)
        self._message = f"Switched to branch '{branch}'"
