"""Pure key interpretation for the branch browser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from gb.tui.state.types import Direction, SelectionState


class LoopStatus(Enum):
    """Lifecycle of the interaction loop."""

    RUNNING = auto()
    EXITING = auto()


@dataclass(frozen=True)
class Quit:
    """Leave the browser."""


@dataclass(frozen=True)
class MoveCursor:
    """Move the cursor one row."""

    direction: Direction


@dataclass(frozen=True)
class CheckoutSelected:
    """Check out the branch under the cursor.

    Attributes:
        branch: Branch name to check out
        index: Row of the branch, recorded as checked out on success
    """

    branch: str
    index: int


@dataclass(frozen=True)
class Ignore:
    """Key has no meaning in the browser."""


KeyAction = Quit | MoveCursor | CheckoutSelected | Ignore

QUIT_KEYS = frozenset({"q"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
CONFIRM_KEYS = frozenset({"enter"})


def interpret_key(state: SelectionState, key: str) -> KeyAction:
    """Map a single key press to the action it requests.

    Key names follow Textual's naming ("up", "down", "enter", "q", ...).
    Enter on an empty list is ignored since there is nothing to check out.

    Args:
        state: Current selection state (read only)
        key: Name of the pressed key

    Returns:
        The KeyAction for this key
    """
    if key in QUIT_KEYS:
        return Quit()
    if key in UP_KEYS:
        return MoveCursor(Direction.UP)
    if key in DOWN_KEYS:
        return MoveCursor(Direction.DOWN)
    if key in CONFIRM_KEYS:
        branch = state.selected_branch()
        if branch is None:
            return Ignore()
        return CheckoutSelected(branch=branch, index=state.cursor_index)
    return Ignore()
