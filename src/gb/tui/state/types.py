"""Selection state for the branch browser."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class Direction(Enum):
    """Cursor movement directions."""

    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class SelectionState:
    """Branches on screen, the checked-out branch and the cursor.

    Immutable: every operation returns a new state.

    Attributes:
        branches: Branch names in enumeration order
        current_index: Index of the checked-out branch, None if it is not listed
        cursor_index: Index of the highlighted row; 0 when branches is empty
    """

    branches: tuple[str, ...]
    current_index: int | None
    cursor_index: int

    @classmethod
    def from_snapshot(cls, branches: tuple[str, ...], current_branch: str | None) -> SelectionState:
        """Build the initial state, placing the cursor on the checked-out branch.

        Args:
            branches: Branch names in enumeration order
            current_branch: Checked-out branch name, None for detached HEAD

        Returns:
            SelectionState with cursor on current_index, or on row 0 if unknown
        """
        current_index: int | None = None
        if current_branch is not None and current_branch in branches:
            current_index = branches.index(current_branch)
        cursor_index = current_index if current_index is not None else 0
        return cls(branches=branches, current_index=current_index, cursor_index=cursor_index)

    def move_cursor(self, direction: Direction) -> SelectionState:
        """Move the cursor one row, clamping at both ends."""
        if not self.branches:
            return self
        if direction == Direction.UP:
            target = max(self.cursor_index - 1, 0)
        else:
            target = min(self.cursor_index + 1, len(self.branches) - 1)
        if target == self.cursor_index:
            return self
        return replace(self, cursor_index=target)

    def mark_checked_out(self, index: int) -> SelectionState:
        """Record that the branch at index is now checked out."""
        return replace(self, current_index=index)

    def selected_branch(self) -> str | None:
        """Get the branch under the cursor, or None if there are no branches."""
        if not self.branches:
            return None
        return self.branches[self.cursor_index]
