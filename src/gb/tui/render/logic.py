"""Pure projection of selection state into what the screen should show."""

from dataclasses import dataclass

from gb.core.constants import CURRENT_MARKER, FOOTER_TEXT
from gb.tui.state.types import SelectionState


@dataclass(frozen=True)
class RenderRow:
    """One line of the branch list.

    Attributes:
        text: Branch name, with CURRENT_MARKER appended for the checked-out branch
        is_current: Whether this row is the checked-out branch
        is_highlighted: Whether the cursor is on this row
    """

    text: str
    is_current: bool
    is_highlighted: bool


@dataclass(frozen=True)
class RenderPlan:
    """Everything needed to draw one frame.

    Attributes:
        rows: One row per branch, in list order
        highlighted_index: Cursor row, None when there are no rows
        footer: Static instruction line
    """

    rows: tuple[RenderRow, ...]
    highlighted_index: int | None
    footer: str


def project(state: SelectionState) -> RenderPlan:
    """Describe the screen for a selection state.

    Args:
        state: Selection state to draw

    Returns:
        RenderPlan for the state
    """
    rows: list[RenderRow] = []
    for index, branch in enumerate(state.branches):
        is_current = index == state.current_index
        text = f"{branch}{CURRENT_MARKER}" if is_current else branch
        rows.append(
            RenderRow(
                text=text,
                is_current=is_current,
                is_highlighted=index == state.cursor_index,
            )
        )

    highlighted_index = state.cursor_index if rows else None
    return RenderPlan(rows=tuple(rows), highlighted_index=highlighted_index, footer=FOOTER_TEXT)
