"""Branch list widget for the branch browser."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.widgets import DataTable

from gb.tui.render.logic import RenderPlan, RenderRow

EMPTY_TEXT = "No local branches"


class BranchList(DataTable):
    """DataTable showing the rows of a RenderPlan, one branch per row.

    The table never takes focus: the app feeds every key to the session and
    moves the table cursor to the plan's highlighted row, which keeps that
    row scrolled into view. The checked-out branch is drawn in green.
    """

    can_focus = False

    DEFAULT_CSS = """
    BranchList {
        height: 1fr;
        padding: 0 1;
    }
    BranchList > .datatable--cursor {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        super().__init__(show_header=False, cursor_type="row")
        self._plan: RenderPlan | None = None

    @property
    def plan(self) -> RenderPlan | None:
        return self._plan

    def _on_click(self, event: events.Click) -> None:
        """Disable mouse click selection - keyboard only."""
        event.prevent_default()
        event.stop()

    def show_plan(self, plan: RenderPlan) -> None:
        """Draw plan, rebuilding rows only when their contents changed.

        Args:
            plan: Render plan to draw
        """
        previous = self._plan
        self._plan = plan
        if not self.columns:
            self.add_column("branch", key="branch")

        if previous is None or _row_contents(previous) != _row_contents(plan):
            self.clear()
            if plan.rows:
                for row in plan.rows:
                    self.add_row(row_label(row))
            else:
                self.add_row(Text(EMPTY_TEXT, style="dim"))

        self.show_cursor = plan.highlighted_index is not None
        if plan.highlighted_index is not None:
            self.move_cursor(row=plan.highlighted_index)


def row_label(row: RenderRow) -> Text:
    """Build the styled cell for one branch row."""
    return Text(row.text, style="green" if row.is_current else "")


def _row_contents(plan: RenderPlan) -> tuple[tuple[str, bool], ...]:
    return tuple((row.text, row.is_current) for row in plan.rows)
