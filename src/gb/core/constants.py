"""Constants shared across the CLI and the interactive browser."""

from pathlib import Path

# Repository gb operates on unless --repo is given.
CURRENT_REPO = Path(".")

# Appended to the row of the checked-out branch.
CURRENT_MARKER = " *"

FOOTER_TEXT = "↑/k up  ↓/j down  enter checkout  q quit"
