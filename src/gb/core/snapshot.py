"""Startup snapshot of the repository's branches."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gb.errors import DetachedOrUnnamedHead
from gb.gateway.git.abc import Git

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchSnapshot:
    """Branch names and the checked-out branch, captured once.

    Attributes:
        branches: Local branch names in enumeration order
        current_branch: Checked-out branch name, None for detached HEAD
    """

    branches: tuple[str, ...]
    current_branch: str | None


def load_snapshot(git: Git, repo_root: Path) -> BranchSnapshot:
    """Query the repository for its branches and checked-out branch.

    A detached HEAD is not an error here: the snapshot records no current
    branch. Any other failure (e.g. NotARepository) propagates.

    Args:
        git: Git gateway
        repo_root: Path to the repository

    Returns:
        BranchSnapshot for repo_root
    """
    branches = tuple(git.list_branches(repo_root))
    try:
        current: str | None = git.get_current_branch(repo_root)
    except DetachedOrUnnamedHead:
        logger.debug("HEAD is detached in %s", repo_root)
        current = None
    logger.debug("Loaded %d branches (current=%s)", len(branches), current)
    return BranchSnapshot(branches=branches, current_branch=current)
