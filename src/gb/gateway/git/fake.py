"""Fake Git operations for testing."""

from __future__ import annotations

from pathlib import Path

from gb.errors import (
    AmbiguousOrUnknownRevision,
    BranchNotFound,
    CannotDeleteCheckedOutBranch,
    DetachedOrUnnamedHead,
    NotARepository,
)
from gb.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of Git branch operations.

    State Management:
    -----------------
    This fake holds a single repository's branches and current branch.
    checkout_branch and delete_branch modify that state, so changes are
    visible to subsequent calls within the same test.

    Mutation Tracking:
    -----------------
    - checked_out_branches: Names passed to successful checkout_branch() calls
    - deleted_branches: Names passed to successful delete_branch() calls
    """

    def __init__(
        self,
        *,
        repo_root: Path | None = None,
        branches: list[str] | None = None,
        current_branch: str | None = None,
        checkout_raises: dict[str, Exception] | None = None,
        delete_raises: dict[str, Exception] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repo_root: The only path treated as a repository. None accepts any path.
            branches: Local branch names in enumeration order
            current_branch: Checked-out branch name, None for detached HEAD
            checkout_raises: Mapping of name -> exception to raise on checkout
            delete_raises: Mapping of name -> exception to raise on delete
        """
        self._repo_root = repo_root
        self._branches = list(branches) if branches is not None else []
        self._current_branch = current_branch
        self._checkout_raises = checkout_raises if checkout_raises is not None else {}
        self._delete_raises = delete_raises if delete_raises is not None else {}

        self._checked_out_branches: list[str] = []
        self._deleted_branches: list[str] = []
        self._list_count = 0

    def get_current_branch(self, repo_root: Path) -> str:
        self._check_repo(repo_root)
        if self._current_branch is None:
            raise DetachedOrUnnamedHead("HEAD is detached and has no branch name")
        return self._current_branch

    def list_branches(self, repo_root: Path) -> list[str]:
        self._check_repo(repo_root)
        self._list_count += 1
        return list(self._branches)

    def checkout_branch(self, repo_root: Path, name: str) -> None:
        """Checkout a branch (mutates internal state).

        Names that are not local branches detach HEAD, matching git.
        """
        self._check_repo(repo_root)
        if name in self._checkout_raises:
            raise self._checkout_raises[name]
        if name in self._branches:
            self._current_branch = name
        elif _looks_like_commit(name):
            self._current_branch = None
        else:
            raise AmbiguousOrUnknownRevision(f"invalid reference: {name}")
        self._checked_out_branches.append(name)

    def delete_branch(self, repo_root: Path, name: str) -> None:
        self._check_repo(repo_root)
        if name in self._delete_raises:
            raise self._delete_raises[name]
        if name not in self._branches:
            raise BranchNotFound(f"branch '{name}' not found")
        if name == self._current_branch:
            raise CannotDeleteCheckedOutBranch(f"Cannot delete branch '{name}' checked out")
        self._branches.remove(name)
        self._deleted_branches.append(name)

    def _check_repo(self, repo_root: Path) -> None:
        if self._repo_root is not None and repo_root != self._repo_root:
            raise NotARepository(f"Not a git repository: {repo_root}")

    @property
    def current_branch(self) -> str | None:
        """Get the branch HEAD points at, None when detached.

        This property is for test assertions only.
        """
        return self._current_branch

    @property
    def checked_out_branches(self) -> list[str]:
        """Get the list of names successfully checked out during the test.

        This property is for test assertions only.
        """
        return self._checked_out_branches.copy()

    @property
    def deleted_branches(self) -> list[str]:
        """Get the list of branches that have been deleted.

        This property is for test assertions only.
        """
        return self._deleted_branches.copy()

    @property
    def list_count(self) -> int:
        """Number of list_branches() calls made.

        This property is for test assertions only.
        """
        return self._list_count


def _looks_like_commit(name: str) -> bool:
    return len(name) >= 7 and all(char in "0123456789abcdef" for char in name)
