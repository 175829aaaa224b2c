"""Abstract base class for the Git operations gb depends on.

gb only needs four operations: resolve the current branch, list local
branches, check out a branch and delete a branch. Everything else about the
repository is left to git itself.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for branch operations against a repository.

    All implementations (real, fake) must implement this interface and raise
    errors from gb.errors rather than raw subprocess failures.
    """

    @abstractmethod
    def get_current_branch(self, repo_root: Path) -> str:
        """Get the short name of the checked-out branch.

        Args:
            repo_root: Path to the repository

        Returns:
            Branch name (e.g. "main")

        Raises:
            NotARepository: If repo_root is not inside a git repository
            DetachedOrUnnamedHead: If HEAD does not point at a named branch
        """
        ...

    @abstractmethod
    def list_branches(self, repo_root: Path) -> list[str]:
        """List local branch names in enumeration order.

        Remote-tracking branches are excluded. Entries that cannot be resolved
        are skipped rather than failing the whole listing.

        Args:
            repo_root: Path to the repository

        Returns:
            List of local branch names

        Raises:
            NotARepository: If repo_root is not inside a git repository
        """
        ...

    @abstractmethod
    def checkout_branch(self, repo_root: Path, name: str) -> None:
        """Update the working tree and HEAD to match `name`.

        HEAD becomes a symbolic reference when `name` is a local branch and is
        detached at the resolved commit otherwise.

        Args:
            repo_root: Path to the repository
            name: Branch name or other revision to check out

        Raises:
            AmbiguousOrUnknownRevision: If `name` cannot be resolved
            CheckoutConflict: If local changes would be overwritten
        """
        ...

    @abstractmethod
    def delete_branch(self, repo_root: Path, name: str) -> None:
        """Delete a local branch regardless of its merge status.

        Args:
            repo_root: Path to the repository
            name: Local branch name

        Raises:
            BranchNotFound: If no local branch is named `name`
            CannotDeleteCheckedOutBranch: If `name` is checked out
        """
        ...
