"""Production implementation of Git operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from gb.errors import (
    AmbiguousOrUnknownRevision,
    BranchNotFound,
    CannotDeleteCheckedOutBranch,
    CheckoutConflict,
    DetachedOrUnnamedHead,
    GbError,
    GitCommandError,
    NotARepository,
)
from gb.gateway.git.abc import Git
from gb.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# objectname is read from the ref itself, so a ref to a missing object still
# lists. refname:lstrip=2 keeps "main" as "main" even when a tag shares the name,
# where refname:short would disambiguate it to "heads/main".
_BRANCH_FORMAT = "%(refname:lstrip=2)%00%(objectname)"

_NOT_A_REPOSITORY_MARKERS = ("not a git repository",)
_UNKNOWN_REVISION_MARKERS = (
    "invalid reference",
    "did not match any",
    "unknown revision",
    "ambiguous argument",
    "not a commit",
)
_CHECKOUT_CONFLICT_MARKERS = ("would be overwritten",)
_BRANCH_NOT_FOUND_MARKERS = ("not found",)
_CHECKED_OUT_MARKERS = ("cannot delete branch",)


class RealGit(Git):
    """Production implementation of branch operations using the git CLI.

    All git operations execute actual git commands via subprocess. Failures
    are classified from git's stderr into the gb.errors taxonomy.
    """

    def get_current_branch(self, repo_root: Path) -> str:
        """Get the short name of the checked-out branch."""
        _ensure_directory(repo_root)
        result = run_subprocess_with_context(
            cmd=["git", "symbolic-ref", "--quiet", "--short", "HEAD"],
            operation_context="resolve HEAD",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            _raise_if_not_repository(result, repo_root)
            raise DetachedOrUnnamedHead("HEAD is detached and has no branch name")

        branch = result.stdout.strip()
        if not branch:
            raise DetachedOrUnnamedHead("HEAD has no short branch name")
        return branch

    def list_branches(self, repo_root: Path) -> list[str]:
        """List local branch names, skipping entries that do not resolve to commits."""
        _ensure_directory(repo_root)
        result = run_subprocess_with_context(
            cmd=["git", "for-each-ref", f"--format={_BRANCH_FORMAT}", "refs/heads/"],
            operation_context="list local branches",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            _raise_if_not_repository(result, repo_root)
            raise GitCommandError(
                list(result.args),
                result.returncode,
                result.stderr,
                operation_context="list local branches",
            )

        entries: list[tuple[str, str]] = []
        for line in result.stdout.splitlines():
            entry = _parse_branch_entry(line)
            if entry is None:
                logger.debug("Skipping malformed branch entry: %r", line)
                continue
            entries.append(entry)
        if not entries:
            return []

        object_types = _read_object_types(repo_root, [sha for _, sha in entries])
        branches: list[str] = []
        for (name, sha), object_type in zip(entries, object_types):
            if object_type != "commit":
                logger.debug("Skipping branch %s: %s is %s", name, sha, object_type)
                continue
            branches.append(name)
        return branches

    def checkout_branch(self, repo_root: Path, name: str) -> None:
        """Check out `name`, attaching HEAD to it when it is a local branch."""
        _ensure_directory(repo_root)
        # --no-guess: never create a local branch from a same-named remote branch.
        # Trailing "--" forces `name` to be read as a revision, not a path.
        result = run_subprocess_with_context(
            cmd=["git", "checkout", "--no-guess", name, "--"],
            operation_context=f"checkout '{name}'",
            cwd=repo_root,
            check=False,
        )
        if result.returncode == 0:
            return

        _raise_if_not_repository(result, repo_root)
        _raise_classified(
            result,
            operation_context=f"checkout '{name}'",
            categories=(
                (_CHECKOUT_CONFLICT_MARKERS, CheckoutConflict),
                (_UNKNOWN_REVISION_MARKERS, AmbiguousOrUnknownRevision),
            ),
        )

    def delete_branch(self, repo_root: Path, name: str) -> None:
        """Force-delete the local branch `name`."""
        _ensure_directory(repo_root)
        result = run_subprocess_with_context(
            cmd=["git", "branch", "-D", name],
            operation_context=f"delete branch '{name}'",
            cwd=repo_root,
            check=False,
        )
        if result.returncode == 0:
            return

        _raise_if_not_repository(result, repo_root)
        _raise_classified(
            result,
            operation_context=f"delete branch '{name}'",
            categories=(
                (_CHECKED_OUT_MARKERS, CannotDeleteCheckedOutBranch),
                (_BRANCH_NOT_FOUND_MARKERS, BranchNotFound),
            ),
        )


def _parse_branch_entry(line: str) -> tuple[str, str] | None:
    """Parse one for-each-ref line into (branch name, object name)."""
    name, separator, sha = line.partition("\0")
    if not separator or not name or not sha:
        return None
    return name, sha


def _read_object_types(repo_root: Path, shas: list[str]) -> list[str]:
    """Look up the type of each object, in order.

    Objects missing from the repository come back as "missing".
    """
    result = run_subprocess_with_context(
        cmd=["git", "cat-file", "--batch-check=%(objecttype)"],
        operation_context="read branch object types",
        cwd=repo_root,
        input="".join(f"{sha}\n" for sha in shas),
    )
    object_types: list[str] = []
    for line in result.stdout.splitlines():
        # Unknown objects are reported as "<sha> missing" regardless of format.
        parts = line.split()
        object_types.append(parts[-1] if parts else "missing")
    if len(object_types) != len(shas):
        raise GitCommandError(
            list(result.args),
            result.returncode,
            f"expected {len(shas)} object types, got {len(object_types)}",
            operation_context="read branch object types",
        )
    return object_types


def _ensure_directory(repo_root: Path) -> None:
    if not repo_root.is_dir():
        raise NotARepository(f"Not a git repository: {repo_root} does not exist")


def _raise_if_not_repository(result: subprocess.CompletedProcess[str], repo_root: Path) -> None:
    stderr = result.stderr.lower()
    if any(marker in stderr for marker in _NOT_A_REPOSITORY_MARKERS):
        raise NotARepository(f"Not a git repository: {repo_root}")


def _raise_classified(
    result: subprocess.CompletedProcess[str],
    *,
    operation_context: str,
    categories: tuple[tuple[tuple[str, ...], type[GbError]], ...],
) -> None:
    """Raise the first error category whose markers appear in stderr.

    Falls back to GitCommandError when nothing matches.
    """
    stderr = result.stderr.strip()
    lowered = stderr.lower()
    for markers, error_type in categories:
        if any(marker in lowered for marker in markers):
            raise error_type(stderr)
    raise GitCommandError(
        list(result.args),
        result.returncode,
        result.stderr,
        operation_context=operation_context,
    )
