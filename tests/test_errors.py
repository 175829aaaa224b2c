"""Tests for the gb error taxonomy."""

import pytest

from gb.errors import (
    AmbiguousOrUnknownRevision,
    BranchNotFound,
    CannotDeleteCheckedOutBranch,
    CheckoutConflict,
    DetachedOrUnnamedHead,
    GbError,
    GitCommandError,
    NotARepository,
    TerminalIOError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        NotARepository,
        DetachedOrUnnamedHead,
        AmbiguousOrUnknownRevision,
        CheckoutConflict,
        CannotDeleteCheckedOutBranch,
        BranchNotFound,
        TerminalIOError,
        GitCommandError,
    ],
)
def test_all_errors_are_gb_errors(error_type: type[Exception]) -> None:
    assert issubclass(error_type, GbError)


def test_git_command_error_uses_operation_context() -> None:
    err = GitCommandError(
        ["git", "branch"], 128, "fatal: boom\n", operation_context="list local branches"
    )

    assert str(err) == "Failed to list local branches: fatal: boom"
    assert err.returncode == 128
    assert err.stderr == "fatal: boom\n"


def test_git_command_error_falls_back_to_command() -> None:
    err = GitCommandError(["git", "status"], 1)

    assert str(err) == "Git command failed: git status"
    assert err.stderr == ""
