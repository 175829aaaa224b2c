"""Tests for load_snapshot."""

from pathlib import Path

import pytest

from gb.core.snapshot import BranchSnapshot, load_snapshot
from gb.errors import NotARepository
from gb.gateway.git.fake import FakeGit

REPO = Path("/repo")


def test_snapshot_captures_branches_and_current() -> None:
    git = FakeGit(repo_root=REPO, branches=["main", "dev"], current_branch="dev")

    snapshot = load_snapshot(git, REPO)

    assert snapshot == BranchSnapshot(branches=("main", "dev"), current_branch="dev")


def test_detached_head_has_no_current_branch() -> None:
    git = FakeGit(repo_root=REPO, branches=["main"], current_branch=None)

    snapshot = load_snapshot(git, REPO)

    assert snapshot.current_branch is None
    assert snapshot.branches == ("main",)


def test_not_a_repository_propagates() -> None:
    git = FakeGit(repo_root=REPO, branches=["main"])

    with pytest.raises(NotARepository):
        load_snapshot(git, Path("/elsewhere"))
