"""Integration tests for RealGit against throwaway repositories."""

from __future__ import annotations

from pathlib import Path

import pytest

from gb.core.snapshot import load_snapshot
from gb.errors import (
    AmbiguousOrUnknownRevision,
    BranchNotFound,
    CannotDeleteCheckedOutBranch,
    CheckoutConflict,
    DetachedOrUnnamedHead,
    NotARepository,
)
from gb.gateway.git.real import RealGit
from tests.integration.conftest import run_git

pytestmark = pytest.mark.integration


class TestListBranches:
    def test_lists_local_branches(self, repo: Path) -> None:
        assert RealGit().list_branches(repo) == ["bugfix-y", "feature-x", "main"]

    def test_excludes_remote_tracking_branches(self, repo: Path) -> None:
        run_git(repo, "update-ref", "refs/remotes/origin/remote-only", "HEAD")

        assert "remote-only" not in RealGit().list_branches(repo)
        assert "origin/remote-only" not in RealGit().list_branches(repo)

    def test_skips_entries_that_do_not_resolve_to_commits(self, repo: Path) -> None:
        """A branch pointing at a blob or a missing object does not abort the listing."""
        blob = run_git(repo, "hash-object", "-w", "README.md")
        heads = repo / ".git" / "refs" / "heads"
        (heads / "points-at-blob").write_text(f"{blob}\n", encoding="utf-8")
        (heads / "broken").write_text(f"{'deadbeef' * 5}\n", encoding="utf-8")

        assert RealGit().list_branches(repo) == ["bugfix-y", "feature-x", "main"]

    def test_skipped_entries_do_not_block_startup(self, repo: Path) -> None:
        (repo / ".git" / "refs" / "heads" / "broken").write_text(
            f"{'deadbeef' * 5}\n", encoding="utf-8"
        )

        snapshot = load_snapshot(RealGit(), repo)

        assert snapshot.branches == ("bugfix-y", "feature-x", "main")
        assert snapshot.current_branch == "main"

    def test_not_a_repository(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepository):
            RealGit().list_branches(tmp_path)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepository):
            RealGit().list_branches(tmp_path / "missing")


class TestGetCurrentBranch:
    def test_returns_branch_name(self, repo: Path) -> None:
        assert RealGit().get_current_branch(repo) == "main"

    def test_detached_head(self, repo: Path) -> None:
        run_git(repo, "checkout", "--detach")

        with pytest.raises(DetachedOrUnnamedHead):
            RealGit().get_current_branch(repo)

    def test_not_a_repository(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepository):
            RealGit().get_current_branch(tmp_path)


class TestCheckoutBranch:
    def test_branch_checkout_attaches_head(self, repo: Path) -> None:
        git = RealGit()

        git.checkout_branch(repo, "feature-x")

        assert git.get_current_branch(repo) == "feature-x"
        assert run_git(repo, "symbolic-ref", "HEAD") == "refs/heads/feature-x"

    def test_commit_checkout_detaches_head(self, repo: Path) -> None:
        git = RealGit()
        sha = run_git(repo, "rev-parse", "HEAD")

        git.checkout_branch(repo, sha)

        with pytest.raises(DetachedOrUnnamedHead):
            git.get_current_branch(repo)
        assert run_git(repo, "rev-parse", "HEAD") == sha

    def test_unknown_revision(self, repo: Path) -> None:
        with pytest.raises(AmbiguousOrUnknownRevision):
            RealGit().checkout_branch(repo, "does-not-exist")

    def test_does_not_guess_remote_branches(self, repo: Path) -> None:
        run_git(repo, "update-ref", "refs/remotes/origin/remote-only", "HEAD")

        with pytest.raises(AmbiguousOrUnknownRevision):
            RealGit().checkout_branch(repo, "remote-only")
        assert "remote-only" not in RealGit().list_branches(repo)

    def test_conflicting_local_changes(self, repo: Path) -> None:
        run_git(repo, "checkout", "feature-x")
        (repo / "README.md").write_text("feature\n", encoding="utf-8")
        run_git(repo, "commit", "-am", "Change README on feature-x")
        run_git(repo, "checkout", "main")
        (repo / "README.md").write_text("local edit\n", encoding="utf-8")

        with pytest.raises(CheckoutConflict):
            RealGit().checkout_branch(repo, "feature-x")

        assert RealGit().get_current_branch(repo) == "main"
        assert (repo / "README.md").read_text(encoding="utf-8") == "local edit\n"


class TestDeleteBranch:
    def test_deletes_branch(self, repo: Path) -> None:
        git = RealGit()

        git.delete_branch(repo, "feature-x")

        assert git.list_branches(repo) == ["bugfix-y", "main"]

    def test_deletes_unmerged_branch(self, repo: Path) -> None:
        run_git(repo, "checkout", "bugfix-y")
        (repo / "fix.txt").write_text("fix\n", encoding="utf-8")
        run_git(repo, "add", "fix.txt")
        run_git(repo, "commit", "-m", "Unmerged fix")
        run_git(repo, "checkout", "main")

        RealGit().delete_branch(repo, "bugfix-y")

        assert "bugfix-y" not in RealGit().list_branches(repo)

    def test_checked_out_branch(self, repo: Path) -> None:
        with pytest.raises(CannotDeleteCheckedOutBranch):
            RealGit().delete_branch(repo, "main")

    def test_missing_branch(self, repo: Path) -> None:
        with pytest.raises(BranchNotFound):
            RealGit().delete_branch(repo, "ghost")
