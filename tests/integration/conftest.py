"""Helpers for tests that run the real git binary."""

import subprocess
from pathlib import Path

import pytest


def run_git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def init_git_repo(repo: Path, default_branch: str) -> None:
    """Create a repository with one commit on default_branch."""
    run_git(repo, "init", "--initial-branch", default_branch)
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("hello\n", encoding="utf-8")
    run_git(repo, "add", "README.md")
    run_git(repo, "commit", "-m", "Initial commit")


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Repository on main with extra branches feature-x and bugfix-y."""
    path = tmp_path / "repo"
    path.mkdir()
    init_git_repo(path, "main")
    run_git(path, "branch", "feature-x")
    run_git(path, "branch", "bugfix-y")
    return path
