"""Integration tests for run_subprocess_with_context."""

from pathlib import Path

import pytest

from gb.errors import GitCommandError
from gb.subprocess_utils import COMMAND_NOT_FOUND, run_subprocess_with_context

pytestmark = pytest.mark.integration


def test_returns_captured_output(tmp_path: Path) -> None:
    result = run_subprocess_with_context(
        cmd=["git", "--version"],
        operation_context="read git version",
        cwd=tmp_path,
    )

    assert result.returncode == 0
    assert result.stdout.startswith("git version")


def test_failure_raises_with_context(tmp_path: Path) -> None:
    with pytest.raises(GitCommandError) as exc_info:
        run_subprocess_with_context(
            cmd=["git", "rev-parse", "HEAD"],
            operation_context="resolve HEAD",
            cwd=tmp_path,
        )

    assert str(exc_info.value).startswith("Failed to resolve HEAD")
    assert exc_info.value.command == ["git", "rev-parse", "HEAD"]
    assert exc_info.value.returncode != 0


def test_failure_without_check_returns_result(tmp_path: Path) -> None:
    result = run_subprocess_with_context(
        cmd=["git", "rev-parse", "HEAD"],
        operation_context="resolve HEAD",
        cwd=tmp_path,
        check=False,
    )

    assert result.returncode != 0
    assert result.stderr


def test_missing_executable_raises_with_context(tmp_path: Path) -> None:
    cmd = ["gb-no-such-executable", "--version"]

    with pytest.raises(GitCommandError) as exc_info:
        run_subprocess_with_context(cmd=cmd, operation_context="read git version", cwd=tmp_path)

    assert str(exc_info.value).startswith("Failed to read git version")
    assert "gb-no-such-executable not found" in str(exc_info.value)
    assert exc_info.value.command == cmd
    assert exc_info.value.returncode == COMMAND_NOT_FOUND
