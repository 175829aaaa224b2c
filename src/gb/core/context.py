"""Context holding gb's dependencies.

GbContext is built once in the CLI group callback and passed to commands via
click's ctx.obj. Tests build one with for_test() and pass it as obj= to
CliRunner.invoke, so no command touches real git or a real terminal.
"""

from dataclasses import dataclass
from pathlib import Path

from gb.core.constants import CURRENT_REPO
from gb.gateway.git.abc import Git
from gb.gateway.git.fake import FakeGit
from gb.gateway.git.real import RealGit
from gb.gateway.terminal.abc import Terminal
from gb.gateway.terminal.fake import FakeTerminal
from gb.gateway.terminal.real import RealTerminal
from gb.tui.runner import FakeTuiRunner, RealTuiRunner, TuiRunner


@dataclass(frozen=True)
class GbContext:
    """Dependencies for gb commands.

    Attributes:
        git: Git gateway
        terminal: TTY detection
        tui_runner: Runs the interactive browser
        repo_root: Repository gb operates on
    """

    git: Git
    terminal: Terminal
    tui_runner: TuiRunner
    repo_root: Path

    @classmethod
    def for_production(cls, repo_root: Path = CURRENT_REPO) -> "GbContext":
        """Create production context with real implementations.

        Args:
            repo_root: Repository to operate on

        Returns:
            GbContext configured for production use
        """
        return cls(
            git=RealGit(),
            terminal=RealTerminal(),
            tui_runner=RealTuiRunner(),
            repo_root=repo_root,
        )

    @classmethod
    def for_test(
        cls,
        *,
        git: Git | None = None,
        terminal: Terminal | None = None,
        tui_runner: TuiRunner | None = None,
        repo_root: Path = CURRENT_REPO,
    ) -> "GbContext":
        """Create test context with injectable fakes.

        Args:
            git: Optional Git. If None, creates an empty FakeGit.
            terminal: Optional Terminal. If None, creates an interactive FakeTerminal.
            tui_runner: Optional TuiRunner. If None, creates FakeTuiRunner.
            repo_root: Repository path passed to the gateways

        Returns:
            GbContext configured for testing

        Example:
            tui_runner = FakeTuiRunner()
            ctx = GbContext.for_test(git=FakeGit(branches=["main"]), tui_runner=tui_runner)
            CliRunner().invoke(cli, [], obj=ctx)
            assert len(tui_runner.apps_run) == 1
        """
        return cls(
            git=git or FakeGit(),
            terminal=terminal or FakeTerminal(is_interactive=True),
            tui_runner=tui_runner or FakeTuiRunner(),
            repo_root=repo_root,
        )

    def with_repo_root(self, repo_root: Path) -> "GbContext":
        """Return a copy of this context pointed at another repository."""
        return GbContext(
            git=self.git,
            terminal=self.terminal,
            tui_runner=self.tui_runner,
            repo_root=repo_root,
        )
