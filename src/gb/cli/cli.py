import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from gb.core.context import GbContext
from gb.core.snapshot import load_snapshot
from gb.errors import GbError, TerminalIOError
from gb.tui.app import BranchSwitcherApp
from gb.tui.session import BranchSession

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def reports_gb_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Print GbError failures to stderr in red and exit 1."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except GbError as err:
            logger.debug("Command failed", exc_info=True)
            click.echo(click.style(f"Error: {err}", fg="red"), err=True)
            raise SystemExit(1) from err

    return wrapper


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="gb")
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository to operate on (defaults to the current directory).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, repo: Path | None, debug: bool) -> None:
    """Browse and switch local git branches.

    Run without a command to open the interactive browser:
    j/k or arrows move, enter checks out, q quits.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = GbContext.for_production() if repo is None else GbContext.for_production(repo)
    elif repo is not None:
        ctx.obj = ctx.obj.with_repo_root(repo)

    if ctx.invoked_subcommand is None:
        _browse(ctx.obj)


@reports_gb_errors
def _browse(gb_ctx: GbContext) -> None:
    """Open the interactive browser.

    The snapshot is loaded before the terminal is taken over, so a startup
    failure is reported on a normal screen.
    """
    snapshot = load_snapshot(gb_ctx.git, gb_ctx.repo_root)

    if not gb_ctx.terminal.is_stdin_interactive() or not gb_ctx.terminal.is_stdout_tty():
        raise TerminalIOError(
            "The branch browser needs an interactive terminal. Use 'gb list' instead."
        )

    session = BranchSession(gb_ctx.git, gb_ctx.repo_root, snapshot)
    app = BranchSwitcherApp(session, repo_label=str(gb_ctx.repo_root.resolve()))
    return_code = gb_ctx.tui_runner.run(app)
    if return_code != 0:
        raise SystemExit(return_code)


@cli.command("list")
@click.pass_obj
@reports_gb_errors
def list_cmd(gb_ctx: GbContext) -> None:
    """List local branches, marking the checked-out one with '*'."""
    snapshot = load_snapshot(gb_ctx.git, gb_ctx.repo_root)
    for branch in snapshot.branches:
        prefix = "* " if branch == snapshot.current_branch else "  "
        click.echo(f"{prefix}{branch}")


@cli.command("current")
@click.pass_obj
@reports_gb_errors
def current_cmd(gb_ctx: GbContext) -> None:
    """Print the checked-out branch."""
    branch = gb_ctx.git.get_current_branch(gb_ctx.repo_root)
    click.echo(branch)


@cli.command("checkout")
@click.argument("name")
@click.pass_obj
@reports_gb_errors
def checkout_cmd(gb_ctx: GbContext, name: str) -> None:
    """Check out NAME without opening the browser."""
    gb_ctx.git.checkout_branch(gb_ctx.repo_root, name)
    click.echo(f"Switched to '{name}'")


@cli.command("delete")
@click.argument("name")
@click.pass_obj
@reports_gb_errors
def delete_cmd(gb_ctx: GbContext, name: str) -> None:
    """Delete the local branch NAME, merged or not."""
    gb_ctx.git.delete_branch(gb_ctx.repo_root, name)
    click.echo(f"Deleted branch {name}")
