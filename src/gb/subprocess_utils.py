"""Subprocess helpers that attach operation context to failures."""

import logging
import subprocess
from pathlib import Path

from gb.errors import GitCommandError

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
COMMAND_NOT_FOUND = 127


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path,
    check: bool = True,
    input: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing text output.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human description of the operation (e.g. "list branches"),
            used in log lines and error messages
        cwd: Working directory to run the command in
        check: Raise GitCommandError when the command exits non-zero
        input: Text fed to the command's stdin

    Returns:
        The completed process with captured stdout and stderr

    Raises:
        GitCommandError: If the executable cannot be found, or if check is True
            and the command fails
    """
    logger.debug("%s: %s (cwd=%s)", operation_context, " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            input=input,
        )
    except FileNotFoundError as e:
        raise GitCommandError(
            cmd,
            COMMAND_NOT_FOUND,
            f"{cmd[0]} not found: {e}",
            operation_context=operation_context,
        ) from e
    if result.returncode != 0:
        logger.debug(
            "%s exited %d: %s", operation_context, result.returncode, result.stderr.strip()
        )
        if check:
            raise GitCommandError(
                cmd,
                result.returncode,
                result.stderr,
                operation_context=operation_context,
            )
    return result
