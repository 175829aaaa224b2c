"""Error taxonomy for gb.

Every failure gb knows how to report is a GbError subclass. The Git gateway
translates raw git failures into these so callers never parse stderr.
"""


class GbError(Exception):
    """Base error for all gb failures."""


class NotARepository(GbError):
    """Raised when the repository path is not inside a git repository."""


class DetachedOrUnnamedHead(GbError):
    """Raised when HEAD does not point at a named branch."""


class AmbiguousOrUnknownRevision(GbError):
    """Raised when a branch name cannot be resolved to a commit."""


class CheckoutConflict(GbError):
    """Raised when local changes would be overwritten by a checkout."""


class CannotDeleteCheckedOutBranch(GbError):
    """Raised when deleting the branch that is currently checked out."""


class BranchNotFound(GbError):
    """Raised when a local branch does not exist."""


class TerminalIOError(GbError):
    """Raised when the terminal cannot be used for the interactive session."""


class GitCommandError(GbError):
    """Raised when a git invocation fails for an uncategorized reason."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        stderr: str | None = None,
        *,
        operation_context: str | None = None,
    ) -> None:
        if operation_context:
            message = f"Failed to {operation_context}"
        else:
            message = f"Git command failed: {' '.join(command)}"
        detail = (stderr or "").strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
