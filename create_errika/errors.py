"""Exception hierarchy for create-errika.

Every failure that should end a run with exit code 1 derives from
``ScaffoldError``.  ``SetupCancelled`` is deliberately *not* a
``ScaffoldError``: an explicit user cancellation exits with code 0.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all terminal scaffolding failures."""


class InvalidNameError(ScaffoldError):
    """Raised when a project name fails validation."""


class InvalidConfigError(ScaffoldError):
    """Raised for a bad or missing package manager / project type."""


class PathTraversalError(ScaffoldError):
    """Raised when a target path escapes its base directory."""

    def __init__(self, target: str | Path, base: str | Path) -> None:
        self.target = Path(target)
        self.base = Path(base)
        super().__init__(f"Path '{target}' escapes the base directory '{base}'.")


class DirectoryNotEmptyError(ScaffoldError):
    """Raised when the target directory already has entries."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory '{path}' is not empty.")


class ToolNotFoundError(ScaffoldError):
    """Raised when the chosen package manager is not on PATH."""

    def __init__(self, tool: str, hint: str = "") -> None:
        self.tool = tool
        self.hint = hint
        super().__init__(f"'{tool}' was not found on your PATH.")


class CopyError(ScaffoldError):
    """Raised when copying part of the template fails."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class InstallError(ScaffoldError):
    """Raised when the dependency install exits with a non-zero status."""

    def __init__(self, command: str, exit_status: int) -> None:
        self.command = command
        self.exit_status = exit_status
        super().__init__(f"'{command}' failed with exit status {exit_status}.")


class SetupCancelled(Exception):
    """Raised when the user aborts the interactive question sequence."""
