"""Validation rules for project names, paths and package managers.

Everything here is a pure predicate except :func:`check_package_manager_exists`,
which performs a single PATH lookup.  Validators raise the matching
``ScaffoldError`` subclass and return the normalised value on success.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from typing import Any

from create_errika.errors import (
    InvalidConfigError,
    InvalidNameError,
    PathTraversalError,
    ToolNotFoundError,
)
from create_errika.models import CURRENT_DIR, PackageManager, ProjectType

RESERVED_NAMES: frozenset[str] = frozenset({"node_modules", ".git", ".."})

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")

INSTALL_HINTS: dict[PackageManager, str] = {
    PackageManager.PNPM: (
        "Install it with 'npm install -g pnpm' or see https://pnpm.io/installation"
    ),
    PackageManager.NPM: (
        "npm ships with Node.js. Install Node.js from https://nodejs.org/en/download"
    ),
}


# ---------------------------------------------------------------------------
# Enumerated choices
# ---------------------------------------------------------------------------


def validate_package_manager(value: Any) -> PackageManager:
    """Return *value* as a ``PackageManager`` or raise ``InvalidConfigError``."""
    if isinstance(value, PackageManager):
        return value
    try:
        return PackageManager(value)
    except ValueError:
        choices = ", ".join(pm.value for pm in PackageManager)
        raise InvalidConfigError(
            f"Unsupported package manager {value!r}. Choose one of: {choices}."
        ) from None


def validate_project_type(value: Any) -> ProjectType:
    """Return *value* as a ``ProjectType`` or raise ``InvalidConfigError``."""
    if isinstance(value, ProjectType):
        return value
    try:
        return ProjectType(value)
    except ValueError:
        choices = ", ".join(pt.value for pt in ProjectType)
        raise InvalidConfigError(
            f"Unsupported project type {value!r}. Choose one of: {choices}."
        ) from None


# ---------------------------------------------------------------------------
# Names and paths
# ---------------------------------------------------------------------------


def validate_name(raw: Any) -> str:
    """Validate a project name and return it unchanged.

    Checks run in a fixed order and the first failure wins:

    1. empty or whitespace-only
    2. ``.`` (current directory) is accepted immediately
    3. reserved names (``node_modules``, ``.git``, ``..``)
    4. leading dot
    5. characters outside ``[A-Za-z0-9-_.]``
    6. a ``..`` substring anywhere

    Raises:
        InvalidNameError: With the message of the first failing check.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidNameError("Project name cannot be empty.")
    if raw == CURRENT_DIR:
        return raw
    if raw in RESERVED_NAMES:
        raise InvalidNameError(f"'{raw}' is a reserved name and cannot be used.")
    if raw.startswith("."):
        raise InvalidNameError("Project name cannot start with a dot.")
    if not _NAME_PATTERN.match(raw):
        raise InvalidNameError(
            "Project name may only contain letters, numbers, hyphens, "
            "underscores and dots."
        )
    if ".." in raw:
        raise InvalidNameError("Project name cannot contain '..'.")
    return raw


def is_valid_name(raw: Any) -> bool:
    """Return ``True`` if :func:`validate_name` would accept *raw*."""
    try:
        validate_name(raw)
    except InvalidNameError:
        return False
    return True


def validate_path(target: str | Path, base: str | Path) -> Path:
    """Ensure *target* resolves to *base* or somewhere beneath it.

    Both paths are resolved (symlinks followed) before comparison; a
    relative *target* is interpreted against *base*.  Containment is tested with ``Path.relative_to`` rather than string
    prefixes, so ``/work/app-evil`` is not mistaken for a child of ``/work/app``.

    Returns:
        The resolved target path.

    Raises:
        PathTraversalError: If the resolved target lies outside *base*.
    """
    base_resolved = Path(base).resolve()
    target_resolved = (base_resolved / Path(target)).resolve()
    try:
        target_resolved.relative_to(base_resolved)
    except ValueError:
        raise PathTraversalError(target, base) from None
    return target_resolved


# ---------------------------------------------------------------------------
# External tools
# ---------------------------------------------------------------------------


def check_package_manager_exists(pm: Any) -> str:
    """Probe PATH for the package manager executable.

    Returns:
        The absolute path of the executable.

    Raises:
        ToolNotFoundError: With an install hint specific to *pm*.
    """
    manager = validate_package_manager(pm)
    executable = shutil.which(manager.value)
    if executable is None:
        raise ToolNotFoundError(manager.value, hint=INSTALL_HINTS[manager])
    return executable
