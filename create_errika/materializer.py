"""Copies the template tree into the target directory.

Policy:

* The target must be absent or empty.  Emptiness is checked *shallowly*:
  only the immediate directory listing counts, so a directory holding only
  an empty subdirectory is still "not empty".
* Every top-level template entry except the ``apps`` container is copied
  recursively, overwriting existing paths.
* Inside ``apps`` only the fixed subtrees and the one selected variant are
  copied, the variant under its canonical name.
* There is no rollback.  If a copy fails, whatever was already written stays
  on disk and ``CopyError`` is raised.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from create_errika.errors import CopyError, DirectoryNotEmptyError
from create_errika.models import CURRENT_DIR, ProjectOptions, TemplateSelection
from create_errika.validator import validate_path


@dataclass
class MaterializeResult:
    """What a materialisation run wrote."""

    target: Path
    selection: TemplateSelection
    copied: list[str] = field(default_factory=list)
    apps: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Target directory
# ---------------------------------------------------------------------------


def resolve_target(name: str, cwd: str | Path) -> Path:
    """Return the target directory for *name*.

    ``.`` maps to *cwd* itself; any other name must stay inside *cwd*.
    """
    base = Path(cwd).resolve()
    if name == CURRENT_DIR:
        return base
    return validate_path(name, base)


def prepare_target(target: Path, *, is_current_dir: bool) -> None:
    """Create *target* if needed, then fail if it has any entries.

    Raises:
        DirectoryNotEmptyError: If the immediate listing is non-empty.
        CopyError: If the directory cannot be created or listed.
    """
    try:
        if not is_current_dir and not target.exists():
            target.mkdir()
        has_entries = any(target.iterdir())
    except OSError as exc:
        raise CopyError(f"Cannot prepare '{target}': {exc}", path=target) from exc
    if has_entries:
        raise DirectoryNotEmptyError(target)


# ---------------------------------------------------------------------------
# Copy helpers
# ---------------------------------------------------------------------------


def _copy_entry(source: Path, destination: Path) -> None:
    """Recursively copy a file or directory, overwriting what is there."""
    try:
        if source.is_dir():
            shutil.copytree(source, destination, dirs_exist_ok=True)
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
    except (OSError, shutil.Error) as exc:
        raise CopyError(f"Failed to copy '{source}' to '{destination}': {exc}", path=source) from exc


def _require_dir(path: Path, what: str) -> None:
    if not path.is_dir():
        raise CopyError(f"Template {what} not found: {path}", path=path)


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class Materializer:
    """Copies one template root into one target directory per run."""

    def __init__(self, template_root: str | Path, apps_dir: str = "apps") -> None:
        self.template_root = Path(template_root)
        self.apps_dir = apps_dir

    def check_template_root(self) -> None:
        """Raise ``CopyError`` unless the template root is a directory."""
        _require_dir(self.template_root, "root")

    async def materialize(
        self,
        options: ProjectOptions,
        cwd: str | Path,
        selection: TemplateSelection,
    ) -> MaterializeResult:
        """Copy the template for *options* into its target directory.

        Args:
            options: Validated run options.
            cwd: Directory the project name is relative to.
            selection: Output of the template selector.

        Returns:
            A ``MaterializeResult`` describing what was written.
        """
        return await asyncio.to_thread(self._materialize, options, Path(cwd), selection)

    def _materialize(
        self,
        options: ProjectOptions,
        cwd: Path,
        selection: TemplateSelection,
    ) -> MaterializeResult:
        self.check_template_root()

        target = resolve_target(options.name, cwd)
        prepare_target(target, is_current_dir=options.is_current_dir)

        result = MaterializeResult(target=target, selection=selection)

        try:
            entries = sorted(self.template_root.iterdir())
        except OSError as exc:
            raise CopyError(
                f"Cannot read template root '{self.template_root}': {exc}", path=self.template_root
            ) from exc

        for entry in entries:
            if entry.name == self.apps_dir and entry.is_dir():
                continue
            _copy_entry(entry, target / entry.name)
            result.copied.append(entry.name)

        result.apps = self._copy_apps(target, selection)
        return result

    def _copy_apps(self, target: Path, selection: TemplateSelection) -> list[str]:
        """Copy the fixed app subtrees and the remapped variant subtree.

        Selection subpaths are relative to the apps container; the returned
        paths are prefixed with it.
        """
        written: list[str] = []
        apps_source = self.template_root / self.apps_dir
        apps_target = target / self.apps_dir
        try:
            apps_target.mkdir(exist_ok=True)
        except OSError as exc:
            raise CopyError(f"Cannot create '{apps_target}': {exc}", path=apps_target) from exc

        for subpath in selection.fixed:
            source = apps_source / subpath
            _require_dir(source, f"subtree '{self.apps_dir}/{subpath}'")
            _copy_entry(source, apps_target / subpath)
            written.append(f"{self.apps_dir}/{subpath}")

        variant = selection.variant
        source = apps_source / variant.source
        _require_dir(source, f"variant '{self.apps_dir}/{variant.source}'")
        _copy_entry(source, apps_target / variant.target)
        written.append(f"{self.apps_dir}/{variant.target}")
        return written
