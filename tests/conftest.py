"""Shared pytest fixtures for the create-errika test suite.

Provides reusable fixtures for:
- A small on-disk template root with every app subtree
- A working directory the project is created in
- A reporter that records output instead of printing it
- A fake install runner that never starts a real package manager
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from create_errika.config import ScaffoldConfig
from create_errika.installer import Installer
from create_errika.models import PackageManager
from create_errika.reporter import Reporter


# ---------------------------------------------------------------------------
# Template root
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, str] = {
    "README.md": "# template\n",
    "package.json": '{"name": "errika-app", "private": true}\n',
    "turbo.json": "{}\n",
    "packages/ui/src/index.tsx": "export const ui = true;\n",
    "apps/http-backend/package.json": '{"name": "http-backend"}\n',
    "apps/http-backend/src/index.ts": "// http\n",
    "apps/ws-backend/package.json": '{"name": "ws-backend"}\n',
    "apps/ws-backend/src/index.ts": "// ws\n",
    "apps/web-next/app/page.tsx": "// next\n",
    "apps/web-react/src/App.tsx": "// react\n",
    "apps/web-rn/src/App.tsx": "// react native\n",
    "apps/NOTES.md": "not copied\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A template root containing fixed subtrees and all three variants."""
    return write_tree(tmp_path / "template", TEMPLATE_FILES)


@pytest.fixture
def services_template_root(tmp_path: Path) -> Path:
    """Same template, with the app subtrees under ``services/`` instead of ``apps/``."""
    files = {
        ("services/" + rel[len("apps/"):] if rel.startswith("apps/") else rel): content
        for rel, content in TEMPLATE_FILES.items()
    }
    return write_tree(tmp_path / "services-template", files)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory standing in for the user's current directory."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(template_root: Path, workdir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(template_root=template_root, cwd=workdir)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@pytest.fixture
def reporter() -> Reporter:
    """Reporter writing to an in-memory console."""
    return Reporter(Console(file=io.StringIO(), width=200, color_system=None))


# ---------------------------------------------------------------------------
# Fake installer
# ---------------------------------------------------------------------------


class FakeInstallRunner:
    """Records install calls and returns a canned exit status."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: list[tuple[PackageManager, Path]] = []

    async def __call__(self, package_manager: PackageManager, working_directory: Path) -> int:
        self.calls.append((package_manager, working_directory))
        return self.status


@pytest.fixture
def install_runner() -> FakeInstallRunner:
    return FakeInstallRunner()


@pytest.fixture
def installer(install_runner: FakeInstallRunner) -> Installer:
    return Installer(runner=install_runner)


@pytest.fixture
def tools_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend every package manager is installed."""
    monkeypatch.setattr(
        "create_errika.validator.shutil.which", lambda name: f"/usr/local/bin/{name}"
    )


@pytest.fixture
def no_tools_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("create_errika.validator.shutil.which", lambda name: None)
