"""Unit tests for ProjectOptions and ScaffoldConfig.

Tests cover:
- ProjectOptions defaults, coercion of plain strings, rejection of bad values
- ProjectOptions immutability and the current-directory flag
- ScaffoldConfig defaults and the bundled template root
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_errika.config import DEFAULT_TEMPLATE_ROOT, ScaffoldConfig
from create_errika.errors import InvalidConfigError, InvalidNameError
from create_errika.models import PackageManager, ProjectOptions, ProjectType

pytestmark = pytest.mark.unit


class TestProjectOptions:
    def test_defaults(self):
        options = ProjectOptions(name="my-app")
        assert options.package_manager == PackageManager.PNPM
        assert options.project_type == ProjectType.REACT

    def test_coerces_strings(self):
        options = ProjectOptions(name="my-app", package_manager="npm", project_type="react-native")
        assert options.package_manager is PackageManager.NPM
        assert options.project_type is ProjectType.REACT_NATIVE

    def test_bad_name_raises_invalid_name(self):
        with pytest.raises(InvalidNameError):
            ProjectOptions(name="../evil")

    def test_bad_package_manager_raises_invalid_config(self):
        with pytest.raises(InvalidConfigError):
            ProjectOptions(name="my-app", package_manager="yarn")

    def test_bad_project_type_raises_invalid_config(self):
        with pytest.raises(InvalidConfigError):
            ProjectOptions(name="my-app", project_type="svelte")

    def test_is_current_dir(self):
        assert ProjectOptions(name=".").is_current_dir
        assert not ProjectOptions(name="my-app").is_current_dir

    def test_frozen(self):
        options = ProjectOptions(name="my-app")
        with pytest.raises(Exception):
            options.name = "other"  # type: ignore[misc]


class TestScaffoldConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        config = ScaffoldConfig()
        assert config.template_root == DEFAULT_TEMPLATE_ROOT
        assert config.apps_dir == "apps"
        assert config.cwd == Path.cwd()
        assert config.install is True
        assert config.default_package_manager == PackageManager.PNPM
        assert config.default_project_type == ProjectType.REACT

    def test_bundled_template_has_all_subtrees(self):
        apps = DEFAULT_TEMPLATE_ROOT / "apps"
        for name in ("http-backend", "ws-backend", "web-next", "web-react", "web-rn"):
            assert (apps / name).is_dir(), name
        assert (DEFAULT_TEMPLATE_ROOT / "package.json").is_file()

    def test_empty_apps_dir_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            ScaffoldConfig(apps_dir="")
