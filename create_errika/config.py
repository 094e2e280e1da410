"""create-errika configuration.

Typed settings for a single scaffolding run.  Instances are created once by
the CLI entry point and passed through the pipeline.  Nothing is read from
the environment; the only environment dependency of the tool is the PATH
lookup performed by the validator.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from create_errika.models import PackageManager, ProjectType

DEFAULT_TEMPLATE_ROOT = Path(__file__).parent / "template"


class ScaffoldConfig(BaseModel):
    """Settings that stay fixed for the whole run.

    ``default_package_manager`` and ``default_project_type`` are what direct
    (``create-errika <name>``) mode uses, since it asks no questions.
    """

    template_root: Path = Field(default=DEFAULT_TEMPLATE_ROOT)
    apps_dir: str = Field(default="apps", min_length=1)
    cwd: Path = Field(default_factory=Path.cwd)
    install: bool = Field(default=True, description="Run '<pm> install' after copying")
    default_package_manager: PackageManager = Field(default=PackageManager.PNPM)
    default_project_type: ProjectType = Field(default=ProjectType.REACT)
