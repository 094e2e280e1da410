"""create-errika -- scaffold an Errika Turborepo monorepo.

Quick usage::

    from create_errika import CreatePipeline, ProjectOptions, ScaffoldConfig

    options = ProjectOptions(name="my-app", package_manager="pnpm", project_type="next")
    await CreatePipeline(ScaffoldConfig()).run(options)
"""

from create_errika.config import ScaffoldConfig
from create_errika.errors import ScaffoldError, SetupCancelled
from create_errika.models import PackageManager, ProjectOptions, ProjectType
from create_errika.pipeline import CreatePipeline

__version__ = "0.1.0"

__all__ = [
    "CreatePipeline",
    "PackageManager",
    "ProjectOptions",
    "ProjectType",
    "ScaffoldConfig",
    "ScaffoldError",
    "SetupCancelled",
]
