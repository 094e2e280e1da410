"""create-errika pipeline orchestrator.

Runs the stages of a scaffolding run strictly in order:

1. CONFIGURE -- look up the package manager on PATH, check the template root,
   select template sources.
2. COPY TEMPLATE -- materialise the template into the target directory.
3. INSTALL -- run ``<pm> install`` in the new project.

Any ``ScaffoldError`` aborts the run; nothing already written is removed.
"""

from __future__ import annotations

from pathlib import Path

from create_errika.config import ScaffoldConfig
from create_errika.installer import Installer, install_command
from create_errika.materializer import Materializer
from create_errika.models import ProjectOptions
from create_errika.reporter import Reporter
from create_errika.selector import resolve_sources
from create_errika.validator import check_package_manager_exists


class CreatePipeline:
    """Drives one scaffolding run from validated options to installed project.

    Attributes:
        config: Settings for the run.
        reporter: Status output sink.
        installer: Install capability; swap its runner out in tests.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        reporter: Reporter | None = None,
        installer: Installer | None = None,
    ) -> None:
        self.config = config
        self.reporter = reporter or Reporter()
        self.installer = installer or Installer()
        self.materializer = Materializer(config.template_root, apps_dir=config.apps_dir)

    async def run(self, options: ProjectOptions) -> Path:
        """Execute every stage for *options* and return the project directory."""
        label = "." if options.is_current_dir else options.name
        self.reporter.info(f"\n[bold]Creating project in \"{label}\"...[/bold]")

        # 1. Configure
        self.reporter.step(1)
        if self.config.install:
            executable = check_package_manager_exists(options.package_manager)
            self.reporter.detail(f"Found {options.package_manager.value} at {executable}")

        apps_dir = self.config.apps_dir
        self.materializer.check_template_root()
        selection = resolve_sources(options.project_type, self.config.template_root, apps_dir)
        if selection.warning:
            self.reporter.warning(selection.warning)
        self.reporter.detail(
            f"Variant {selection.project_type.value}: "
            f"{apps_dir}/{selection.variant.source} -> {apps_dir}/{selection.variant.target}"
        )

        # 2. Copy template
        self.reporter.step(2)
        result = await self.materializer.materialize(options, self.config.cwd, selection)
        for entry in result.copied:
            self.reporter.detail(entry)
        for app in result.apps:
            self.reporter.detail(app)
        self.reporter.success("Template copied successfully.")

        # 3. Install
        if self.config.install:
            self.reporter.step(3)
            self.reporter.info(
                f"[bright_blue]Installing dependencies with "
                f"'{install_command(options.package_manager)}'...[/bright_blue]"
            )
            await self.installer.install(options.package_manager, result.target)
            self.reporter.success("Dependencies installed.")

        self.reporter.summary(options, result.target, installed=self.config.install)
        self.reporter.success("Project setup complete! Happy hacking!")
        return result.target
