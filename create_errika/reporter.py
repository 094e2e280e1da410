"""Rich-based status output for create-errika.

The reporter only renders events raised by the other components; it never
makes decisions.  All output goes through one ``Console`` so tests can swap
in a recording console.  Messages passed to the line helpers are printed
literally; only ``info`` interprets Rich markup.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from create_errika.errors import ScaffoldError, ToolNotFoundError
from create_errika.models import ProjectOptions

console = Console()


STEP_NAMES: dict[int, str] = {
    1: "CONFIGURE",
    2: "COPY TEMPLATE",
    3: "INSTALL",
}

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
}


class Reporter:
    """Prints progress, warnings and errors for a single run."""

    def __init__(self, out: Console | None = None) -> None:
        self.console = out or console

    # -- Progress ----------------------------------------------------------

    def step(self, number: int) -> None:
        """Print a full-width rule announcing pipeline step *number*."""
        color = STEP_COLORS.get(number, "white")
        name = STEP_NAMES.get(number, "?")
        self.console.print()
        self.console.print(Rule(f"[bold {color}] {number}. {name} [/bold {color}]", style=color))

    def info(self, message: str) -> None:
        self.console.print(message)

    def detail(self, message: str) -> None:
        """Print an indented, dimmed sub-item."""
        self.console.print(f"  [green]+[/green] [dim]{escape(message)}[/dim]")

    def success(self, message: str) -> None:
        """Print a green success message."""
        self.console.print(f"[bold green]{escape(message)}[/bold green]")

    def warning(self, message: str) -> None:
        """Print a yellow warning message."""
        self.console.print(f"[bold yellow]{escape(message)}[/bold yellow]")

    def error(self, message: str) -> None:
        """Print a red error message."""
        self.console.print(f"[bold red]{escape(message)}[/bold red]")

    # -- Failures ----------------------------------------------------------

    def failure(self, exc: ScaffoldError) -> None:
        """Render a terminal error, with a remediation hint where one exists."""
        self.error(f"Error: {exc}")
        if isinstance(exc, ToolNotFoundError) and exc.hint:
            self.console.print(f"[dim]{escape(exc.hint)}[/dim]")

    def cancelled(self) -> None:
        self.console.print("\n[yellow]Setup cancelled.[/yellow]")

    # -- Summary -----------------------------------------------------------

    def summary(self, options: ProjectOptions, target: Path, installed: bool) -> None:
        """Print a key/value table for the created project and next steps."""
        table = Table(title="Project created", show_header=True, header_style="bold cyan")
        table.add_column("Item", style="dim", no_wrap=True)
        table.add_column("Value")
        table.add_row("Location", escape(str(target)))
        table.add_row("Project type", options.project_type.value)
        table.add_row("Package manager", options.package_manager.value)
        table.add_row("Dependencies", "installed" if installed else "skipped")

        self.console.print()
        self.console.print(table)

        pm = options.package_manager.value
        steps: list[str] = []
        if not options.is_current_dir:
            steps.append(f"cd {options.name}")
        if not installed:
            steps.append(f"{pm} install")
        steps.append(f"{pm} run dev")
        self.console.print(
            Panel(escape("\n".join(steps)), title="[bold]Next steps[/bold]", border_style="green")
        )
