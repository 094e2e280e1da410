"""Configuration resolver: turns CLI input into validated ``ProjectOptions``.

Two strategies share one interface:

* ``DirectStrategy`` -- ``create-errika <name>``; the name is the only input
  and the package manager / project type take their defaults.
* ``InteractiveStrategy`` -- ``create-errika``; three questions are asked
  through a ``PromptProvider`` and every answer is validated before it is
  accepted.

Prompt providers return either an answer, ``None`` (no answer given) or
``PromptSignal.CANCELLED``.  ``ScriptedPromptProvider`` replays canned answers
so the interactive flow can run unattended.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Protocol, TypeVar, Union

from rich.console import Console
from rich.prompt import Prompt

from create_errika.config import ScaffoldConfig
from create_errika.errors import (
    InvalidConfigError,
    InvalidNameError,
    PathTraversalError,
    SetupCancelled,
)
from create_errika.models import (
    CURRENT_DIR,
    PROJECT_TYPE_LABELS,
    PackageManager,
    ProjectOptions,
    ProjectType,
)
from create_errika.reporter import Reporter
from create_errika.validator import (
    validate_name,
    validate_package_manager,
    validate_path,
    validate_project_type,
)

T = TypeVar("T")

CURRENT_DIR_ALIASES = frozenset({".", "./"})
DEFAULT_PROJECT_NAME = "my-errika-app"


class PromptSignal(Enum):
    """Non-value outcomes a prompt provider can report."""
    CANCELLED = "cancelled"


Answer = Union[str, None, PromptSignal]


# ---------------------------------------------------------------------------
# Prompt providers
# ---------------------------------------------------------------------------


class PromptProvider(Protocol):
    """One operation per configuration field."""

    def ask_name(self) -> Answer: ...

    def ask_package_manager(self) -> Answer: ...

    def ask_project_type(self) -> Answer: ...


class RichPromptProvider:
    """Asks the three questions on the terminal with ``rich.prompt``.

    Ctrl+C or end-of-input at any question is reported as cancellation.
    """

    def __init__(self, out: Console | None = None) -> None:
        self.console = out

    def _ask(self, question: str, **kwargs) -> Answer:
        try:
            return Prompt.ask(question, console=self.console, **kwargs)
        except (KeyboardInterrupt, EOFError):
            return PromptSignal.CANCELLED

    def ask_name(self) -> Answer:
        return self._ask(
            "[bold]Project name[/bold] [dim](use '.' for the current directory)[/dim]",
            default=DEFAULT_PROJECT_NAME,
        )

    def ask_package_manager(self) -> Answer:
        return self._ask(
            "[bold]Package manager[/bold]",
            choices=[pm.value for pm in PackageManager],
            default=PackageManager.PNPM.value,
        )

    def ask_project_type(self) -> Answer:
        if self.console is not None:
            for project_type, label in PROJECT_TYPE_LABELS.items():
                self.console.print(f"  [cyan]{project_type.value}[/cyan] [dim]{label}[/dim]")
        return self._ask(
            "[bold]Project type[/bold]",
            choices=[pt.value for pt in ProjectType],
            default=ProjectType.REACT.value,
        )


class ScriptedPromptProvider:
    """Replays pre-recorded answers; an exhausted queue answers ``None``."""

    def __init__(
        self,
        names: Iterable[Answer] = (),
        package_managers: Iterable[Answer] = (),
        project_types: Iterable[Answer] = (),
    ) -> None:
        self._names = list(names)
        self._package_managers = list(package_managers)
        self._project_types = list(project_types)
        self.asked: list[str] = []

    @staticmethod
    def _next(queue: list[Answer]) -> Answer:
        return queue.pop(0) if queue else None

    def ask_name(self) -> Answer:
        self.asked.append("name")
        return self._next(self._names)

    def ask_package_manager(self) -> Answer:
        self.asked.append("package_manager")
        return self._next(self._package_managers)

    def ask_project_type(self) -> Answer:
        self.asked.append("project_type")
        return self._next(self._project_types)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class OptionsStrategy(Protocol):
    def resolve(self) -> ProjectOptions: ...


def _check_name_and_path(name: str, base_dir: Path) -> str:
    validate_name(name)
    if name != CURRENT_DIR:
        validate_path(name, base_dir)
    return name


class DirectStrategy:
    """Legacy single-argument mode: ``create-errika <name>``."""

    def __init__(
        self,
        name: str,
        base_dir: str | Path,
        package_manager: PackageManager = PackageManager.PNPM,
        project_type: ProjectType = ProjectType.REACT,
    ) -> None:
        self.name = name
        self.base_dir = Path(base_dir)
        self.package_manager = package_manager
        self.project_type = project_type

    def resolve(self) -> ProjectOptions:
        name = CURRENT_DIR if self.name in CURRENT_DIR_ALIASES else self.name
        _check_name_and_path(name, self.base_dir)
        return ProjectOptions(
            name=name,
            package_manager=self.package_manager,
            project_type=self.project_type,
        )


class InteractiveStrategy:
    """Asks name, package manager and project type, re-prompting on bad input.

    Raises:
        SetupCancelled: When the provider reports cancellation.
        InvalidConfigError: When the provider gives no answer for a field.
    """

    def __init__(
        self,
        provider: PromptProvider,
        base_dir: str | Path,
        reporter: Reporter | None = None,
    ) -> None:
        self.provider = provider
        self.base_dir = Path(base_dir)
        self.reporter = reporter or Reporter()

    def resolve(self) -> ProjectOptions:
        name = self._ask_until_valid(
            self.provider.ask_name,
            lambda raw: _check_name_and_path(raw, self.base_dir),
            "project name",
        )
        package_manager = self._ask_until_valid(
            self.provider.ask_package_manager, validate_package_manager, "package manager"
        )
        project_type = self._ask_until_valid(
            self.provider.ask_project_type, validate_project_type, "project type"
        )
        return ProjectOptions(
            name=name,
            package_manager=package_manager,
            project_type=project_type,
        )

    def _ask_until_valid(
        self,
        ask: Callable[[], Answer],
        validate: Callable[[str], T],
        field_name: str,
    ) -> T:
        while True:
            answer = ask()
            if answer is PromptSignal.CANCELLED:
                raise SetupCancelled()
            if answer is None:
                raise InvalidConfigError(f"No {field_name} was provided.")
            try:
                return validate(answer)
            except (InvalidNameError, InvalidConfigError, PathTraversalError) as exc:
                self.reporter.error(str(exc))


def build_strategy(
    name: Optional[str],
    config: ScaffoldConfig,
    provider: PromptProvider | None = None,
    reporter: Reporter | None = None,
) -> OptionsStrategy:
    """Pick direct mode when a name was given, interactive mode otherwise."""
    if name is not None:
        return DirectStrategy(
            name,
            config.cwd,
            package_manager=config.default_package_manager,
            project_type=config.default_project_type,
        )
    reporter = reporter or Reporter()
    return InteractiveStrategy(
        provider or RichPromptProvider(reporter.console),
        config.cwd,
        reporter=reporter,
    )
