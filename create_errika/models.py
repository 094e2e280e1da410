"""Pydantic v2 models shared across the scaffolding engine.

Defines the closed package-manager and project-type enumerations, the
validated ``ProjectOptions`` produced once per run, and the value objects
returned by the template selector.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

CURRENT_DIR = "."


class PackageManager(str, Enum):
    """Package managers the generated monorepo can be bootstrapped with."""
    PNPM = "pnpm"
    NPM = "npm"


class ProjectType(str, Enum):
    """Frontend flavour copied into the ``apps`` container."""
    NEXT = "next"
    REACT = "react"
    REACT_NATIVE = "react-native"


PROJECT_TYPE_LABELS: dict[ProjectType, str] = {
    ProjectType.NEXT: "Web app, server-rendered (Next.js)",
    ProjectType.REACT: "Web app, client-only (Vite + React)",
    ProjectType.REACT_NATIVE: "Mobile app (React Native)",
}


# ---------------------------------------------------------------------------
# Run options
# ---------------------------------------------------------------------------

class ProjectOptions(BaseModel):
    """Fully validated answers for a single run.

    Field validators delegate to :mod:`create_errika.validator`, so building
    this model directly with bad values raises the same ``InvalidNameError``
    / ``InvalidConfigError`` the prompts would.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Directory name, or '.' for the current directory")
    package_manager: PackageManager = Field(default=PackageManager.PNPM)
    project_type: ProjectType = Field(default=ProjectType.REACT)

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        from create_errika.validator import validate_name

        return validate_name(value)

    @field_validator("package_manager", mode="before")
    @classmethod
    def _check_package_manager(cls, value: Any) -> PackageManager:
        from create_errika.validator import validate_package_manager

        return validate_package_manager(value)

    @field_validator("project_type", mode="before")
    @classmethod
    def _check_project_type(cls, value: Any) -> ProjectType:
        from create_errika.validator import validate_project_type

        return validate_project_type(value)

    @property
    def is_current_dir(self) -> bool:
        """``True`` when the project is materialised into the working directory."""
        return self.name == CURRENT_DIR


# ---------------------------------------------------------------------------
# Template selection
# ---------------------------------------------------------------------------

class VariantMapping(BaseModel):
    """Where a variant's template subtree comes from and where it lands."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Subpath under the apps container of the template, e.g. 'web-react'")
    target: str = Field(..., description="Canonical subpath under the project's apps container, e.g. 'web'")


class TemplateSelection(BaseModel):
    """Result of mapping a ``ProjectType`` onto template subtrees."""

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    fixed: tuple[str, ...] = Field(default_factory=tuple)
    variant: VariantMapping
    fallback_from: Optional[ProjectType] = Field(
        default=None, description="Requested type when the default variant was substituted"
    )
    warning: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.fallback_from is not None
