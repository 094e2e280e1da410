"""Template selector: maps a project type onto template subtrees.

The manifest below is the single source of truth for which subtree of the
``apps`` container each frontend flavour uses and where it lands in the
generated project.  Entries are relative to that container.  Web flavours
all land in ``web`` and the mobile flavour in ``mobile``, so sibling apps
keep stable names whichever variant was picked.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from create_errika.models import ProjectType, TemplateSelection, VariantMapping

FIXED_SUBTREES: tuple[str, ...] = ("http-backend", "ws-backend")

TEMPLATE_MANIFEST: Mapping[ProjectType, VariantMapping] = MappingProxyType({
    ProjectType.NEXT: VariantMapping(source="web-next", target="web"),
    ProjectType.REACT: VariantMapping(source="web-react", target="web"),
    ProjectType.REACT_NATIVE: VariantMapping(source="web-rn", target="mobile"),
})

DEFAULT_PROJECT_TYPE = ProjectType.REACT


def select_sources(project_type: ProjectType) -> TemplateSelection:
    """Return the fixed subtrees plus the variant mapping for *project_type*."""
    return TemplateSelection(
        project_type=project_type,
        fixed=FIXED_SUBTREES,
        variant=TEMPLATE_MANIFEST[project_type],
    )


def resolve_sources(
    project_type: ProjectType,
    template_root: str | Path,
    apps_dir: str = "apps",
) -> TemplateSelection:
    """Like :func:`select_sources`, but checked against a real template root.

    Manifest entries are relative to the *apps_dir* container.  If the
    requested variant's source subtree is missing, the default
    variant is selected instead and a warning is attached to the result.
    A missing variant never fails the run here; a missing *default* surfaces
    later as a ``CopyError`` from the materializer.
    """
    selection = select_sources(project_type)
    if (Path(template_root) / apps_dir / selection.variant.source).is_dir():
        return selection

    if project_type == DEFAULT_PROJECT_TYPE:
        return selection

    fallback = select_sources(DEFAULT_PROJECT_TYPE)
    warning = (
        f"Template for '{project_type.value}' not found "
        f"({apps_dir}/{selection.variant.source}); using '{DEFAULT_PROJECT_TYPE.value}' instead."
    )
    return fallback.model_copy(update={"fallback_from": project_type, "warning": warning})
