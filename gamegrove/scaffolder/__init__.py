"""Game Grove scaffolder -- creates game projects from template skeletons.

Resolves a template category (``2d`` / ``3d``) to a template directory across
source and packaged layouts, then copies it into a freshly created project
folder.

Quick usage::

    from gamegrove.scaffolder import ProjectMaterializer, SearchContext

    materializer = ProjectMaterializer.from_context(SearchContext.from_runtime())
    project_path = materializer.materialize("~/src", "my-game", "2d")
"""

from gamegrove.scaffolder.copier import copy_tree
from gamegrove.scaffolder.locator import (
    SearchContext,
    SearchRoot,
    TemplateLocator,
    build_search_roots,
    find_project_root,
    is_frozen,
    locate_template,
)
from gamegrove.scaffolder.materializer import (
    ProjectMaterializer,
    materialize,
    validate_folder_name,
)

__all__ = [
    # Locator
    "SearchContext",
    "SearchRoot",
    "TemplateLocator",
    "build_search_roots",
    "find_project_root",
    "is_frozen",
    "locate_template",
    # Copier
    "copy_tree",
    # Materializer
    "ProjectMaterializer",
    "materialize",
    "validate_folder_name",
]
