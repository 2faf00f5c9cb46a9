"""Game Grove: browse a workspace of game projects and create new ones from templates."""

from gamegrove.errors import (
    AlreadyExistsError,
    InvalidCategoryError,
    InvalidNameError,
    InvalidParentError,
    ScaffoldError,
    ScaffoldIOError,
    TemplateNotFoundError,
)
from gamegrove.models import FolderEntry, SortOrder, TemplateCategory

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "FolderEntry",
    "InvalidCategoryError",
    "InvalidNameError",
    "InvalidParentError",
    "ScaffoldError",
    "ScaffoldIOError",
    "SortOrder",
    "TemplateCategory",
    "TemplateNotFoundError",
    "__version__",
]
