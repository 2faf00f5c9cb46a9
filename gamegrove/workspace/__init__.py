"""Game Grove workspace listing.

Enumerates project folders under the configured workspace roots for the
browsing surface.

Quick usage::

    from gamegrove.workspace import list_folders
    from gamegrove.models import SortOrder

    entries = list_folders("~/src", order=SortOrder.MODIFIED)
"""

from gamegrove.workspace.lister import list_folders, list_workspaces, sort_entries

__all__ = [
    "list_folders",
    "list_workspaces",
    "sort_entries",
]
