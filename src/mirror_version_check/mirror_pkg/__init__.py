"""Mirror listing, extraction and resolution."""

from .commands import show_latest_implicit_version, show_latest_version, show_version, show_version_list
from .listing import list_versions, remove_duplicate_versions, version_exists
from .resolver import latest_implicit, latest_stable

__all__ = [
    "show_latest_implicit_version",
    "show_latest_version",
    "show_version",
    "show_version_list",
    "list_versions",
    "remove_duplicate_versions",
    "version_exists",
    "latest_implicit",
    "latest_stable",
]
