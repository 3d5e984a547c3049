"""Higher level operations built on the API wrappers."""

from .archive import extract_zip_archive
from .github import clone_github_repo, fetch_file_from_repository, fetch_release_data
from .track_usage import EVENT_TYPES, track_usage

__all__ = [
    "EVENT_TYPES",
    "clone_github_repo",
    "extract_zip_archive",
    "fetch_file_from_repository",
    "fetch_release_data",
    "track_usage",
]
