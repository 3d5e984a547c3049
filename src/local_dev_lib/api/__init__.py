"""Thin wrappers over fixed platform and GitHub endpoints."""

from .apps_dev import fetch_public_apps
from .file_transport import (
    create_schema_from_hub_file,
    fetch_hub_file_schema,
    update_schema_from_hub_file,
)
from .github import fetch_repo_as_zip, fetch_repo_file, fetch_repo_release_data
from .local_dev_auth import fetch_access_token, fetch_scope_data

__all__ = [
    # Apps
    "fetch_public_apps",
    # File transport
    "create_schema_from_hub_file",
    "update_schema_from_hub_file",
    "fetch_hub_file_schema",
    # GitHub
    "fetch_repo_file",
    "fetch_repo_release_data",
    "fetch_repo_as_zip",
    # Local dev auth
    "fetch_access_token",
    "fetch_scope_data",
]
