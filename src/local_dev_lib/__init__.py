"""Local dev library - account config, authenticated requests and project scaffolding.

Core API:
    - cli_configuration: account configuration state manager
    - get_request_options: base URL, headers and timeout for platform requests
    - http: authenticated client for account-scoped API calls
    - extract_zip_archive / clone_github_repo: project scaffolding from archives
    - track_usage: anonymous usage reporting
"""

import importlib.metadata

from local_dev_lib.config import CLIConfiguration, cli_configuration
from local_dev_lib.errors import (
    ApiError,
    ArchiveError,
    ConfigError,
    FileSystemError,
    GithubError,
    LocalDevError,
)
from local_dev_lib.http import get_request_options, http
from local_dev_lib.lib import clone_github_repo, extract_zip_archive, track_usage

try:
    __version__ = importlib.metadata.version("local-dev-lib")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ApiError",
    "ArchiveError",
    "CLIConfiguration",
    "ConfigError",
    "FileSystemError",
    "GithubError",
    "LocalDevError",
    "__version__",
    "clone_github_repo",
    "cli_configuration",
    "extract_zip_archive",
    "get_request_options",
    "http",
    "track_usage",
]
