"""Raw GitHub requests: repository files, release metadata and zipballs."""

from __future__ import annotations

import logging
import os

import requests

from ..constants import DEFAULT_HTTP_TIMEOUT, GITHUB_API_URL, GITHUB_RAW_CONTENT_URL
from ..errors import GithubError
from ..http.request_options import DEFAULT_USER_AGENT_HEADERS
from ..types import GithubReleaseData

logger = logging.getLogger(__name__)

_session = requests.Session()


def _get_headers() -> dict[str, str]:
    headers = dict(DEFAULT_USER_AGENT_HEADERS)
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _get(url: str, description: str) -> requests.Response:
    logger.debug(f"GET {url}")
    try:
        response = _session.get(
            url, headers=_get_headers(), timeout=DEFAULT_HTTP_TIMEOUT / 1000
        )
    except requests.exceptions.RequestException as e:
        raise GithubError(f"Failed to fetch {description}: {e}") from e
    if response.status_code >= 400:
        raise GithubError(
            f"Failed to fetch {description}: [{response.status_code}] {response.reason}"
        )
    return response


def fetch_repo_file(repo_path: str, file_path: str, ref: str) -> str:
    """Fetch a single file's raw contents from a repository at a ref."""
    url = f"{GITHUB_RAW_CONTENT_URL}/{repo_path}/{ref}/{file_path}"
    return _get(url, f"{file_path} from {repo_path}").text


def fetch_repo_release_data(repo_path: str, tag: str | None = None) -> GithubReleaseData:
    """Fetch release metadata for a tag, or the latest release."""
    release = f"tags/{tag}" if tag else "latest"
    url = f"{GITHUB_API_URL}/repos/{repo_path}/releases/{release}"
    response = _get(url, f"release data for {repo_path}")
    try:
        return GithubReleaseData.model_validate(response.json())
    except ValueError as e:
        raise GithubError(f"Unexpected release data for {repo_path}") from e


def fetch_repo_as_zip(zip_url: str) -> bytes:
    """Download a repository zipball."""
    return _get(zip_url, "repository archive").content
