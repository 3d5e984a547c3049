"""Scaffold projects from GitHub repositories."""

from __future__ import annotations

import logging
from pathlib import Path

from ..api.github import fetch_repo_as_zip, fetch_repo_file, fetch_repo_release_data
from ..constants import GITHUB_API_URL
from ..logger import LogCallbacks
from ..types import GithubReleaseData
from .archive import extract_zip_archive

logger = logging.getLogger(__name__)


def fetch_file_from_repository(repo_path: str, file_path: str, ref: str) -> str:
    """Fetch a file's contents from ``owner/repo`` at ``ref``."""
    logger.debug(f"Fetching {file_path} from {repo_path} at {ref}")
    return fetch_repo_file(repo_path, file_path, ref)


def fetch_release_data(repo_path: str, tag: str | None = None) -> GithubReleaseData:
    """Fetch release data for a tag (a leading "v" is added if missing)."""
    if tag and not tag.startswith("v"):
        tag = f"v{tag}"
    return fetch_repo_release_data(repo_path, tag)


def download_github_repo_zip(
    repo_path: str,
    is_release: bool = False,
    tag: str | None = None,
    branch: str | None = None,
) -> bytes:
    """Download a repository zipball for a release, a branch, or the default branch."""
    if is_release:
        release = fetch_release_data(repo_path, tag)
        zip_url = release.zipball_url or (
            f"{GITHUB_API_URL}/repos/{repo_path}/zipball/{release.tag_name}"
        )
        logger.debug(f"Fetching {release.tag_name or 'latest'} release of {repo_path}")
    else:
        zip_url = f"{GITHUB_API_URL}/repos/{repo_path}/zipball"
        if branch:
            zip_url = f"{zip_url}/{branch}"
        logger.debug(f"Fetching {branch or 'default branch'} of {repo_path}")
    return fetch_repo_as_zip(zip_url)


def clone_github_repo(
    repo_path: str,
    dest: str | Path,
    branch: str | None = None,
    tag: str | None = None,
    is_release: bool = False,
    source_dir: str | None = None,
    log_callbacks: LogCallbacks | None = None,
) -> bool:
    """Download ``owner/repo`` and extract it into ``dest``.

    Args:
        repo_path: Repository in ``owner/repo`` form.
        dest: Destination directory.
        branch: Branch to clone when not cloning a release.
        tag: Release tag; the latest release when omitted.
        is_release: Clone a release instead of a branch.
        source_dir: Only copy this subdirectory of the repository.

    Returns:
        True if the repository was extracted.
    """
    zip_bytes = download_github_repo_zip(
        repo_path, is_release=is_release, tag=tag, branch=branch
    )
    repo_name = repo_path.split("/")[-1]
    return extract_zip_archive(
        zip_bytes, repo_name, dest, source_dir=source_dir, log_callbacks=log_callbacks
    )
