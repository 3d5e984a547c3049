"""Scaffold a project from a GitHub repository."""

import sys
from pathlib import Path

import click

from ...errors import ArchiveError, FileSystemError, GithubError
from ...lib.github import clone_github_repo
from ...lib.track_usage import EVENT_TYPES, track_usage


@click.command()
@click.argument("repo")
@click.argument("dest", type=click.Path(file_okay=False, path_type=Path))
@click.option("--branch", help="Branch to clone (default: repository default branch)")
@click.option("--release", "is_release", is_flag=True, help="Clone a release")
@click.option("--tag", help="Release tag to clone (default: latest release)")
@click.option("--source-dir", help="Only copy this subdirectory of the repository")
def clone(
    repo: str,
    dest: Path,
    branch: str | None,
    is_release: bool,
    tag: str | None,
    source_dir: str | None,
):
    """Copy a GitHub repository (owner/repo) into DEST.

    Examples:

        local-dev clone owner/repo ./my-project

        local-dev clone owner/repo ./my-project --release --tag 1.2.0
    """
    if repo.count("/") != 1:
        click.echo(f"Error: Invalid repository '{repo}'. Use owner/repo", err=True)
        sys.exit(1)

    try:
        success = clone_github_repo(
            repo,
            dest,
            branch=branch,
            tag=tag,
            is_release=is_release or bool(tag),
            source_dir=source_dir,
        )
    except (GithubError, ArchiveError, FileSystemError) as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if not success:
        click.echo(f"Error: Nothing was downloaded from {repo}", err=True)
        sys.exit(1)

    click.echo(f"Cloned {repo} into {dest}")
    track_usage(EVENT_TYPES["CLI_INTERACTION"], "INTERACTION", {"command": "clone"})
