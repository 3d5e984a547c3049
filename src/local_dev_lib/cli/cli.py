#!/usr/bin/env python3
"""Local Dev CLI - account configuration and project scaffolding

Usage:
    local-dev accounts list|add|use|rename|remove
    local-dev config set [--default-mode] [--http-timeout] [--allow-usage-tracking]
    local-dev clone <owner/repo> <dest>
"""

import logging
import sys
from importlib.metadata import version

import click

from ..config import cli_configuration
from ..errors import ApiError, ArchiveError, ConfigError, FileSystemError, GithubError
from ..types import CLIOptions
from .commands.accounts import accounts
from .commands.clone import clone
from .commands.config import config


@click.group()
@click.version_option(version=version("local-dev-lib"))
@click.option("--use-env", is_flag=True, help="Load account config from environment variables")
@click.option("--debug", is_flag=True, help="Show debug logging")
def cli(use_env: bool, debug: bool):
    """Local Dev CLI - account configuration and project scaffolding"""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    cli_configuration.init(CLIOptions(use_env=use_env))


cli.add_command(accounts)
cli.add_command(config)
cli.add_command(clone)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except ApiError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = {
            0: "Hint: Check your internet connection and try again.",
            401: "Hint: Run 'local-dev accounts add' to authenticate.",
            403: "Hint: You don't have permission for this action.",
            429: "Hint: Too many requests. Please wait and try again.",
            500: "Hint: This is a server issue. Please try again later.",
            502: "Hint: The server is temporarily unavailable. Please try again later.",
            503: "Hint: The service is temporarily unavailable. Please try again later.",
        }.get(e.status_code)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        click.echo("Hint: Run 'local-dev accounts list' to check your config.", err=True)
        sys.exit(1)
    except (FileSystemError, ArchiveError, GithubError) as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except (click.Abort, KeyboardInterrupt):
        click.echo(err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(
            "Hint: If this persists, try updating with 'pip install -U local-dev-lib'.",
            err=True,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
