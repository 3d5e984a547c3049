"""CLI commands for global configuration settings."""

import sys

import click

from ...config import cli_configuration
from ...constants import DEFAULT_MODES, MIN_HTTP_TIMEOUT
from ...errors import ConfigError


@click.group()
def config():
    """Manage global configuration settings."""
    pass


@config.command("set")
@click.option(
    "--default-mode",
    type=click.Choice(list(DEFAULT_MODES.values())),
    help="Default mode for uploads",
)
@click.option(
    "--http-timeout",
    help=f"HTTP timeout in milliseconds (minimum {MIN_HTTP_TIMEOUT})",
)
@click.option(
    "--allow-usage-tracking/--disallow-usage-tracking",
    default=None,
    help="Enable or disable anonymous usage tracking",
)
def set_config(
    default_mode: str | None, http_timeout: str | None, allow_usage_tracking: bool | None
):
    """Update one or more configuration settings.

    Examples:

        local-dev config set --default-mode draft

        local-dev config set --http-timeout 30000

        local-dev config set --disallow-usage-tracking
    """
    if default_mode is None and http_timeout is None and allow_usage_tracking is None:
        click.echo("Error: Nothing to set. See 'local-dev config set --help'.", err=True)
        sys.exit(1)

    try:
        if default_mode is not None:
            cli_configuration.update_default_mode(default_mode)
            click.echo(f"Default mode set to '{default_mode}'")
        if http_timeout is not None:
            cli_configuration.update_http_timeout(http_timeout)
            click.echo(f"HTTP timeout set to {http_timeout}ms")
        if allow_usage_tracking is not None:
            cli_configuration.update_allow_usage_tracking(allow_usage_tracking)
            state = "enabled" if allow_usage_tracking else "disabled"
            click.echo(f"Usage tracking {state}")
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
