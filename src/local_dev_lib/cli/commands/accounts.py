"""CLI commands for managing configured accounts."""

import json
import sys

import click

from ...api.local_dev_auth import fetch_access_token
from ...config import cli_configuration
from ...constants import AUTH_METHODS, ENVIRONMENTS
from ...errors import ApiError, ConfigError
from ...lib.track_usage import EVENT_TYPES, track_usage


@click.group()
def accounts():
    """Manage configured accounts."""
    pass


@accounts.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_accounts(as_json: bool):
    """List all configured accounts."""
    config = cli_configuration.config
    account_list = [a for a in (config.accounts or []) if a is not None] if config else []

    if as_json:
        click.echo(
            json.dumps(
                [
                    a.model_dump(
                        by_alias=True,
                        exclude_none=True,
                        include={"account_id", "name", "env", "auth_type"},
                    )
                    for a in account_list
                ],
                indent=2,
            )
        )
        return

    if not account_list:
        click.echo("No accounts configured. Add one with: local-dev accounts add")
        return

    default = cli_configuration.get_default_account()
    click.echo(f"{'':2}{'NAME':<24} {'ACCOUNT ID':<12} {'AUTH':<18} ENV")
    for account in account_list:
        is_default = default is not None and default in (
            account.name,
            account.account_id,
            str(account.account_id),
        )
        marker = "*" if is_default else ""
        click.echo(
            f"{marker:<2}{account.name or '':<24} {account.account_id:<12} "
            f"{account.auth_type or '':<18} {account.env or ENVIRONMENTS['PROD']}"
        )


@accounts.command("add")
@click.option("--account-id", type=int, required=True, help="Account ID")
@click.option(
    "--personal-access-key",
    prompt=True,
    hide_input=True,
    help="Personal access key for the account",
)
@click.option("--name", help="Name to refer to the account by")
@click.option("--qa", is_flag=True, help="Use the QA environment")
def add_account(account_id: int, personal_access_key: str, name: str | None, qa: bool):
    """Authenticate an account with a personal access key."""
    if cli_configuration.use_env_config:
        click.echo("Error: Accounts cannot be added while using --use-env.", err=True)
        sys.exit(1)

    env = ENVIRONMENTS["QA"] if qa else ENVIRONMENTS["PROD"]
    try:
        fetch_access_token(personal_access_key, env=env, account_id=account_id)
        cli_configuration.update_account(
            account_id,
            name=name,
            env=env,
            auth_type=AUTH_METHODS["PERSONAL_ACCESS_KEY"],
            personal_access_key=personal_access_key,
        )
    except ApiError as e:
        if e.status_code in (400, 401):
            click.echo("Error: Invalid personal access key", err=True)
        else:
            click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if not cli_configuration.get_default_account():
        cli_configuration.update_default_account(name or account_id)

    click.echo(f"Authenticated account {name or account_id}.")
    track_usage(
        EVENT_TYPES["CLI_INTERACTION"], "INTERACTION", {"command": "accounts add"}, account_id
    )


@accounts.command("use")
@click.argument("account")
def use_account(account: str):
    """Set the default account by name or ID."""
    if not cli_configuration.is_account_in_config(account):
        click.echo(f"Error: Account '{account}' not found", err=True)
        sys.exit(1)
    try:
        cli_configuration.update_default_account(account)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Default account is now '{account}'")


@accounts.command("rename")
@click.argument("current_name")
@click.argument("new_name")
def rename_account(current_name: str, new_name: str):
    """Rename an account."""
    try:
        cli_configuration.rename_account(current_name, new_name)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Renamed account '{current_name}' to '{new_name}'")


@accounts.command("remove")
@click.argument("account")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def remove_account(account: str, yes: bool):
    """Remove an account from the config."""
    if not yes:
        click.confirm(f"Remove account '{account}' from the config?", abort=True)
    try:
        was_default = cli_configuration.remove_account_from_config(account)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Removed account '{account}'")
    if was_default:
        click.echo("Hint: Run 'local-dev accounts use <account>' to set a new default.")
