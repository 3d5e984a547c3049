"""Configuration sourced from environment variables."""

import logging
import os

from ..constants import AUTH_METHODS, ENV_PREFIX, ENVIRONMENTS
from ..types import AccountAuth, CLIAccount, CLIConfig, TokenInfo

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLES = {
    "ACCOUNT_ID": f"{ENV_PREFIX}ACCOUNT_ID",
    "API_KEY": f"{ENV_PREFIX}API_KEY",
    "CLIENT_ID": f"{ENV_PREFIX}CLIENT_ID",
    "CLIENT_SECRET": f"{ENV_PREFIX}CLIENT_SECRET",
    "PERSONAL_ACCESS_KEY": f"{ENV_PREFIX}PERSONAL_ACCESS_KEY",
    "REFRESH_TOKEN": f"{ENV_PREFIX}REFRESH_TOKEN",
    "ENVIRONMENT": f"{ENV_PREFIX}ENVIRONMENT",
    "HTTP_TIMEOUT": f"{ENV_PREFIX}HTTP_TIMEOUT",
    "HTTP_USE_LOCALHOST": f"{ENV_PREFIX}HTTP_USE_LOCALHOST",
    "DEFAULT_MODE": f"{ENV_PREFIX}DEFAULT_MODE",
    "ALLOW_USAGE_TRACKING": f"{ENV_PREFIX}ALLOW_USAGE_TRACKING",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_valid_env(env: str | None, masked_production_value: str | None = None) -> str:
    """Normalize an environment name.

    Args:
        env: Raw environment name.
        masked_production_value: Returned instead of "prod" when given.

    Returns:
        "qa" for QA, otherwise the production value.
    """
    prod = masked_production_value if masked_production_value else ENVIRONMENTS["PROD"]
    if isinstance(env, str) and env.lower() == ENVIRONMENTS["QA"]:
        return ENVIRONMENTS["QA"]
    return prod


def _get_env(key: str) -> str | None:
    return os.environ.get(ENVIRONMENT_VARIABLES[key]) or None


def _get_bool(key: str) -> bool | None:
    value = _get_env(key)
    if value is None:
        return None
    return value.strip().lower() in _TRUE_VALUES


def _get_int(key: str) -> int | None:
    value = _get_env(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring non-integer {ENVIRONMENT_VARIABLES[key]}={value!r}")
        return None


def _get_auth_type(
    personal_access_key: str | None,
    client_id: str | None,
    client_secret: str | None,
    refresh_token: str | None,
    api_key: str | None,
) -> str | None:
    if personal_access_key:
        return AUTH_METHODS["PERSONAL_ACCESS_KEY"]
    if client_id and client_secret and refresh_token:
        return AUTH_METHODS["OAUTH"]
    if api_key:
        return AUTH_METHODS["API_KEY"]
    return None


def load_config_from_environment() -> CLIConfig | None:
    """Build a single-account config from environment variables.

    Returns:
        The config, or None if no account ID or usable credentials are set.
    """
    account_id = _get_int("ACCOUNT_ID")
    if not account_id:
        logger.debug("No account ID found in environment")
        return None

    api_key = _get_env("API_KEY")
    client_id = _get_env("CLIENT_ID")
    client_secret = _get_env("CLIENT_SECRET")
    personal_access_key = _get_env("PERSONAL_ACCESS_KEY")
    refresh_token = _get_env("REFRESH_TOKEN")

    auth_type = _get_auth_type(
        personal_access_key, client_id, client_secret, refresh_token, api_key
    )
    if not auth_type:
        logger.debug("No credentials found in environment")
        return None

    env = get_valid_env(_get_env("ENVIRONMENT"))
    account = CLIAccount(account_id=account_id, env=env, auth_type=auth_type)

    if auth_type == AUTH_METHODS["PERSONAL_ACCESS_KEY"]:
        account.personal_access_key = personal_access_key
    elif auth_type == AUTH_METHODS["OAUTH"]:
        account.auth = AccountAuth(
            client_id=client_id,
            client_secret=client_secret,
            token_info=TokenInfo(refresh_token=refresh_token),
        )
    else:
        account.api_key = api_key

    return CLIConfig(
        accounts=[account],
        default_account=account_id,
        env=env,
        http_timeout=_get_int("HTTP_TIMEOUT"),
        http_use_localhost=_get_bool("HTTP_USE_LOCALHOST"),
        default_mode=_get_env("DEFAULT_MODE"),
        allow_usage_tracking=_get_bool("ALLOW_USAGE_TRACKING"),
    )
