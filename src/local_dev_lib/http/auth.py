"""Per-account request authentication."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import requests

from ..config.cli_configuration import cli_configuration
from ..constants import AUTH_METHODS, OAUTH_TOKEN_API_PATH, TOKEN_REFRESH_MARGIN_SECONDS
from ..errors import ApiError, ConfigError
from ..types import CLIAccount, TokenInfo
from .request_options import build_url, get_request_options
from .response import check_response, request_failure, safe_json

logger = logging.getLogger(__name__)


def token_is_valid(token_info: TokenInfo | None) -> bool:
    """Check that a cached access token exists and is not about to expire."""
    if not token_info or not token_info.access_token or not token_info.expires_at:
        return False
    try:
        expires_at = datetime.fromisoformat(token_info.expires_at.replace("Z", "+00:00"))
    except ValueError:
        return False
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    margin = timedelta(seconds=TOKEN_REFRESH_MARGIN_SECONDS)
    return expires_at - margin > datetime.now(UTC)


def _cached_token(account: CLIAccount) -> TokenInfo | None:
    return account.auth.token_info if account.auth else None


def get_personal_access_key_token(account: CLIAccount) -> str:
    """Get an access token for a personal access key account.

    A cached token is reused until it is close to expiring; otherwise the
    key is exchanged for a new token, which is stored on the account.
    """
    cached = _cached_token(account)
    if token_is_valid(cached):
        return cached.access_token  # type: ignore[union-attr,return-value]

    if not account.personal_access_key:
        raise ConfigError(f"Account {account.account_id} has no personal access key.")

    from ..api.local_dev_auth import fetch_access_token

    logger.debug(f"Refreshing access token for account {account.account_id}")
    response = fetch_access_token(
        account.personal_access_key,
        env=cli_configuration.get_env(account.account_id),
        account_id=account.account_id,
    )
    expires_at = datetime.fromtimestamp(response.expires_at_millis / 1000, UTC)
    token_info = TokenInfo(
        access_token=response.oauth_access_token,
        expires_at=expires_at.isoformat(),
    )
    cli_configuration.update_account(account.account_id, token_info=token_info)
    return response.oauth_access_token


def get_oauth_token(account: CLIAccount) -> str:
    """Get an access token for an OAuth account, refreshing if needed."""
    cached = _cached_token(account)
    if token_is_valid(cached):
        return cached.access_token  # type: ignore[union-attr,return-value]

    auth = account.auth
    has_client = auth is not None and auth.client_id and auth.client_secret
    if not has_client or not cached or not cached.refresh_token:
        raise ConfigError(
            f"Account {account.account_id} is missing OAuth client credentials "
            "or a refresh token."
        )

    env = cli_configuration.get_env(account.account_id)
    options = get_request_options(env=env)
    url = build_url(options["base_url"], OAUTH_TOKEN_API_PATH)
    logger.debug(f"Refreshing OAuth token for account {account.account_id}")
    try:
        response = requests.post(
            url,
            headers=options["headers"],
            data={
                "grant_type": "refresh_token",
                "client_id": auth.client_id,
                "client_secret": auth.client_secret,
                "refresh_token": cached.refresh_token,
            },
            timeout=options["timeout"] / 1000,
        )
    except requests.exceptions.RequestException as e:
        raise request_failure(e) from e
    check_response(response, account_id=account.account_id, request=OAUTH_TOKEN_API_PATH)

    data = safe_json(response)
    access_token = data.get("access_token")
    if not access_token:
        raise ApiError(500, "Invalid response from auth server: missing token.")
    expires_at = datetime.now(UTC) + timedelta(seconds=int(data.get("expires_in", 0)))
    cli_configuration.update_account(
        account.account_id,
        token_info=TokenInfo(
            access_token=access_token,
            refresh_token=data.get("refresh_token") or cached.refresh_token,
            expires_at=expires_at.isoformat(),
        ),
    )
    return access_token


def get_auth_options(account: CLIAccount) -> tuple[dict[str, str], dict[str, Any]]:
    """Build auth headers and query parameters for an account.

    Returns:
        Tuple of (headers, params) to merge into the request.

    Raises:
        ConfigError: If the account has no supported auth type.
    """
    if account.auth_type == AUTH_METHODS["PERSONAL_ACCESS_KEY"]:
        token = get_personal_access_key_token(account)
        return {"Authorization": f"Bearer {token}"}, {}
    if account.auth_type == AUTH_METHODS["OAUTH"]:
        token = get_oauth_token(account)
        return {"Authorization": f"Bearer {token}"}, {}
    if account.auth_type == AUTH_METHODS["API_KEY"] and account.api_key:
        return {}, {"hapikey": account.api_key}
    raise ConfigError(
        f"Account {account.account_id} has no supported authentication method."
    )
