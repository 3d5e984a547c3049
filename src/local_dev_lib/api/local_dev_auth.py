"""Local development auth endpoints."""

from __future__ import annotations

import requests

from ..constants import ENVIRONMENTS, LOCAL_DEV_AUTH_API_PATH
from ..http.client import http
from ..http.request_options import build_url, get_request_options
from ..http.response import (
    check_response,
    request_failure,
    safe_json,
    safe_validate,
)
from ..types import AccessTokenResponse, ScopeData


def fetch_access_token(
    personal_access_key: str,
    env: str = ENVIRONMENTS["PROD"],
    account_id: int | None = None,
) -> AccessTokenResponse:
    """Exchange a personal access key for an OAuth access token.

    This request is unauthenticated and always goes to the public API host.

    Args:
        personal_access_key: Encoded personal access key.
        env: Target environment.
        account_id: Portal to scope the token to.

    Returns:
        Access token response.
    """
    options = get_request_options(env=env, localhost_override=True)
    path = f"{LOCAL_DEV_AUTH_API_PATH}/refresh"
    params = {"portalId": account_id} if account_id else {}
    try:
        response = requests.post(
            build_url(options["base_url"], path),
            headers=options["headers"],
            json={"encodedOAuthRefreshToken": personal_access_key},
            params=params,
            timeout=options["timeout"] / 1000,
        )
    except requests.exceptions.RequestException as e:
        raise request_failure(e) from e
    check_response(response, account_id=account_id, request=path)
    return safe_validate(AccessTokenResponse, safe_json(response), response.status_code)


def fetch_scope_data(account_id: int, scope_group: str) -> ScopeData:
    """Fetch the portal and user scopes available within a scope group."""
    data = http.get(
        account_id,
        f"{LOCAL_DEV_AUTH_API_PATH}/check-scopes",
        params={"scopeGroup": scope_group},
    )
    return safe_validate(ScopeData, data)
