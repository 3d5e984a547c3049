"""Developer app endpoints."""

from ..constants import APPS_DEV_API_PATH
from ..errors import ApiError
from ..http.client import http
from ..http.response import safe_validate
from ..types import PublicApp


def fetch_public_apps(account_id: int) -> list[PublicApp]:
    """List the public apps owned by a developer account."""
    data = http.get(account_id, f"{APPS_DEV_API_PATH}/full/portal")
    if not isinstance(data, dict):
        raise ApiError(0, "Unexpected response format from server for public apps.")
    return [safe_validate(PublicApp, app) for app in data.get("results") or []]
