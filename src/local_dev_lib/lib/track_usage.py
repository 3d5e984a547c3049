"""Anonymous usage reporting for local dev tooling."""

import logging
import os
from typing import Any

import requests

from ..config.cli_configuration import cli_configuration
from ..constants import AUTH_METHODS, FILE_MAPPER_API_PATH
from ..errors import LocalDevError
from ..http.client import http
from ..http.request_options import build_url, get_request_options

logger = logging.getLogger(__name__)

EVENT_TYPES = {
    "CLI_INTERACTION": "cli-interaction",
    "VSCODE_EXTENSION_INTERACTION": "vscode-extension-interaction",
}

ANALYTICS_ENDPOINTS = {
    EVENT_TYPES["CLI_INTERACTION"]: "cms-cli-usage",
    EVENT_TYPES["VSCODE_EXTENSION_INTERACTION"]: "vscode-extension-usage",
}


def _is_disabled() -> bool:
    """Check if tracking is disabled via config or environment variable."""
    if os.getenv("LOCAL_DEV_DO_NOT_TRACK") or os.getenv("DO_NOT_TRACK"):
        return True
    config = cli_configuration.get_and_load_config_if_needed()
    return config is not None and config.allow_usage_tracking is False


def track_usage(
    event_name: str,
    event_class: str,
    meta: dict[str, Any] | None = None,
    account_id: int | None = None,
) -> None:
    """Report a usage event.

    Events for personal access key accounts are sent authenticated; all
    others are sent anonymously to the account's environment. Failures are
    logged and never raised.

    Args:
        event_name: One of the EVENT_TYPES values.
        event_class: Event classification (e.g. "INTERACTION").
        meta: Optional event properties.
        account_id: Account the event relates to.
    """
    try:
        disabled = _is_disabled()
    except LocalDevError as e:
        logger.debug(f"Usage tracking skipped, config could not be loaded: {e}")
        return
    if disabled:
        logger.debug("Usage tracking disabled, skipping event")
        return

    endpoint = ANALYTICS_ENDPOINTS.get(event_name)
    if endpoint is None:
        logger.debug(f"Usage tracking event {event_name} is not a valid event type")
        return

    usage_event = {
        "accountId": account_id,
        "eventName": event_name,
        "eventClass": event_class,
        "meta": meta or {},
    }
    path = f"{FILE_MAPPER_API_PATH}/{endpoint}"

    try:
        account = cli_configuration.get_account(account_id) if account_id else None
        if account and account.auth_type == AUTH_METHODS["PERSONAL_ACCESS_KEY"]:
            logger.debug("Sending usage event authenticated")
            http.post(account_id, f"{path}/authenticated", json_data=usage_event)
            return

        options = get_request_options(env=cli_configuration.get_env(account_id))
        logger.debug("Sending usage event unauthenticated")
        requests.post(
            build_url(options["base_url"], path),
            headers=options["headers"],
            json=usage_event,
            timeout=options["timeout"] / 1000,
        )
    except (LocalDevError, requests.exceptions.RequestException) as e:
        # Tracking must never break the calling command
        logger.debug(f"Usage tracking failed: {e}")
