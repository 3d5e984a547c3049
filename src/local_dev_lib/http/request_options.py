"""Base request options derived from the loaded configuration."""

from typing import Any

from ..config.cli_configuration import cli_configuration
from ..constants import DEFAULT_HTTP_TIMEOUT, USER_AGENT
from ..urls import get_api_origin

DEFAULT_USER_AGENT_HEADERS = {
    "User-Agent": USER_AGENT,
}


def get_request_options(
    env: str | None = None,
    localhost_override: bool = False,
    **request_options: Any,
) -> dict[str, Any]:
    """Assemble base URL, headers, and timeout for a platform request.

    Args:
        env: Target environment; defaults to production.
        localhost_override: Ignore the configured localhost routing.
        **request_options: Values that override the computed options.

    Returns:
        Options dict with ``base_url``, ``headers`` and ``timeout`` (ms).
    """
    config = cli_configuration.get_and_load_config_if_needed()
    use_localhost = False if localhost_override else bool(config.http_use_localhost)
    options: dict[str, Any] = {
        "base_url": get_api_origin(env, use_localhost),
        "headers": dict(DEFAULT_USER_AGENT_HEADERS),
        "timeout": config.http_timeout or DEFAULT_HTTP_TIMEOUT,
    }
    options.update(request_options)
    return options


def build_url(base_url: str, path: str) -> str:
    """Join an API path onto a base URL; absolute URLs pass through."""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
