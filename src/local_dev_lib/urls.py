"""Platform API origin resolution."""

from .constants import API_DOMAIN, API_URL_OVERRIDE, ENVIRONMENTS


def get_env_url_string(env: str | None) -> str:
    """Return the hostname suffix for an environment ("qa" or "")."""
    if isinstance(env, str) and env.lower() == ENVIRONMENTS["QA"]:
        return ENVIRONMENTS["QA"]
    return ""


def get_api_origin(env: str | None = None, use_localhost: bool | None = False) -> str:
    """Build the API origin for an environment.

    Args:
        env: Target environment ("prod" or "qa").
        use_localhost: Route through the local development proxy host.

    Returns:
        Origin URL without a trailing slash.
    """
    if API_URL_OVERRIDE:
        return API_URL_OVERRIDE.rstrip("/")
    subdomain = "local" if use_localhost else "api"
    return f"https://{subdomain}.{API_DOMAIN}{get_env_url_string(env)}.com"
