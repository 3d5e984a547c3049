"""Shared constants for the local dev library."""

import os
from importlib.metadata import version
from pathlib import Path

ENVIRONMENTS = {
    "PROD": "prod",
    "QA": "qa",
}

AUTH_METHODS = {
    "PERSONAL_ACCESS_KEY": "personalaccesskey",
    "OAUTH": "oauth2",
    "API_KEY": "apikey",
}

DEFAULT_MODES = {
    "publish": "publish",
    "draft": "draft",
}

# Milliseconds
MIN_HTTP_TIMEOUT = 3000
DEFAULT_HTTP_TIMEOUT = 15000

# Refresh access tokens this long before they expire
TOKEN_REFRESH_MARGIN_SECONDS = 5 * 60

CONFIG_DIR = Path.home() / ".local-dev"
CONFIG_FILE = Path(os.environ.get("LOCAL_DEV_CONFIG_PATH", CONFIG_DIR / "config.yml"))

ENV_PREFIX = "LOCAL_DEV_"

API_DOMAIN = "hubapi"
# Overrides the computed API origin entirely (e.g. a local mock server)
API_URL_OVERRIDE = os.environ.get("LOCAL_DEV_API_URL")

USER_AGENT = f"Local Dev Lib/{version('local-dev-lib')}"

HTTP_METHOD_VERBS = {
    "DEFAULT": "request",
    "DELETE": "delete",
    "GET": "request",
    "PATCH": "update",
    "POST": "post",
    "PUT": "update",
}

HTTP_METHOD_PREPOSITIONS = {
    "DEFAULT": "for",
    "DELETE": "of",
    "GET": "for",
    "PATCH": "to",
    "POST": "to",
    "PUT": "to",
}

# ==================== API PATHS ====================

LOCAL_DEV_AUTH_API_PATH = "localdevauth/v1/auth"
OAUTH_TOKEN_API_PATH = "oauth/v1/token"
FILE_MAPPER_API_PATH = "content/filemapper/v1"
HUBFILES_API_PATH = "file-transport/v1/hubfiles"
APPS_DEV_API_PATH = "apps-dev/external/public/v3"

GITHUB_API_URL = "https://api.github.com"
GITHUB_RAW_CONTENT_URL = "https://raw.githubusercontent.com"
