"""Shared fixtures for local_dev_lib tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import patch

import pytest
import requests
import yaml

from local_dev_lib.config.cli_configuration import cli_configuration
from local_dev_lib.config.environment import ENVIRONMENT_VARIABLES
from local_dev_lib.types import CLIOptions


def make_response(
    status_code: int = 200,
    body: Any = None,
    method: str = "GET",
    url: str = "https://api.hubapi.com/test",
    content: bytes | None = None,
) -> requests.Response:
    """Build a real requests.Response for mocked transports."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = {200: "OK", 400: "Bad Request", 404: "Not Found"}.get(
        status_code, ""
    )
    if content is not None:
        response._content = content
    elif body is not None:
        response._content = json.dumps(body).encode()
    else:
        response._content = b""
    response._content_consumed = True
    response.request = requests.Request(method, url).prepare()
    response.url = url
    return response


def make_config_dict(**overrides: Any) -> dict[str, Any]:
    """Config file contents with two accounts, the first being the default."""
    config = {
        "defaultAccount": "prod-account",
        "accounts": [
            {
                "accountId": 123,
                "name": "prod-account",
                "env": "prod",
                "authType": "personalaccesskey",
                "personalAccessKey": "pak-123",
            },
            {
                "accountId": 456,
                "name": "qa-account",
                "env": "qa",
                "authType": "apikey",
                "apiKey": "api-key-456",
            },
        ],
    }
    config.update(overrides)
    return config


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    """Point the config file at a temp path and reset shared config state."""
    for name in ENVIRONMENT_VARIABLES.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("DO_NOT_TRACK", raising=False)
    monkeypatch.delenv("LOCAL_DEV_DO_NOT_TRACK", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    path = tmp_path / ".local-dev" / "config.yml"
    cli_configuration.options = CLIOptions()
    cli_configuration.use_env_config = False
    cli_configuration.config = None
    with patch("local_dev_lib.config.config_file.CONFIG_FILE", path):
        yield path
    cli_configuration.options = CLIOptions()
    cli_configuration.use_env_config = False
    cli_configuration.config = None


@pytest.fixture
def write_config(config_path):
    """Write a config dict to the temp config file."""

    def _write(data: dict[str, Any] | None = None):
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(yaml.safe_dump(data or make_config_dict()))
        return config_path

    return _write


@pytest.fixture
def loaded_config(write_config):
    """Shared configuration loaded from the default two-account config file."""
    write_config()
    cli_configuration.init()
    return cli_configuration
