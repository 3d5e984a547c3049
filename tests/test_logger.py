"""Tests for callback-routed logging and API origin resolution."""

import logging
from unittest.mock import MagicMock, patch

from local_dev_lib.logger import make_typed_logger
from local_dev_lib.urls import get_api_origin, get_env_url_string


def test_callback_receives_context():
    callback = MagicMock()
    log = make_typed_logger({"no_account_id": callback}, "config")
    log("no_account_id", "ignored message", account_name="main")
    callback.assert_called_once_with(account_name="main")


def test_falls_back_to_debug_log(caplog):
    log = make_typed_logger({"other": MagicMock()}, "config")
    with caplog.at_level(logging.DEBUG, logger="local_dev_lib.logger"):
        log("no_config", "No config found", path="/tmp/x")
    assert "config.no_config: No config found {'path': '/tmp/x'}" in caplog.text


def test_env_url_string():
    assert get_env_url_string("QA") == "qa"
    assert get_env_url_string("prod") == ""
    assert get_env_url_string(None) == ""


def test_api_origin():
    assert get_api_origin() == "https://api.hubapi.com"
    assert get_api_origin("qa", use_localhost=True) == "https://local.hubapiqa.com"


def test_api_origin_override():
    with patch("local_dev_lib.urls.API_URL_OVERRIDE", "http://localhost:8080/"):
        assert get_api_origin("qa") == "http://localhost:8080"
