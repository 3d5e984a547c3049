"""Tests for the platform API wrappers."""

from unittest.mock import patch

import pytest
from conftest import make_config_dict, make_response

from local_dev_lib.api.apps_dev import fetch_public_apps
from local_dev_lib.api.file_transport import (
    create_schema_from_hub_file,
    fetch_hub_file_schema,
    update_schema_from_hub_file,
)
from local_dev_lib.api.local_dev_auth import fetch_access_token, fetch_scope_data
from local_dev_lib.errors import ApiError, FileSystemError


class TestLocalDevAuth:
    """Tests for the personal access key endpoints."""

    def test_fetch_access_token(self, loaded_config):
        body = {
            "hubId": 123,
            "oauthAccessToken": "token",
            "expiresAtMillis": 1700000000000,
            "scopeGroups": ["cms"],
        }
        response = make_response(200, body, method="POST")
        with patch("requests.post", return_value=response) as post:
            token = fetch_access_token("pak", env="qa", account_id=123)

        assert token.oauth_access_token == "token"
        assert token.scope_groups == ["cms"]
        args, kwargs = post.call_args
        assert args[0] == "https://api.hubapiqa.com/localdevauth/v1/auth/refresh"
        assert kwargs["json"] == {"encodedOAuthRefreshToken": "pak"}
        assert kwargs["params"] == {"portalId": 123}

    def test_ignores_localhost(self, write_config):
        write_config(make_config_dict(httpUseLocalhost=True))
        response = make_response(
            200,
            {"hubId": 1, "oauthAccessToken": "t", "expiresAtMillis": 0},
            method="POST",
        )
        with patch("requests.post", return_value=response) as post:
            fetch_access_token("pak")
        assert post.call_args.args[0].startswith("https://api.hubapi.com/")

    def test_rejected_key(self, loaded_config):
        response = make_response(401, {"message": "Invalid key"}, method="POST")
        with patch("requests.post", return_value=response):
            with pytest.raises(ApiError) as exc_info:
                fetch_access_token("bad")
        assert exc_info.value.status_code == 401

    def test_fetch_scope_data(self, loaded_config):
        with patch(
            "local_dev_lib.api.local_dev_auth.http.get",
            return_value={"portalScopesInGroup": ["a"], "userScopesInGroup": []},
        ) as get:
            scopes = fetch_scope_data(456, "cms")

        assert scopes.portal_scopes_in_group == ["a"]
        get.assert_called_once_with(
            456, "localdevauth/v1/auth/check-scopes", params={"scopeGroup": "cms"}
        )


class TestFileTransport:
    """Tests for object schema file transport."""

    def test_create_and_update(self, loaded_config, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "schema.json").write_text("{}")

        with patch("local_dev_lib.api.file_transport.http") as http:
            http.post.return_value = {"id": "1"}
            assert create_schema_from_hub_file(456, "schema.json") == {"id": "1"}
            update_schema_from_hub_file(456, "schema.json")

        args, kwargs = http.post.call_args
        assert args == (456, "file-transport/v1/hubfiles/object-schemas")
        assert kwargs["files"]["file"][0] == "schema.json"
        assert http.put.call_args.args[0] == 456

    def test_missing_file(self, loaded_config, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileSystemError):
            create_schema_from_hub_file(456, "missing.json")

    def test_fetch_schema(self, loaded_config, tmp_path):
        with patch("local_dev_lib.api.file_transport.http") as http:
            fetch_hub_file_schema(456, "cars", tmp_path / "cars.json")
        http.get_octet_stream.assert_called_once_with(
            456,
            "file-transport/v1/hubfiles/object-schemas/cars",
            tmp_path / "cars.json",
        )


def test_fetch_public_apps(loaded_config):
    data = {"results": [{"id": 1, "name": "App", "portalId": 456, "clientId": "c"}]}
    with patch("local_dev_lib.api.apps_dev.http.get", return_value=data) as get:
        apps = fetch_public_apps(456)

    get.assert_called_once_with(456, "apps-dev/external/public/v3/full/portal")
    assert apps[0].name == "App"
    assert apps[0].client_id == "c"


class TestMalformedResponses:
    """Responses that do not match the expected shape raise ApiError."""

    def test_access_token(self, loaded_config):
        response = make_response(200, {}, method="POST")
        with patch("requests.post", return_value=response):
            with pytest.raises(ApiError) as exc_info:
                fetch_access_token("pak", account_id=123)
        assert exc_info.value.status_code == 200
        assert "AccessTokenResponse" in exc_info.value.message

    def test_scope_data(self, loaded_config):
        with patch(
            "local_dev_lib.api.local_dev_auth.http.get",
            return_value={"portalScopesInGroup": "not-a-list"},
        ):
            with pytest.raises(ApiError):
                fetch_scope_data(456, "cms")

    def test_public_apps(self, loaded_config):
        with patch(
            "local_dev_lib.api.apps_dev.http.get",
            return_value={"results": [{"name": "missing id"}]},
        ):
            with pytest.raises(ApiError):
                fetch_public_apps(456)

    def test_public_apps_not_a_mapping(self, loaded_config):
        with patch("local_dev_lib.api.apps_dev.http.get", return_value=["x"]):
            with pytest.raises(ApiError):
                fetch_public_apps(456)
