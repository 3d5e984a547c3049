"""Authenticated HTTP client for platform API calls made on behalf of an account."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from ..config.cli_configuration import cli_configuration
from ..errors import ApiError, FileSystemError
from .auth import get_auth_options
from .request_options import build_url, get_request_options
from .response import check_response, request_failure, safe_json

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client that resolves account config and auth for every request."""

    def __init__(self) -> None:
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        account_id: int,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        stream: bool = False,
        timeout: int | None = None,
    ) -> requests.Response:
        """Make an authenticated request for an account.

        Args:
            method: HTTP method.
            account_id: Account the request is made for.
            url: API path relative to the platform origin, or an absolute URL.
            params: URL query parameters.
            json_data: JSON body data.
            data: Form data.
            files: Files for multipart upload.
            headers: Extra request headers.
            stream: Whether to stream the response.
            timeout: Timeout in milliseconds, overriding the configured one.

        Returns:
            Response object.

        Raises:
            ApiError: On API errors or connection issues.
            ConfigError: If the account is not configured for auth.
        """
        cli_configuration.get_and_load_config_if_needed()
        account = cli_configuration.get_account(account_id)
        if account is None:
            raise ApiError(401, f"Account {account_id} not found in config.")

        options = get_request_options(env=cli_configuration.get_env(account_id))
        auth_headers, auth_params = get_auth_options(account)

        request_headers = {**options["headers"], **auth_headers, **(headers or {})}
        request_params = {"portalId": account_id, **auth_params, **(params or {})}
        full_url = build_url(options["base_url"], url)
        timeout_ms = timeout or options["timeout"]

        logger.debug(f"{method} {full_url} (account {account_id})")
        try:
            response = self._session.request(
                method,
                full_url,
                headers=request_headers,
                params=request_params,
                json=json_data,
                data=data,
                files=files,
                stream=stream,
                timeout=timeout_ms / 1000,
            )
        except requests.exceptions.RequestException as e:
            raise request_failure(e) from e

        return check_response(response, account_id=account_id, request=url)

    def get(self, account_id: int, url: str, **kwargs: Any) -> Any:
        """GET a JSON resource."""
        return safe_json(self._request("GET", account_id, url, **kwargs))

    def post(self, account_id: int, url: str, **kwargs: Any) -> Any:
        """POST and return the JSON response body (None when empty)."""
        return self._json_or_none(self._request("POST", account_id, url, **kwargs))

    def put(self, account_id: int, url: str, **kwargs: Any) -> Any:
        """PUT and return the JSON response body (None when empty)."""
        return self._json_or_none(self._request("PUT", account_id, url, **kwargs))

    def patch(self, account_id: int, url: str, **kwargs: Any) -> Any:
        """PATCH and return the JSON response body (None when empty)."""
        return self._json_or_none(self._request("PATCH", account_id, url, **kwargs))

    def delete(self, account_id: int, url: str, **kwargs: Any) -> None:
        self._request("DELETE", account_id, url, **kwargs)

    def get_octet_stream(
        self, account_id: int, url: str, dest_path: str | Path, **kwargs: Any
    ) -> Path:
        """Download a binary resource to a file.

        Args:
            account_id: Account the request is made for.
            url: API path.
            dest_path: File to write; parent directories are created.

        Returns:
            The path written.

        Raises:
            FileSystemError: If the destination cannot be written.
        """
        headers = {"Accept": "application/octet-stream", **kwargs.pop("headers", {})}
        response = self._request(
            "GET", account_id, url, headers=headers, stream=True, **kwargs
        )
        dest = Path(dest_path)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with open(dest, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    f.write(chunk)
        except OSError as e:
            raise FileSystemError(str(dest), write=True, reason=str(e)) from e
        finally:
            response.close()
        logger.debug(f"Wrote {url} to {dest}")
        return dest

    @staticmethod
    def _json_or_none(response: requests.Response) -> Any:
        if not response.content:
            return None
        return safe_json(response)


http = HttpClient()
