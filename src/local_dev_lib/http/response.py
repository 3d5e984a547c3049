"""Translation of HTTP responses and transport failures into ApiError."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..errors import ApiError, build_api_error_message


def _error_body(response: requests.Response) -> dict[str, Any]:
    try:
        body = response.json() if response.content else {}
    except (json.JSONDecodeError, ValueError):
        return {}
    return body if isinstance(body, dict) else {}


def check_response(
    response: requests.Response,
    account_id: int | None = None,
    request: str | None = None,
    payload: str | None = None,
    project_name: str | None = None,
) -> requests.Response:
    """Return the response unchanged, or raise ApiError for 4xx/5xx.

    Raises:
        ApiError: With a message composed from the status code, the request
            context and the error body.
    """
    if response.status_code < 400:
        return response

    method = response.request.method if response.request is not None else None
    try:
        body = _error_body(response)
    finally:
        # Release the connection of streamed responses
        response.close()
    message = build_api_error_message(
        response.status_code,
        body,
        method=method,
        account_id=account_id,
        request=request,
        payload=payload,
        project_name=project_name,
    )
    raise ApiError(response.status_code, message, body, method=method)


def request_failure(error: requests.exceptions.RequestException) -> ApiError:
    """Map a transport-level requests exception to an ApiError."""
    if isinstance(error, requests.exceptions.SSLError):
        return ApiError(0, "SSL certificate verification failed")
    if isinstance(error, requests.exceptions.ConnectionError):
        return ApiError(0, "Cannot connect to the API")
    if isinstance(error, requests.exceptions.Timeout):
        return ApiError(0, "Request timed out")
    return ApiError(0, "Network request failed")


def safe_json(response: requests.Response) -> Any:
    """Parse JSON from a response, raising ApiError on failure."""
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError) as e:
        raise ApiError(
            response.status_code,
            "Unexpected response from server. Please try again.",
        ) from e


_T = TypeVar("_T", bound=BaseModel)


def safe_validate(model_cls: type[_T], data: Any, status_code: int = 0) -> _T:
    """Validate response data against a model, raising ApiError on failure."""
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise ApiError(
            status_code,
            f"Unexpected response format from server for {model_cls.__name__}.",
        ) from e
