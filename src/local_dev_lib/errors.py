"""Exception classes for the local dev library."""

from __future__ import annotations

import json
from typing import Any

from .constants import HTTP_METHOD_PREPOSITIONS, HTTP_METHOD_VERBS


class LocalDevError(Exception):
    """Base exception for all local dev library errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(LocalDevError):
    """Invalid configuration or an invalid configuration update."""


class FileSystemError(LocalDevError):
    """A filesystem read or write failed.

    Attributes:
        filepath: Path that was being read or written.
        write: True if the failing operation was a write.
    """

    def __init__(self, filepath: str, write: bool = False, reason: str = "") -> None:
        self.filepath = str(filepath)
        self.write = write
        action = "write to" if write else "read from"
        message = f"An error occurred while attempting to {action} {self.filepath}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ArchiveError(LocalDevError):
    """A zip archive could not be written or extracted."""


class GithubError(LocalDevError):
    """A GitHub request failed."""


class ApiError(LocalDevError):
    """Error returned from the platform API.

    Attributes:
        status_code: HTTP status code (0 for transport failures).
        message: Human readable error message.
        details: Parsed error body from the API.
        method: HTTP method of the failing request.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
        method: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.details = details or {}
        self.method = method
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"

    @property
    def category(self) -> str | None:
        return self.details.get("category")

    @property
    def sub_category(self) -> str | None:
        return self.details.get("subCategory")

    @property
    def is_missing_scope_error(self) -> bool:
        return self.status_code == 403 and self.category == "MISSING_SCOPES"

    @property
    def is_gating_error(self) -> bool:
        return self.status_code == 403 and self.category == "GATED"

    @property
    def is_upload_validation_error(self) -> bool:
        return self.status_code == 400 and bool(
            self.details.get("message") or self.details.get("errors")
        )

    @property
    def is_retryable(self) -> bool:
        # 429 Too Many Requests, 500+ Server Errors
        return self.status_code == 429 or self.status_code >= 500


def parse_validation_errors(body: dict[str, Any] | None) -> list[str]:
    """Collect messages from a validation error body.

    Args:
        body: Error body with optional ``message`` and ``errors`` keys.

    Returns:
        List of messages, nested errors prefixed with their line when known.
    """
    if not body:
        return []
    messages: list[str] = []
    if body.get("message"):
        messages.append(body["message"])
    for error in body.get("errors") or []:
        message = error.get("message", "")
        line = (error.get("errorTokens") or {}).get("line")
        if line:
            message = f"line {line}: {message}"
        messages.append(message)
    return messages


def build_api_error_message(
    status_code: int,
    body: dict[str, Any] | None = None,
    method: str | None = None,
    account_id: int | None = None,
    request: str | None = None,
    payload: str | None = None,
    project_name: str | None = None,
) -> str:
    """Compose a readable message for a failed API request.

    Args:
        status_code: HTTP status code of the response.
        body: Parsed JSON error body, if any.
        method: HTTP method of the request.
        account_id: Account the request was made against.
        request: Short description of what was requested (e.g. a path).
        payload: Name of the uploaded item for POST/PUT requests.
        project_name: Set when the request was made for a project command.

    Returns:
        The composed error message.
    """
    body = body or {}
    method = method.upper() if method else None
    action = HTTP_METHOD_VERBS.get(method, HTTP_METHOD_VERBS["DEFAULT"]) if method else None
    preposition = (
        HTTP_METHOD_PREPOSITIONS.get(method) if method else None
    ) or HTTP_METHOD_PREPOSITIONS["DEFAULT"]

    described = f'{action} {preposition} "{request}"' if request else action
    if described and account_id:
        detail = f"{described} in account {account_id}"
    else:
        detail = "request"

    parts: list[str] = []
    if method in ("PUT", "POST") and payload:
        parts.append(f'Unable to upload "{payload}".')

    is_403 = status_code == 403
    missing_scope = is_403 and body.get("category") == "MISSING_SCOPES" and project_name
    gated = is_403 and body.get("category") == "GATED" and project_name

    if status_code == 400:
        parts.append(f"The {detail} was bad.")
    elif status_code == 401:
        parts.append(f"The {detail} was unauthorized.")
    elif missing_scope:
        parts.append(
            "Couldn't run the project command because there are scopes missing "
            f"in your production account {account_id or ''}. Generate a new "
            "personal access key and re-authenticate."
        )
    elif gated:
        parts.append(
            f"The current target account {account_id or ''} does not have "
            "access to projects."
        )
    elif is_403:
        parts.append(f"The {detail} was forbidden.")
    elif status_code == 404:
        if request:
            parts.append(
                f'The {action or "request"} failed because "{request}" was not '
                f"found in account {account_id or ''}."
            )
        else:
            parts.append(f"The {detail} was not found.")
    elif status_code == 429:
        parts.append(f"The {detail} surpassed the rate limit. Retry in one minute.")
    elif status_code == 503:
        parts.append(
            f"The {detail} could not be handled at this time. Please try again "
            "if the problem persists."
        )
    elif 500 <= status_code < 600:
        parts.append(f"The {detail} failed due to a server error. Please try again.")
    elif 400 <= status_code < 500:
        parts.append(f"The {detail} failed due to a client error.")
    else:
        parts.append(f"The {detail} failed.")

    if body.get("message") and not missing_scope and not gated:
        message = body["message"]
        if not isinstance(message, str):
            message = json.dumps(message)
        parts.append(message)
    for error in body.get("errors") or []:
        parts.append(f"\n- {error.get('message', '')}")

    return " ".join(parts)
