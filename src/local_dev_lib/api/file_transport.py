"""File transport endpoints for object schema files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..constants import HUBFILES_API_PATH
from ..errors import FileSystemError
from ..http.client import http


def _upload_schema(method: str, account_id: int, filepath: str | Path) -> Any:
    path = Path.cwd() / filepath
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileSystemError(str(path), write=False, reason=str(e)) from e
    with f:
        send = http.post if method == "POST" else http.put
        return send(
            account_id,
            f"{HUBFILES_API_PATH}/object-schemas",
            files={"file": (path.name, f, "application/octet-stream")},
        )


def create_schema_from_hub_file(account_id: int, filepath: str | Path) -> Any:
    """Create an object schema from a local schema file."""
    return _upload_schema("POST", account_id, filepath)


def update_schema_from_hub_file(account_id: int, filepath: str | Path) -> Any:
    """Replace an object schema with a local schema file."""
    return _upload_schema("PUT", account_id, filepath)


def fetch_hub_file_schema(
    account_id: int, object_name: str, dest_path: str | Path
) -> Path:
    """Download an object schema file to ``dest_path``."""
    return http.get_octet_stream(
        account_id,
        f"{HUBFILES_API_PATH}/object-schemas/{object_name}",
        dest_path,
    )
