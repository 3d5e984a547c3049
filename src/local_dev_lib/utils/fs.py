"""Directory listing helpers."""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class StatType(str, Enum):
    FILE = "file"
    SYMBOLIC_LINK = "symlink"
    DIRECTORY = "dir"


@dataclass
class FileData:
    filepath: str
    type: StatType
    files: list[str] = field(default_factory=list)


def get_file_info(directory: str | Path, file: str) -> FileData:
    """Classify a directory entry without following symlinks."""
    filepath = os.path.join(directory, file)
    path = Path(filepath)
    if path.is_symlink():
        stat_type = StatType.SYMBOLIC_LINK
    elif path.is_dir():
        stat_type = StatType.DIRECTORY
    else:
        stat_type = StatType.FILE
    return FileData(filepath=filepath, type=stat_type)


def flatten_and_remove_symlinks(files_data: list[FileData]) -> list[str]:
    """Flatten entries into file paths, dropping symlinks.

    Directories contribute the files already collected for them.
    """
    result: list[str] = []
    for file_data in files_data:
        if file_data.type == StatType.FILE:
            result.append(file_data.filepath)
        elif file_data.type == StatType.DIRECTORY:
            result.extend(file_data.files)
    return result


def read(directory: str | Path) -> list[str]:
    """List the regular files directly inside a directory.

    Returns an empty list if the directory cannot be read.
    """
    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        logger.debug(f"Unable to read {directory}: {e}")
        return []
    return flatten_and_remove_symlinks([get_file_info(directory, e) for e in entries])


def walk(directory: str | Path) -> list[str]:
    """List all regular files below a directory, skipping symlinks."""
    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        logger.debug(f"Unable to read {directory}: {e}")
        return []
    files_data = []
    for entry in entries:
        file_data = get_file_info(directory, entry)
        if file_data.type == StatType.DIRECTORY:
            file_data.files = walk(file_data.filepath)
        files_data.append(file_data)
    return flatten_and_remove_symlinks(files_data)
