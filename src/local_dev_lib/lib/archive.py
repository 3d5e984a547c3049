"""Zip archive extraction into a destination directory."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path

from ..errors import ArchiveError, FileSystemError
from ..logger import LogCallbacks, make_typed_logger

logger = logging.getLogger(__name__)

TMP_ZIP_NAME = "local-dev-temp.zip"


@dataclass
class ZipData:
    extract_dir: Path
    tmp_dir: Path


def _extract_zip(
    name: str, zip_bytes: bytes, log_callbacks: LogCallbacks | None = None
) -> ZipData:
    """Write zip bytes into a fresh temp directory and extract them there.

    Raises:
        FileSystemError: If the temp directory or zip file cannot be written.
        ArchiveError: If the bytes are not a valid zip archive.
    """
    log = make_typed_logger(log_callbacks, "lib.archive")
    log("init", "Extracting project source")

    try:
        tmp_dir = Path(tempfile.mkdtemp(prefix=f"local-dev-temp-{name}-"))
    except OSError as e:
        raise FileSystemError(tempfile.gettempdir(), write=True, reason=str(e)) from e

    tmp_zip_path = tmp_dir / TMP_ZIP_NAME
    extract_dir = tmp_dir / "extracted"
    try:
        tmp_zip_path.write_bytes(zip_bytes)
    except OSError as e:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise FileSystemError(str(tmp_zip_path), write=True, reason=str(e)) from e

    try:
        extract_dir.mkdir()
        with zipfile.ZipFile(tmp_zip_path) as zf:
            zf.extractall(extract_dir)
    except (zipfile.BadZipFile, OSError) as e:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise ArchiveError(f"An error occurred extracting the project source: {e}") from e

    logger.debug(f"Extracted {name} archive to {extract_dir}")
    return ZipData(extract_dir=extract_dir, tmp_dir=tmp_dir)


def _copy_source_to_dest(
    src: Path,
    dest: Path,
    source_dir: str | None = None,
    includes_root_dir: bool = True,
    log_callbacks: LogCallbacks | None = None,
) -> bool:
    """Copy extracted sources into ``dest``.

    Archives from GitHub wrap everything in a single root directory, which
    is skipped when ``includes_root_dir`` is set.

    Raises:
        FileSystemError: If copying fails.
    """
    log = make_typed_logger(log_callbacks, "lib.archive")
    log("copy", "Copying project source")
    try:
        project_src_dir = src
        if includes_root_dir:
            entries = sorted(os.listdir(src))
            if not entries:
                logger.debug("Archive is empty, nothing to copy")
                dest.mkdir(parents=True, exist_ok=True)
                return True
            project_src_dir = project_src_dir / entries[0]

        if source_dir:
            project_src_dir = project_src_dir / source_dir

        shutil.copytree(project_src_dir, dest, dirs_exist_ok=True)
    except OSError as e:
        logger.debug(f"Failed to copy project source to {dest}")
        raise FileSystemError(str(dest), write=True, reason=str(e)) from e

    logger.debug(f"Copied project source to {dest}")
    return True


def _cleanup_temp_dir(tmp_dir: Path | None) -> None:
    if not tmp_dir:
        return
    try:
        shutil.rmtree(tmp_dir)
    except OSError:
        logger.debug(f"Failed to clean up temp dir {tmp_dir}")


def extract_zip_archive(
    zip_bytes: bytes,
    name: str,
    dest: str | Path,
    source_dir: str | None = None,
    includes_root_dir: bool = True,
    log_callbacks: LogCallbacks | None = None,
) -> bool:
    """Extract a zip archive and copy its contents to ``dest``.

    Args:
        zip_bytes: Raw zip archive contents.
        name: Short name used in the temp directory prefix.
        dest: Destination directory; merged into if it exists.
        source_dir: Subdirectory of the archive to copy instead of its root.
        includes_root_dir: Whether the archive wraps its contents in a
            single top-level directory.
        log_callbacks: Optional "init" and "copy" progress callbacks.

    Returns:
        True if sources were copied, False if there was nothing to extract.

    Raises:
        FileSystemError: If writing the archive or copying sources fails.
        ArchiveError: If the archive cannot be extracted.
    """
    if not zip_bytes:
        return False

    zip_data = _extract_zip(name, zip_bytes, log_callbacks)
    try:
        return _copy_source_to_dest(
            zip_data.extract_dir,
            Path(dest),
            source_dir=source_dir,
            includes_root_dir=includes_root_dir,
            log_callbacks=log_callbacks,
        )
    finally:
        _cleanup_temp_dir(zip_data.tmp_dir)
