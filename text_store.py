from __future__ import annotations

import logging
import os
from pathlib import Path

from datafile.errors import BlankPathError, DataFileNotFoundError, NotReadableError, PathIsDirectoryError

logger = logging.getLogger(__name__)


def _require_path(path: str | Path | None) -> Path:
    if path is None or not str(path).strip():
        raise BlankPathError()
    return Path(path)


def read_text(path: str | Path | None, *, encoding: str = "utf-8") -> str:
    """
    Read a text file from disk.

    Unlike a best-effort loader, every failure is raised to the caller:
    blank path, missing path, directory, non-regular or unreadable file.
    """
    p = _require_path(path)
    if not p.exists():
        raise DataFileNotFoundError(p)
    if p.is_dir():
        raise PathIsDirectoryError(p)
    if not p.is_file():
        raise NotReadableError(p, "is not a regular file")
    if not os.access(p, os.R_OK):
        raise NotReadableError(p)
    try:
        return p.read_text(encoding=encoding)
    except PermissionError as e:
        raise NotReadableError(p) from e
    except UnicodeDecodeError as e:
        raise NotReadableError(p, f"is not valid {encoding}") from e


def write_text(
    path: str | Path | None,
    text: str,
    *,
    append: bool = False,
    encoding: str = "utf-8",
    log_created: bool = True,
) -> None:
    """
    Write text to disk, creating the file (and its parent dirs) when absent.

    Overwrites atomically by writing to a temp file then replacing, unless
    append is set. There is no locking; concurrent writers to the same path
    are not coordinated.
    """
    p = _require_path(path)
    if p.is_dir():
        raise PathIsDirectoryError(p)

    created = not p.exists()
    p.parent.mkdir(parents=True, exist_ok=True)
    if append:
        with p.open("a", encoding=encoding, newline="") as f:
            f.write(text)
    else:
        tmp_path = p.with_suffix(p.suffix + ".tmp")
        with tmp_path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
        tmp_path.replace(p)

    if created and log_created:
        logger.info("FILE CREATED: %s", p.name)
