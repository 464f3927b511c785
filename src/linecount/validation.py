"""Pre-count validation pipeline.

Checks run in a fixed order: path syntax, existence, directory, size. The
first failing check raises and nothing after it runs. Only metadata is read
here; file content is never opened.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from linecount.constants.limits import MAX_FILE_SIZE
from linecount.exceptions import (
    FileMissingError,
    FileTooLargeError,
    InvalidPathError,
    IsDirectoryError,
    LineCounterIOError,
    PermissionDeniedError,
)
from linecount.model import FileMetadata

logger = logging.getLogger(__name__)


def validate_file(candidate: str | Path) -> FileMetadata:
    """Run every check against *candidate* and return its metadata."""
    path = ensure_valid_path(candidate)
    status = ensure_exists(path)
    ensure_not_directory(path, status)
    ensure_size_within_limit(path, status.st_size)
    logger.debug("Validated %s (%d bytes)", path, status.st_size)
    return FileMetadata(path=path, size=status.st_size)


def ensure_valid_path(candidate: str | Path) -> Path:
    """Reject path strings the platform cannot represent."""
    raw = os.fspath(candidate)
    if not raw or "\x00" in raw:
        raise InvalidPathError(raw)
    return Path(raw)


def ensure_exists(path: Path) -> os.stat_result:
    """Return the stat result for *path*, following symlinks."""
    try:
        return path.stat()
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise FileMissingError(str(path)) from exc
    except PermissionError as exc:
        raise PermissionDeniedError(str(path)) from exc
    except ValueError as exc:
        raise InvalidPathError(str(path)) from exc
    except OSError as exc:
        raise LineCounterIOError(f"unable to read metadata for '{path}': {exc}") from exc


def ensure_not_directory(path: Path, status: os.stat_result) -> None:
    if stat.S_ISDIR(status.st_mode):
        raise IsDirectoryError(str(path))


def ensure_size_within_limit(path: Path, size: int) -> None:
    """Fail when *size* is above ``MAX_FILE_SIZE``; the limit itself is allowed."""
    if size > MAX_FILE_SIZE:
        raise FileTooLargeError(str(path), size)
