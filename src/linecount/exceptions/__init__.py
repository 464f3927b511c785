"""Shared exception hierarchy for linecount."""

from __future__ import annotations

from .arguments import MissingArgumentError
from .base import LineCounterError, LineCounterIOError
from .files import (
    FileMissingError,
    FileReadError,
    FileTooLargeError,
    InvalidPathError,
    IsDirectoryError,
    PathError,
    PermissionDeniedError,
)

__all__ = [
    "FileMissingError",
    "FileReadError",
    "FileTooLargeError",
    "InvalidPathError",
    "IsDirectoryError",
    "LineCounterError",
    "LineCounterIOError",
    "MissingArgumentError",
    "PathError",
    "PermissionDeniedError",
]
