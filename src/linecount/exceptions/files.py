"""Exceptions raised while validating or opening an input file."""

from __future__ import annotations

from typing import ClassVar

from linecount.exceptions.base import LineCounterError
from linecount.types import ErrorKind


class PathError(LineCounterError):
    """A failure tied to one input path."""

    message_template: ClassVar[str] = "{path}"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(self.message_template.format(**vars(self)))


class InvalidPathError(PathError):
    kind: ClassVar[ErrorKind] = "invalid_path"
    message_template: ClassVar[str] = "Invalid file path: {path!r}"


class FileMissingError(PathError):
    kind: ClassVar[ErrorKind] = "file_not_found"
    message_template: ClassVar[str] = "File not found: {path}"


class IsDirectoryError(PathError):
    kind: ClassVar[ErrorKind] = "is_directory"
    message_template: ClassVar[str] = "Path is a directory, not a file: {path}"


class PermissionDeniedError(PathError):
    kind: ClassVar[ErrorKind] = "permission_denied"
    message_template: ClassVar[str] = "Permission denied: {path}"


class FileReadError(PathError):
    kind: ClassVar[ErrorKind] = "file_read_error"
    message_template: ClassVar[str] = "Unable to read file: {path}"


class FileTooLargeError(PathError):
    """Raised when a file exceeds the fixed size ceiling."""

    kind: ClassVar[ErrorKind] = "file_too_large"
    message_template: ClassVar[str] = "File too large to process: {path}, size: {size} bytes"

    def __init__(self, path: str, size: int) -> None:
        self.size = size
        super().__init__(path)
