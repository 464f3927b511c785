"""Command-line argument exceptions."""

from __future__ import annotations

from typing import ClassVar

from linecount.exceptions.base import LineCounterError
from linecount.types import ErrorKind


class MissingArgumentError(LineCounterError):
    """Raised when no file path was supplied."""

    kind: ClassVar[ErrorKind] = "missing_argument"

    def __init__(self) -> None:
        super().__init__("Missing required file path argument")
