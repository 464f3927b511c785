"""Root of the linecount exception hierarchy."""

from __future__ import annotations

from typing import ClassVar

from linecount.types import ErrorKind


class LineCounterError(Exception):
    """Base class for every failure that aborts a run."""

    kind: ClassVar[ErrorKind] = "io_error"


class LineCounterIOError(LineCounterError):
    """Raised for I/O failures that have no more specific kind.

    The triggering ``OSError`` is chained as ``__cause__``.
    """

    kind: ClassVar[ErrorKind] = "io_error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"I/O error: {detail}")
