"""Result types shared by validation, counting, and reporting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from linecount.types import JsonObject


@dataclass(frozen=True)
class FileMetadata:
    """Metadata captured for a file that passed validation."""

    path: Path
    size: int


@dataclass(frozen=True)
class LineStats:
    """Aggregate line counts for a single counting pass.

    ``total_lines`` always equals ``non_empty_lines + empty_lines``; the
    all-zero value is the state before any line has been read.
    """

    total_lines: int = 0
    non_empty_lines: int = 0
    empty_lines: int = 0

    def __post_init__(self) -> None:
        if min(self.total_lines, self.non_empty_lines, self.empty_lines) < 0:
            raise ValueError("line counts must be non-negative")
        if self.total_lines != self.non_empty_lines + self.empty_lines:
            raise ValueError(
                f"total_lines ({self.total_lines}) must equal non_empty_lines "
                f"({self.non_empty_lines}) + empty_lines ({self.empty_lines})"
            )

    @property
    def empty_percentage(self) -> float:
        """Share of empty lines in percent, ``0.0`` for an empty file."""
        if self.total_lines == 0:
            return 0.0
        return (self.empty_lines / self.total_lines) * 100.0

    def to_dict(self) -> JsonObject:
        return {
            "total_lines": self.total_lines,
            "non_empty_lines": self.non_empty_lines,
            "empty_lines": self.empty_lines,
            "empty_percentage": self.empty_percentage,
        }
