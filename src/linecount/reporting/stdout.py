"""Human-readable stdout report for a counted file."""

from __future__ import annotations

from pathlib import Path

from linecount.constants.reporting import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RESET,
    ANSI_YELLOW,
    COMPLETION_MARKER,
    EMPTY_RATIO_HIGH,
    LABEL_EMPTY,
    LABEL_EMPTY_RATIO,
    LABEL_FILE,
    LABEL_NON_EMPTY,
    LABEL_SIZE,
    LABEL_TOTAL,
    LABEL_WIDTH,
    PROCESSING_PREFIX,
)
from linecount.model import FileMetadata, LineStats


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_ratio(ratio: float) -> str:
    text = f"{ratio:.1f}%"
    return _colorize(text, ANSI_YELLOW if ratio >= EMPTY_RATIO_HIGH else ANSI_GREEN)


def render_processing_line(path: Path, *, color: bool = False) -> str:
    """Render the line announcing which file is about to be counted."""
    shown = _colorize(str(path), ANSI_BOLD) if color else str(path)
    return f"{PROCESSING_PREFIX} {shown}"


class StdoutReporter:
    """Formats validated metadata and line statistics for the terminal."""

    def __init__(self, metadata: FileMetadata, stats: LineStats, *, color: bool = False) -> None:
        self._metadata = metadata
        self._stats = stats
        self._color = color

    def render(self) -> str:
        """Render the report; the ratio row is omitted for an empty file."""
        stats = self._stats
        marker = _colorize(COMPLETION_MARKER, ANSI_GREEN) if self._color else COMPLETION_MARKER
        lines = [
            marker,
            self._row(LABEL_FILE, str(self._metadata.path)),
            self._row(LABEL_SIZE, f"{self._metadata.size} bytes"),
            self._row(LABEL_TOTAL, str(stats.total_lines)),
            self._row(LABEL_NON_EMPTY, str(stats.non_empty_lines)),
            self._row(LABEL_EMPTY, str(stats.empty_lines)),
        ]
        if stats.total_lines > 0:
            ratio = stats.empty_percentage
            ratio_str = _color_ratio(ratio) if self._color else f"{ratio:.1f}%"
            lines.append(self._row(LABEL_EMPTY_RATIO, ratio_str))
        return "\n".join(lines)

    @staticmethod
    def _row(label: str, value: str) -> str:
        return f"{label + ':':<{LABEL_WIDTH}} {value}"
