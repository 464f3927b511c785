"""Single-pass line classification and aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from linecount.constants.limits import UNICODE_WHITESPACE
from linecount.exceptions import LineCounterIOError
from linecount.io import open_lines
from linecount.model import LineStats

logger = logging.getLogger(__name__)


def is_empty_line(line: str) -> bool:
    """Return True when *line* holds nothing but Unicode White_Space."""
    return not line.strip(UNICODE_WHITESPACE)


def count_lines(lines: Iterable[str], *, source: str | None = None) -> LineStats:
    """Classify every line of *lines* and return the totals.

    The iterable is consumed exactly once. An ``OSError`` raised while
    iterating aborts the count with ``LineCounterIOError``; no partial
    statistics are returned. *source* only labels the error message.
    """
    total_lines = 0
    non_empty_lines = 0
    empty_lines = 0

    try:
        for line in lines:
            total_lines += 1
            if is_empty_line(line):
                empty_lines += 1
            else:
                non_empty_lines += 1
    except OSError as exc:
        location = f"line {total_lines + 1}"
        if source is not None:
            location = f"{location} of '{source}'"
        raise LineCounterIOError(f"failed while reading {location}: {exc}") from exc

    return LineStats(
        total_lines=total_lines,
        non_empty_lines=non_empty_lines,
        empty_lines=empty_lines,
    )


def count_file(path: Path) -> LineStats:
    """Open *path*, count its lines in one pass, and close it again."""
    with open_lines(path) as lines:
        stats = count_lines(lines, source=str(path))
    logger.debug(
        "Counted %s: total=%d non_empty=%d empty=%d",
        path,
        stats.total_lines,
        stats.non_empty_lines,
        stats.empty_lines,
    )
    return stats
