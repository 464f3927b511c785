"""Program naming, CLI help text, and usage lines."""

from __future__ import annotations

PROGRAM_NAME: str = "linecount"
CLI_DESCRIPTION: str = (
    "Count the lines of a text file and report how many are empty.\n"
    "A line is empty when nothing but whitespace remains after trimming."
)
USAGE_TEMPLATE: str = "Usage: {prog} <file-path>"
EXAMPLE_TEMPLATE: str = "Example: {prog} example.txt"

LOG_FORMAT: str = "%(levelname)s %(message)s"

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
