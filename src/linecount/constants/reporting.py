"""Constants for stdout labels, colours, and the JSON report."""

from __future__ import annotations

from linecount.types import OutputFormat

OUTPUT_FORMAT_TEXT: OutputFormat = "text"
OUTPUT_FORMAT_JSON: OutputFormat = "json"
VALID_OUTPUT_FORMATS: frozenset[OutputFormat] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})
DEFAULT_OUTPUT_FORMAT: OutputFormat = OUTPUT_FORMAT_TEXT

SCHEMA_VERSION: str = "1.0.0"
JSON_INDENT: int = 2

PROCESSING_PREFIX: str = "Processing file:"
COMPLETION_MARKER: str = "Analysis complete!"
ERROR_PREFIX: str = "Error:"

LABEL_FILE: str = "File"
LABEL_SIZE: str = "Size"
LABEL_TOTAL: str = "Total lines"
LABEL_NON_EMPTY: str = "Non-empty lines"
LABEL_EMPTY: str = "Empty lines"
LABEL_EMPTY_RATIO: str = "Empty ratio"
LABEL_WIDTH: int = 16

ANSI_RESET: str = "\033[0m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_BOLD: str = "\033[1m"

EMPTY_RATIO_HIGH: float = 50.0
