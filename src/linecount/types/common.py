"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type ErrorKind = Literal[
    "invalid_path",
    "file_not_found",
    "is_directory",
    "permission_denied",
    "file_too_large",
    "file_read_error",
    "missing_argument",
    "io_error",
]
type OutputFormat = Literal["text", "json"]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
