"""Shared type aliases for linecount."""

from .common import ErrorKind, JsonObject, JsonScalar, JsonValue, OutputFormat

__all__ = [
    "ErrorKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
