"""Machine-readable JSON report."""

from __future__ import annotations

import json

from linecount.constants.reporting import JSON_INDENT, SCHEMA_VERSION
from linecount.model import FileMetadata, LineStats
from linecount.types import JsonObject


def build_report(metadata: FileMetadata, stats: LineStats) -> JsonObject:
    """Build the JSON-serializable report payload."""
    payload: JsonObject = {
        "schema_version": SCHEMA_VERSION,
        "path": str(metadata.path),
        "size_bytes": metadata.size,
    }
    payload.update(stats.to_dict())
    return payload


def render_json_report(metadata: FileMetadata, stats: LineStats) -> str:
    return json.dumps(build_report(metadata, stats), indent=JSON_INDENT, ensure_ascii=False)
