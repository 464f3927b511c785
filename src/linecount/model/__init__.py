"""Core data models for linecount."""

from .entities import FileMetadata, LineStats

__all__ = ["FileMetadata", "LineStats"]
