"""Shared file I/O helpers."""

from .files import decode_line, open_lines

__all__ = ["decode_line", "open_lines"]
