"""Scoped, single-pass line access to a validated file."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from linecount.constants.limits import DECODE_ERRORS, READ_BUFFER_SIZE, TEXT_ENCODING
from linecount.exceptions import (
    FileMissingError,
    FileReadError,
    InvalidPathError,
    IsDirectoryError,
    PermissionDeniedError,
)


@contextmanager
def open_lines(path: Path) -> Iterator[Iterator[str]]:
    """Open *path* and yield a lazy iterator over its decoded lines.

    Lines are split on ``\\n`` only and returned without their terminator
    (``\\n`` or ``\\r\\n``). Invalid UTF-8 is replaced with U+FFFD. The handle
    is closed when the ``with`` block exits, whether or not it raised.
    """
    try:
        handle = path.open("rb", buffering=READ_BUFFER_SIZE)
    except IsADirectoryError as exc:
        raise IsDirectoryError(str(path)) from exc
    except FileNotFoundError as exc:
        raise FileMissingError(str(path)) from exc
    except PermissionError as exc:
        raise PermissionDeniedError(str(path)) from exc
    except ValueError as exc:
        raise InvalidPathError(str(path)) from exc
    except OSError as exc:
        raise FileReadError(str(path)) from exc

    with handle:
        yield (decode_line(raw) for raw in handle)


def decode_line(raw: bytes) -> str:
    """Decode one raw line and strip its terminator."""
    if raw.endswith(b"\n"):
        raw = raw[:-2] if raw.endswith(b"\r\n") else raw[:-1]
    return raw.decode(TEXT_ENCODING, errors=DECODE_ERRORS)
