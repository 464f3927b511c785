"""Tests for scoped line access."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from linecount.exceptions import FileMissingError, FileReadError, IsDirectoryError, PermissionDeniedError
from linecount.io import decode_line, open_lines


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param(b"abc\n", "abc", id="lf"),
        pytest.param(b"abc\r\n", "abc", id="crlf"),
        pytest.param(b"abc", "abc", id="unterminated"),
        pytest.param(b"a\rb\n", "a\rb", id="lone-cr-kept"),
        pytest.param(b"\n", "", id="bare-newline"),
        pytest.param(b"ok\xff\xfe\n", "ok\ufffd\ufffd", id="invalid-utf8"),
    ],
)
def test_decode_line(raw: bytes, expected: str) -> None:
    assert decode_line(raw) == expected


def test_open_lines_yields_decoded_lines(write_file: Callable[..., Path]) -> None:
    path = write_file("first\r\nsecond\n\nlast")

    with open_lines(path) as lines:
        assert list(lines) == ["first", "second", "", "last"]


def test_open_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileMissingError), open_lines(tmp_path / "gone.txt"):
        pass


def test_open_lines_directory(tmp_path: Path) -> None:
    with pytest.raises(IsDirectoryError), open_lines(tmp_path):
        pass


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        pytest.param(PermissionError(13, "Permission denied"), PermissionDeniedError, id="permission"),
        pytest.param(OSError(5, "Input/output error"), FileReadError, id="other"),
    ],
)
def test_open_errors_are_classified(
    write_file: Callable[..., Path],
    monkeypatch: pytest.MonkeyPatch,
    error: OSError,
    expected: type[Exception],
) -> None:
    path = write_file("content")

    def _raise(self: Path, *args: Any, **kwargs: Any) -> Any:
        raise error

    monkeypatch.setattr(Path, "open", _raise)

    with pytest.raises(expected) as excinfo, open_lines(path):
        pass

    assert excinfo.value.__cause__ is error


def test_handle_closed_after_block(write_file: Callable[..., Path], monkeypatch: pytest.MonkeyPatch) -> None:
    path = write_file("a\nb\n")
    opened: list[Any] = []
    real_open = Path.open

    def _tracking_open(self: Path, *args: Any, **kwargs: Any) -> Any:
        handle = real_open(self, *args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", _tracking_open)

    with pytest.raises(RuntimeError), open_lines(path) as lines:
        next(lines)
        raise RuntimeError("boom")

    assert len(opened) == 1
    assert opened[0].closed


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root bypasses permission bits")
def test_open_lines_unreadable_file(write_file: Callable[..., Path]) -> None:
    path = write_file("secret")
    path.chmod(0)
    try:
        with pytest.raises(PermissionDeniedError), open_lines(path):
            pass
    finally:
        path.chmod(0o600)
