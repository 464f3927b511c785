"""Shared pytest fixtures for line counting tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes text or bytes into ``tmp_path``."""

    def _write(content: str | bytes, name: str = "sample.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding published JSON schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"
