"""End-to-end runs of the installed ``linecount`` module in a subprocess."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "linecount", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
    )


def test_basic_file_counting(write_file: Callable[..., Path]) -> None:
    result = _run(str(write_file("第一行\n第二行\n\n第四行")))

    assert result.returncode == 0
    assert "Total lines:     4" in result.stdout
    assert "Non-empty lines: 3" in result.stdout
    assert "Empty lines:     1" in result.stdout
    assert "Empty ratio:     25.0%" in result.stdout


def test_special_characters(write_file: Callable[..., Path]) -> None:
    result = _run(str(write_file("symbols: @#$%^&*()\nemoji: 😀😃😄\n中文：你好世界\n")))

    assert result.returncode == 0
    assert "Non-empty lines: 3" in result.stdout


def test_no_arguments_exits_non_zero() -> None:
    result = _run()
    combined = result.stdout + result.stderr

    assert result.returncode != 0
    assert "Usage:" in combined
    assert "Example:" in combined


def test_directory_exits_non_zero(tmp_path: Path) -> None:
    result = _run(str(tmp_path))

    assert result.returncode != 0
    assert "directory" in result.stderr
    assert "Total lines" not in result.stdout


def test_repeated_runs_are_identical(write_file: Callable[..., Path]) -> None:
    path = write_file("x\n\n  \ny\n")

    first = _run(str(path))
    second = _run(str(path))

    assert first.returncode == second.returncode == 0
    assert first.stdout == second.stdout
