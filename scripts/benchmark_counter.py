#!/usr/bin/env python3
"""Time ``count_file`` on generated inputs of different shapes.

Cases:
    small   100 lines of text
    medium  10,000 lines of text
    large   100,000 lines of text
    mixed   10,000 lines, every third blank and every fifth whitespace-only

Each case is written to a temporary file once and counted ``--repeat`` times;
the best and mean wall-clock times are printed.
"""

from __future__ import annotations

import argparse
import statistics
import sys
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

from linecount.counter import count_file

DEFAULT_REPEAT: int = 20


def _text_lines(count: int) -> str:
    return "\n".join(f"this is line number {i}" for i in range(count))


def _mixed_lines(count: int) -> str:
    lines: list[str] = []
    for i in range(count):
        if i % 3 == 0:
            lines.append("")
        elif i % 5 == 0:
            lines.append("   \t  ")
        else:
            lines.append(f"content line {i}")
    return "\n".join(lines)


CASES: dict[str, Callable[[], str]] = {
    "small": lambda: _text_lines(100),
    "medium": lambda: _text_lines(10_000),
    "large": lambda: _text_lines(100_000),
    "mixed": lambda: _mixed_lines(10_000),
}


def _time_case(path: Path, repeat: int) -> list[float]:
    timings: list[float] = []
    for _ in range(repeat):
        start = time.perf_counter()
        count_file(path)
        timings.append(time.perf_counter() - start)
    return timings


def main() -> int:
    """Run all benchmark cases and print a timing table."""
    parser = argparse.ArgumentParser(description="Benchmark line counting")
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT, help="Runs per case")
    args = parser.parse_args()
    if args.repeat < 1:
        print("ERROR: --repeat must be at least 1", file=sys.stderr)
        return 1

    with tempfile.TemporaryDirectory() as workdir:
        for name, build in CASES.items():
            path = Path(workdir) / f"{name}.txt"
            path.write_text(build(), encoding="utf-8")
            stats = count_file(path)
            timings = _time_case(path, args.repeat)
            print(
                f"{name:<7} {stats.total_lines:>7} lines  "
                f"best {min(timings) * 1000:8.3f} ms  mean {statistics.mean(timings) * 1000:8.3f} ms"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
