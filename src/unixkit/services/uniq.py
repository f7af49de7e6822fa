"""uniq: collapse adjacent repeated lines."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import BinaryIO, TextIO

from unixkit.infrastructure.fs import decode


def runs(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(count, first_line)`` for each run of lines equal up to trailing whitespace."""
    current: str | None = None
    count = 0
    for line in lines:
        if current is not None and line.rstrip() == current.rstrip():
            count += 1
            continue
        if current is not None:
            yield count, current
        current, count = line, 1
    if current is not None:
        yield count, current


def format_run(count: int, line: str, *, show_count: bool) -> str:
    return f"{count:>4} {line}" if show_count else line


def run_uniq(handle: BinaryIO, out: TextIO, *, count: bool = False) -> None:
    """Stream collapsed runs of an already opened input into ``out``."""
    for num, line in runs(decode(raw) for raw in handle):
        out.write(format_run(num, line, show_count=count))


__all__ = ["format_run", "run_uniq", "runs"]
