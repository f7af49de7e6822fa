"""comm: compare two sorted inputs line by line in three columns."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from unixkit.errors import ConfigurationError
from unixkit.infrastructure.fs import STDIN, decode, open_input, strip_newline

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CommOptions:
    show_col1: bool = True
    show_col2: bool = True
    show_col3: bool = True
    insensitive: bool = False
    delimiter: str = "\t"

    def prefix(self, column: int) -> str:
        shown = [self.show_col1, self.show_col2][: column - 1]
        return self.delimiter * sum(shown)


def read_lines(filename: str) -> list[str]:
    """All lines of ``filename`` without endings; raises FileAccessError."""
    with open_input(filename) as handle:
        return [decode(strip_newline(raw)) for raw in handle]


def merge(lines1: list[str], lines2: list[str], *, insensitive: bool = False):
    """Yield ``(column, line)`` pairs in merge order; column is 1, 2 or 3."""
    i1 = i2 = 0
    while i1 < len(lines1) or i2 < len(lines2):
        if i1 >= len(lines1):
            yield 2, lines2[i2]
            i2 += 1
            continue
        if i2 >= len(lines2):
            yield 1, lines1[i1]
            i1 += 1
            continue
        line1, line2 = lines1[i1], lines2[i2]
        key1, key2 = (line1.lower(), line2.lower()) if insensitive else (line1, line2)
        if key1 < key2:
            yield 1, line1
            i1 += 1
        elif key1 > key2:
            yield 2, line2
            i2 += 1
        else:
            yield 3, line1
            i1 += 1
            i2 += 1


def run_comm(file1: str, file2: str, options: CommOptions, out: TextIO) -> None:
    if file1 == STDIN and file2 == STDIN:
        raise ConfigurationError('Both input files cannot be STDIN ("-")')
    lines1 = read_lines(file1)
    lines2 = read_lines(file2)
    log.debug("comm: %d vs %d lines", len(lines1), len(lines2))
    visible = {1: options.show_col1, 2: options.show_col2, 3: options.show_col3}
    for column, line in merge(lines1, lines2, insensitive=options.insensitive):
        if visible[column]:
            out.write(f"{options.prefix(column)}{line}\n")


__all__ = ["CommOptions", "merge", "read_lines", "run_comm"]
