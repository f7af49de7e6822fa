"""fortune: print a random epigram, or every epigram matching a pattern.

Fortune files hold records separated by lines containing only ``%``.
"""
from __future__ import annotations

import errno
import logging
import os
import random
import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from unixkit.domain.models import Fortune
from unixkit.errors import ConfigurationError, FileAccessError
from unixkit.infrastructure.fs import decode
from unixkit.infrastructure.logging import report

log = logging.getLogger(__name__)

NO_FORTUNES = "No fortunes found"


def compile_pattern(pattern: str | None, *, insensitive: bool = False) -> re.Pattern[str] | None:
    if pattern is None:
        return None
    try:
        return re.compile(pattern, re.IGNORECASE if insensitive else 0)
    except re.error as exc:
        raise ConfigurationError(f'Invalid pattern "{pattern}"') from exc


def find_files(sources: Iterable[str]) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated file list."""
    found: set[Path] = set()
    for source in sources:
        path = Path(source)
        if not path.exists():
            raise FileAccessError(source, os.strerror(errno.ENOENT))
        if path.is_dir():
            found.update(
                p for p in path.rglob("*") if p.is_file() and p.suffix != ".dat"
            )
        elif path.suffix != ".dat":
            found.add(path)
    return sorted(found)


def parse_fortunes(text: str, source: str) -> list[Fortune]:
    fortunes: list[Fortune] = []
    buffer: list[str] = []
    for line in [*text.splitlines(), "%"]:
        if line == "%":
            body = "\n".join(buffer).strip()
            if body:
                fortunes.append(Fortune(source=source, text=body))
            buffer = []
        else:
            buffer.append(line)
    return fortunes


def read_fortunes(paths: Sequence[Path]) -> list[Fortune]:
    fortunes: list[Fortune] = []
    for path in paths:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileAccessError(str(path), exc.strerror or str(exc)) from exc
        fortunes.extend(parse_fortunes(decode(data), path.name))
    log.debug("loaded %d fortunes from %d files", len(fortunes), len(paths))
    return fortunes


def pick_fortune(fortunes: Sequence[Fortune], seed: int | None = None) -> Fortune | None:
    if not fortunes:
        return None
    return random.Random(seed).choice(fortunes)


def print_matching(fortunes: Iterable[Fortune], pattern: re.Pattern[str], out: TextIO) -> None:
    previous: str | None = None
    for fortune in fortunes:
        if not pattern.search(fortune.text):
            continue
        if fortune.source != previous:
            report(f"({fortune.source})\n%")
            previous = fortune.source
        out.write(f"{fortune.text}\n%\n")


def run_fortune(
    sources: Sequence[str],
    out: TextIO,
    *,
    pattern: re.Pattern[str] | None = None,
    seed: int | None = None,
) -> None:
    fortunes = read_fortunes(find_files(sources))
    if pattern is not None:
        print_matching(fortunes, pattern, out)
        return
    chosen = pick_fortune(fortunes, seed)
    out.write(f"{chosen.text if chosen else NO_FORTUNES}\n")


__all__ = [
    "compile_pattern",
    "find_files",
    "parse_fortunes",
    "pick_fortune",
    "print_matching",
    "read_fortunes",
    "run_fortune",
]
