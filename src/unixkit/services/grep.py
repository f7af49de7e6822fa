"""grep: print lines matching a regular expression."""
from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from unixkit.errors import ConfigurationError
from unixkit.infrastructure.fs import STDIN, decode, iter_inputs
from unixkit.infrastructure.logging import report

log = logging.getLogger(__name__)


@dataclass(slots=True)
class GrepOptions:
    recursive: bool = False
    count: bool = False
    invert_match: bool = False


def compile_pattern(pattern: str, *, insensitive: bool = False) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.IGNORECASE if insensitive else 0)
    except re.error as exc:
        raise ConfigurationError(f'Invalid pattern "{pattern}"') from exc


def expand_inputs(files: Sequence[str], *, recursive: bool) -> Iterator[str]:
    """Yield readable input names; directories are expanded only when recursive."""
    for name in files:
        if name != STDIN and os.path.isdir(name):
            if not recursive:
                report(f"{name} is a directory")
                continue
            for root, dirs, filenames in os.walk(name):
                dirs.sort()
                for filename in sorted(filenames):
                    yield os.path.join(root, filename)
        else:
            yield name


def find_lines(handle: BinaryIO, pattern: re.Pattern[str], *, invert: bool = False) -> list[str]:
    """Matching (or non-matching) lines, with their original endings."""
    found: list[str] = []
    for raw in handle:
        line = decode(raw)
        if bool(pattern.search(line)) != invert:
            found.append(line)
    return found


def run_grep(
    pattern: re.Pattern[str], files: Sequence[str], options: GrepOptions, out: TextIO
) -> None:
    show_names = options.recursive or len(files) > 1
    for name, handle in iter_inputs(expand_inputs(files, recursive=options.recursive)):
        found = find_lines(handle, pattern, invert=options.invert_match)
        log.debug("%s: %d line(s)", name, len(found))
        prefix = f"{name}:" if show_names else ""
        if options.count:
            out.write(f"{prefix}{len(found)}\n")
            continue
        for line in found:
            out.write(f"{prefix}{line}")


__all__ = ["GrepOptions", "compile_pattern", "expand_inputs", "find_lines", "run_grep"]
