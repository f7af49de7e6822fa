"""tail: print the end of each input, or everything from a given position."""
from __future__ import annotations

import io
import logging
import os
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from unixkit.core.offsets import End, Offset, format_offset, start_index
from unixkit.errors import ConfigurationError, FileAccessError
from unixkit.infrastructure.fs import decode, open_input
from unixkit.infrastructure.logging import report

log = logging.getLogger(__name__)


def rewindable(handle: BinaryIO) -> BinaryIO:
    """Return ``handle`` if it can seek, otherwise an in-memory copy (pipes)."""
    if handle.seekable():
        return handle
    return io.BytesIO(handle.read())


def count_lines_bytes(handle: BinaryIO) -> tuple[int, int]:
    """Count lines and bytes, leaving ``handle`` rewound to the start."""
    handle.seek(0)
    num_lines = sum(1 for _ in handle)
    num_bytes = handle.seek(0, os.SEEK_END)
    handle.seek(0)
    return num_lines, num_bytes


def tail_lines(handle: BinaryIO, offset: Offset, num_lines: int) -> str:
    start = start_index(offset, num_lines)
    if start is None:
        return ""
    kept = [raw for idx, raw in enumerate(handle) if idx >= start]
    return decode(b"".join(kept))


def tail_bytes(handle: BinaryIO, offset: Offset, num_bytes: int) -> str:
    start = start_index(offset, num_bytes)
    if start is None:
        return ""
    handle.seek(start)
    return decode(handle.read())


def run_tail(
    files: Sequence[str],
    out: TextIO,
    *,
    lines: Offset | None = None,
    bytes_: Offset | None = None,
    default_lines: Offset = End(10),
    quiet: bool = False,
) -> None:
    if lines is not None and bytes_ is not None:
        raise ConfigurationError("--lines and --bytes cannot be used together")
    line_offset = default_lines if lines is None else lines
    multiple = len(files) > 1
    for num, name in enumerate(files):
        try:
            opened = open_input(name)
        except FileAccessError as exc:
            report(str(exc))
            continue
        with opened as raw_handle:
            if multiple and not quiet:
                separator = "\n" if num > 0 else ""
                out.write(f"{separator}==> {name} <==\n")
            handle = rewindable(raw_handle)
            num_lines, num_bytes = count_lines_bytes(handle)
            if bytes_ is not None:
                log.debug("%s: %d bytes, offset %s", name, num_bytes, format_offset(bytes_))
                out.write(tail_bytes(handle, bytes_, num_bytes))
            else:
                log.debug("%s: %d lines, offset %s", name, num_lines, format_offset(line_offset))
                out.write(tail_lines(handle, line_offset, num_lines))


__all__ = ["count_lines_bytes", "rewindable", "run_tail", "tail_bytes", "tail_lines"]
