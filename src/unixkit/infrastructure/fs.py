"""Input helpers: stdin dispatch, per-file error reporting, text wrapping."""
from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext
from typing import BinaryIO, TextIO

import typer

from unixkit.errors import FileAccessError
from unixkit.infrastructure.logging import report

log = logging.getLogger(__name__)

STDIN = "-"


def open_input(filename: str) -> AbstractContextManager[BinaryIO]:
    """Open ``filename`` for binary reading; ``-`` is stdin (left open on exit)."""
    if filename == STDIN:
        return nullcontext(typer.get_binary_stream("stdin"))
    try:
        return open(filename, "rb")
    except OSError as exc:
        raise FileAccessError(filename, exc.strerror or str(exc)) from exc


def iter_inputs(filenames: Iterable[str]) -> Iterator[tuple[str, BinaryIO]]:
    """Yield ``(name, handle)`` for each readable input, reporting the rest.

    Each handle is closed before the next file is opened.
    """
    for name in filenames:
        try:
            handle = open_input(name)
        except FileAccessError as exc:
            log.debug("skipping %s", name, exc_info=True)
            report(str(exc))
            continue
        with handle as fh:
            yield name, fh


@contextmanager
def open_text(handle: BinaryIO) -> Iterator[TextIO]:
    """Decode a binary handle as UTF-8 (replacing bad bytes), newlines untranslated.

    The wrapper is detached on exit so the underlying handle stays owned by
    the caller.
    """
    text = io.TextIOWrapper(handle, encoding="utf-8", errors="replace", newline="")
    try:
        yield text
    finally:
        text.detach()


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def strip_newline(line: bytes) -> bytes:
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


__all__ = ["STDIN", "decode", "iter_inputs", "open_input", "open_text", "strip_newline"]
