"""head: print the first lines or bytes of each input."""
from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO, TextIO

from unixkit.errors import ConfigurationError
from unixkit.infrastructure.fs import decode, iter_inputs


def head_lines(handle: BinaryIO, count: int) -> str:
    lines: list[bytes] = []
    if count > 0:
        for raw in handle:
            lines.append(raw)
            if len(lines) >= count:
                break
    return decode(b"".join(lines))


def head_bytes(handle: BinaryIO, count: int) -> str:
    return decode(handle.read(count))


def run_head(
    files: Sequence[str],
    out: TextIO,
    *,
    lines: int | None = None,
    bytes_: int | None = None,
    default_lines: int = 10,
) -> None:
    if lines is not None and bytes_ is not None:
        raise ConfigurationError("--lines and --bytes cannot be used together")
    multiple = len(files) > 1
    for num, (name, handle) in enumerate(iter_inputs(files)):
        if multiple:
            separator = "\n" if num > 0 else ""
            out.write(f"{separator}==> {name} <==\n")
        if bytes_ is not None:
            out.write(head_bytes(handle, bytes_))
        else:
            out.write(head_lines(handle, default_lines if lines is None else lines))


__all__ = ["head_bytes", "head_lines", "run_head"]
