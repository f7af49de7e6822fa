"""wc: count lines, words, bytes and characters."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO, TextIO

import orjson

from unixkit.domain.models import FileCounts
from unixkit.errors import ConfigurationError
from unixkit.infrastructure.fs import STDIN, decode, iter_inputs


@dataclass(slots=True)
class WcOptions:
    lines: bool = False
    words: bool = False
    bytes: bool = False
    chars: bool = False

    def __post_init__(self) -> None:
        if self.bytes and self.chars:
            raise ConfigurationError("--bytes and --chars cannot be used together")
        if not (self.lines or self.words or self.bytes or self.chars):
            self.lines = self.words = self.bytes = True


def count(handle: BinaryIO, name: str) -> FileCounts:
    counts = FileCounts(name=name)
    for raw in handle:
        line = decode(raw)
        counts.lines += 1
        counts.words += len(line.split())
        counts.bytes += len(raw)
        counts.chars += len(line)
    return counts


def format_counts(counts: FileCounts, options: WcOptions) -> str:
    columns = [
        (options.lines, counts.lines),
        (options.words, counts.words),
        (options.bytes, counts.bytes),
        (options.chars, counts.chars),
    ]
    cells = "".join(f"{value:>8}" for shown, value in columns if shown)
    name = "" if counts.name == STDIN else f" {counts.name}"
    return f"{cells}{name}"


def run_wc(files: Sequence[str], options: WcOptions, out: TextIO, *, json_out: bool = False) -> None:
    total = FileCounts(name="total")
    results: list[FileCounts] = []
    for name, handle in iter_inputs(files):
        counts = count(handle, name)
        results.append(counts)
        total = total + counts
        if not json_out:
            out.write(format_counts(counts, options) + "\n")
    if len(files) > 1:
        results.append(total)
        if not json_out:
            out.write(format_counts(total, options) + "\n")
    if json_out:
        for counts in results:
            out.write(orjson.dumps(counts.model_dump()).decode("utf-8") + "\n")


__all__ = ["WcOptions", "count", "format_counts", "run_wc"]
