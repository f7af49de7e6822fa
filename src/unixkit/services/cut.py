"""cut: print selected bytes, characters or fields of each input line."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from unixkit.core.extract import Bytes, Chars, Extract, Fields, extract_bytes, extract_chars, extract_fields
from unixkit.core.records import iter_records, write_record
from unixkit.infrastructure.fs import decode, iter_inputs, open_text, strip_newline

log = logging.getLogger(__name__)


def _cut_lines(handle: BinaryIO, extract: Bytes | Chars, out: TextIO) -> None:
    for raw in handle:
        line = strip_newline(raw)
        if isinstance(extract, Bytes):
            out.write(extract_bytes(line, extract.positions) + "\n")
        else:
            out.write(extract_chars(decode(line), extract.positions) + "\n")


def _cut_fields(handle: BinaryIO, extract: Fields, delimiter: str, out: TextIO) -> None:
    with open_text(handle) as text:
        for record in iter_records(text, delimiter):
            write_record(out, extract_fields(record, extract.positions), delimiter)


def run_cut(files: Sequence[str], extract: Extract, delimiter: str, out: TextIO) -> None:
    log.debug("cut mode=%s delimiter=%r files=%s", type(extract).__name__, delimiter, list(files))
    for _name, handle in iter_inputs(files):
        if isinstance(extract, Fields):
            _cut_fields(handle, extract, delimiter, out)
        else:
            _cut_lines(handle, extract, out)


__all__ = ["run_cut"]
