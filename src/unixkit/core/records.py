"""Delimited record reading/writing (quote-aware, one-byte delimiter)."""
from __future__ import annotations

import csv
import sys
from collections.abc import Iterator, Sequence
from contextlib import suppress
from typing import TextIO

from unixkit.errors import InvalidDelimiter

Record = list[str]


def parse_delimiter(text: str) -> str:
    """Return ``text`` if it encodes to exactly one byte."""
    if len(text.encode("utf-8")) != 1:
        raise InvalidDelimiter(text)
    return text


def ensure_max_field_size(target: int | None = None) -> None:
    """Raise the csv field size limit; platforms with a narrow C long keep theirs."""
    with suppress(OverflowError):
        csv.field_size_limit(target or sys.maxsize)


def iter_records(stream: TextIO, delimiter: str) -> Iterator[Record]:
    """Yield records as field lists; the header row is not special-cased.

    ``stream`` should be opened with ``newline=""`` so quoted fields keep
    their embedded line breaks.
    """
    ensure_max_field_size()
    reader = csv.reader(stream, delimiter=delimiter, quotechar='"', doublequote=True, strict=False)
    yield from reader


def write_record(out: TextIO, fields: Sequence[str], delimiter: str) -> None:
    writer = csv.writer(out, delimiter=delimiter, quotechar='"', lineterminator="\n")
    writer.writerow(fields)


__all__ = ["Record", "ensure_max_field_size", "iter_records", "parse_delimiter", "write_record"]
