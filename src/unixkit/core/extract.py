"""Selection of bytes, characters or fields by position list.

Indices beyond the end of a line are skipped, never padded, so one list can be
applied to lines of any length.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from unixkit.core.ranges import PositionList, parse_positions
from unixkit.errors import ConfigurationError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Bytes:
    positions: PositionList


@dataclass(frozen=True, slots=True)
class Chars:
    positions: PositionList


@dataclass(frozen=True, slots=True)
class Fields:
    positions: PositionList


Extract = Bytes | Chars | Fields


def build_extract(
    *, fields: str | None = None, bytes_: str | None = None, chars: str | None = None
) -> Extract:
    """Build the single active extraction mode from the three list options."""
    given = [value for value in (fields, bytes_, chars) if value is not None]
    if not given:
        raise ConfigurationError("Must have --fields, --bytes, or --chars")
    if len(given) > 1:
        raise ConfigurationError("Only one of --fields, --bytes, or --chars may be given")
    if fields is not None:
        return Fields(parse_positions(fields))
    if bytes_ is not None:
        return Bytes(parse_positions(bytes_))
    return Chars(parse_positions(chars or ""))


def extract(sequence: Sequence[T], positions: PositionList) -> list[T]:
    size = len(sequence)
    return [sequence[i] for rng in positions for i in rng.indices(size)]


def extract_bytes(line: bytes, positions: PositionList) -> str:
    return bytes(extract(line, positions)).decode("utf-8", errors="replace")


def extract_chars(line: str, positions: PositionList) -> str:
    return "".join(extract(line, positions))


def extract_fields(record: Sequence[str], positions: PositionList) -> list[str]:
    return extract(record, positions)


__all__ = [
    "Bytes",
    "Chars",
    "Extract",
    "Fields",
    "build_extract",
    "extract",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
]
