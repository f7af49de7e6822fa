"""Count and offset parsing for head/tail.

``tail`` accepts ``+N`` (start at position N) and ``N``/``-N`` (the last N).
``head`` only accepts plain non-negative counts.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from unixkit.errors import ConfigurationError

_OFFSET_RE = re.compile(r"([+-])?(\d+)", re.ASCII)
_COUNT_RE = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Start:
    value: int


@dataclass(frozen=True, slots=True)
class End:
    value: int


Offset = Start | End


def parse_offset(text: str) -> Offset | None:
    match = _OFFSET_RE.fullmatch(text)
    if match is None:
        return None
    num = int(match.group(2))
    return Start(num) if match.group(1) == "+" else End(num)


def parse_line_offset(text: str) -> Offset:
    offset = parse_offset(text)
    if offset is None:
        raise ConfigurationError(f"illegal line count -- {text}")
    return offset


def parse_byte_offset(text: str) -> Offset:
    offset = parse_offset(text)
    if offset is None:
        raise ConfigurationError(f"illegal byte count -- {text}")
    return offset


def parse_count(text: str, *, unit: str) -> int:
    if _COUNT_RE.fullmatch(text) is None:
        raise ConfigurationError(f"illegal {unit} count -- {text}")
    return int(text)


def start_index(offset: Offset, total: int) -> int | None:
    """0-based index to start printing from, or None when nothing is printed."""
    if total == 0:
        return None
    if isinstance(offset, Start):
        if offset.value == 0:
            return 0
        return offset.value - 1 if offset.value <= total else None
    if offset.value == 0:
        return None
    return max(total - offset.value, 0)


def format_offset(offset: Offset) -> str:
    return f"+{offset.value}" if isinstance(offset, Start) else str(offset.value)


__all__ = [
    "End",
    "Offset",
    "Start",
    "format_offset",
    "parse_byte_offset",
    "parse_count",
    "parse_line_offset",
    "parse_offset",
    "start_index",
]
