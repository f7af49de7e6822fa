"""Position list parsing (1-based user expressions to 0-based half-open ranges).

``"1,7,3-5"`` becomes ``(Range(0, 1), Range(6, 7), Range(2, 5))``. Token order
is preserved; overlapping or repeated ranges are kept as given.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from unixkit.errors import IllegalListValue, InvalidRangeOrder

log = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(\d+)(?:-(\d+))?", re.ASCII)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open interval ``[start, end)`` over 0-based positions."""

    start: int
    end: int

    def indices(self, limit: int) -> range:
        """Indices of this range that fall below ``limit``."""
        return range(self.start, min(self.end, limit))


PositionList = tuple[Range, ...]


def parse_range(token: str) -> Range:
    match = _TOKEN_RE.fullmatch(token)
    if match is None:
        raise IllegalListValue(token)
    start = int(match.group(1))
    if start < 1:
        # echoes the parsed number, so "00" and "0-3" both report "0"
        raise IllegalListValue(str(start))
    if match.group(2) is None:
        return Range(start - 1, start)
    end = int(match.group(2))
    if start >= end:
        raise InvalidRangeOrder(start, end)
    return Range(start - 1, end)


def parse_positions(spec: str) -> PositionList:
    positions = tuple(parse_range(token) for token in spec.split(","))
    log.debug("parsed %r into %d range(s)", spec, len(positions))
    return positions


__all__ = ["PositionList", "Range", "parse_positions", "parse_range"]
