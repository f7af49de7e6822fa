"""find: walk paths and print entries matching name patterns and types."""
from __future__ import annotations

import enum
import errno
import logging
import os
import re
from collections.abc import Iterator, Sequence
from typing import TextIO

from unixkit.errors import ConfigurationError
from unixkit.infrastructure.logging import report

log = logging.getLogger(__name__)


class EntryType(str, enum.Enum):
    DIR = "d"
    FILE = "f"
    LINK = "l"


def compile_names(patterns: Sequence[str]) -> list[re.Pattern[str]]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigurationError(f'Invalid --name "{pattern}"') from exc
    return compiled


def entry_type(path: str) -> EntryType:
    if os.path.islink(path):
        return EntryType.LINK
    if os.path.isdir(path):
        return EntryType.DIR
    return EntryType.FILE


def walk(root: str) -> Iterator[str]:
    """Depth-first pre-order walk including ``root``; links are not followed."""
    yield root
    if os.path.islink(root) or not os.path.isdir(root):
        return
    try:
        names = sorted(os.listdir(root))
    except OSError as exc:
        report(f"{root}: {exc.strerror}")
        return
    for name in names:
        yield from walk(os.path.join(root, name))


def matches(
    path: str, names: Sequence[re.Pattern[str]], types: Sequence[EntryType]
) -> bool:
    if types and entry_type(path) not in types:
        return False
    if names:
        base = os.path.basename(os.path.normpath(path)) or path
        return any(pattern.search(base) for pattern in names)
    return True


def run_find(
    paths: Sequence[str],
    out: TextIO,
    *,
    names: Sequence[re.Pattern[str]] = (),
    types: Sequence[EntryType] = (),
) -> None:
    for root in paths:
        if not os.path.lexists(root):
            log.debug("find root missing: %s", root)
            report(f"{root}: {os.strerror(errno.ENOENT)}")
            continue
        for path in walk(root):
            if matches(path, names, types):
                out.write(path + "\n")


__all__ = ["EntryType", "compile_names", "entry_type", "matches", "run_find", "walk"]
