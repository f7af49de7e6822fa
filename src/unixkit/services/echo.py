"""echo: print arguments separated by spaces."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO


def run_echo(text: Sequence[str], out: TextIO, *, omit_newline: bool = False) -> None:
    out.write(" ".join(text) + ("" if omit_newline else "\n"))


__all__ = ["run_echo"]
