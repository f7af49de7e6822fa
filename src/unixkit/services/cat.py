"""cat: concatenate inputs, optionally numbering lines."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from unixkit.errors import ConfigurationError
from unixkit.infrastructure.fs import decode, iter_inputs, strip_newline


def run_cat(
    files: Sequence[str],
    out: TextIO,
    *,
    number_lines: bool = False,
    number_nonblank: bool = False,
) -> None:
    if number_lines and number_nonblank:
        raise ConfigurationError("-n and -b cannot be used together")
    for _name, handle in iter_inputs(files):
        counter = 0
        for raw in handle:
            line = decode(strip_newline(raw))
            if number_lines:
                counter += 1
                out.write(f"{counter:>6}\t{line}\n")
            elif number_nonblank:
                if line:
                    counter += 1
                    out.write(f"{counter:>6}\t{line}\n")
                else:
                    out.write("\n")
            else:
                out.write(line + "\n")


__all__ = ["run_cat"]
