"""CLI layer: one subcommand per utility (cat, comm, cut, echo, ...)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, NoReturn, TextIO

import typer
from rich.table import Table

from unixkit.core.extract import build_extract
from unixkit.core.offsets import parse_byte_offset, parse_count, parse_line_offset
from unixkit.core.records import parse_delimiter
from unixkit.errors import FileAccessError, UnixkitError
from unixkit.infrastructure.fs import open_input
from unixkit.infrastructure.logging import get_console, report
from unixkit.runtime import bootstrap, settings
from unixkit.services.cat import run_cat
from unixkit.services.comm import CommOptions, run_comm
from unixkit.services.cut import run_cut
from unixkit.services.echo import run_echo
from unixkit.services.find import EntryType, compile_names, run_find
from unixkit.services.fortune import compile_pattern as compile_fortune_pattern
from unixkit.services.fortune import run_fortune
from unixkit.services.grep import GrepOptions, run_grep
from unixkit.services.grep import compile_pattern as compile_grep_pattern
from unixkit.services.head import run_head
from unixkit.services.tail import run_tail
from unixkit.services.uniq import run_uniq
from unixkit.services.wc import WcOptions, run_wc

app = typer.Typer(help="Classic Unix text utilities", no_args_is_help=True, add_completion=False)

log = logging.getLogger(__name__)

TOOLS: dict[str, str] = {
    "cat": "Concatenate files, optionally numbering lines",
    "comm": "Compare two sorted files line by line",
    "cut": "Select bytes, characters or fields from each line",
    "echo": "Print arguments",
    "find": "Find files and directories by name and type",
    "fortune": "Print a random epigram",
    "grep": "Print lines matching a pattern",
    "head": "Print the first part of files",
    "tail": "Print the last part of files",
    "uniq": "Collapse adjacent repeated lines",
    "wc": "Count lines, words, bytes and characters",
}


def _fail(exc: UnixkitError) -> NoReturn:
    report(str(exc))
    raise typer.Exit(code=1)


@contextmanager
def _output() -> Iterator[TextIO]:
    """Yield stdout for tool output; unixkit errors end the command with exit 1."""
    out = typer.get_text_stream("stdout")
    try:
        yield out
    except UnixkitError as exc:
        log.debug("command failed", exc_info=True)
        out.flush()
        _fail(exc)
    out.flush()


@app.callback()
def init(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    ] = None,
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Emit logs as JSON lines")] = False,
) -> None:
    """Bootstrap environment (dotenv + config + logging) before any command."""
    try:
        bootstrap(force=True, log_level=log_level, json_logs=json_logs)
    except UnixkitError as exc:
        _fail(exc)


@app.command("list")
def list_cmd() -> None:
    """List the available utilities."""
    table = Table(title="Utilities")
    table.add_column("Name")
    table.add_column("Description")
    for name, description in TOOLS.items():
        table.add_row(name, description)
    get_console().print(table)


@app.command("cat")
def cat_cmd(
    files: Annotated[list[str] | None, typer.Argument(help="Input file(s)")] = None,
    number_lines: Annotated[bool, typer.Option("-n", help="Number lines")] = False,
    number_nonblank: Annotated[bool, typer.Option("-b", help="Number nonblank lines")] = False,
) -> None:
    """Concatenate files to standard output."""
    with _output() as out:
        run_cat(files or ["-"], out, number_lines=number_lines, number_nonblank=number_nonblank)


@app.command("comm")
def comm_cmd(
    file1: Annotated[str, typer.Argument(help="Input file 1")],
    file2: Annotated[str, typer.Argument(help="Input file 2")],
    suppress_col1: Annotated[bool, typer.Option("-1", help="Suppress printing of column 1")] = False,
    suppress_col2: Annotated[bool, typer.Option("-2", help="Suppress printing of column 2")] = False,
    suppress_col3: Annotated[bool, typer.Option("-3", help="Suppress printing of column 3")] = False,
    insensitive: Annotated[
        bool, typer.Option("-i", help="Case-insensitive comparison of lines")
    ] = False,
    delimiter: Annotated[
        str | None, typer.Option("-d", "--output-delimiter", help="Output delimiter [default: tab]")
    ] = None,
) -> None:
    """Compare two sorted files line by line."""
    with _output() as out:
        options = CommOptions(
            show_col1=not suppress_col1,
            show_col2=not suppress_col2,
            show_col3=not suppress_col3,
            insensitive=insensitive,
            delimiter=settings().comm.output_delimiter if delimiter is None else delimiter,
        )
        run_comm(file1, file2, options, out)


@app.command("cut")
def cut_cmd(
    files: Annotated[list[str] | None, typer.Argument(help="Input file(s)")] = None,
    delimiter: Annotated[
        str | None, typer.Option("-d", "--delim", help="Field delimiter [default: tab]")
    ] = None,
    fields: Annotated[str | None, typer.Option("-f", "--fields", help="Selected fields")] = None,
    bytes_: Annotated[str | None, typer.Option("-b", "--bytes", help="Selected bytes")] = None,
    chars: Annotated[str | None, typer.Option("-c", "--chars", help="Selected characters")] = None,
) -> None:
    """Print selected parts of lines."""
    with _output() as out:
        extract = build_extract(fields=fields, bytes_=bytes_, chars=chars)
        delim = parse_delimiter(settings().cut.delimiter if delimiter is None else delimiter)
        run_cut(files or ["-"], extract, delim, out)


@app.command("echo")
def echo_cmd(
    text: Annotated[list[str], typer.Argument(help="Input text")],
    omit_newline: Annotated[
        bool, typer.Option("-n", "--no-newline", help="Do not print newline")
    ] = False,
) -> None:
    """Print arguments separated by spaces."""
    with _output() as out:
        run_echo(text, out, omit_newline=omit_newline)


@app.command("find")
def find_cmd(
    paths: Annotated[list[str] | None, typer.Argument(help="Search paths")] = None,
    names: Annotated[
        list[str] | None, typer.Option("-n", "--name", help="Name pattern (regex, repeatable)")
    ] = None,
    types: Annotated[
        list[EntryType] | None, typer.Option("-t", "--type", help="Entry type (repeatable)")
    ] = None,
) -> None:
    """Find files and directories."""
    with _output() as out:
        run_find(paths or ["."], out, names=compile_names(names or []), types=types or [])


@app.command("fortune")
def fortune_cmd(
    sources: Annotated[list[str], typer.Argument(help="Input files or directories")],
    pattern: Annotated[str | None, typer.Option("-m", "--pattern", help="Pattern")] = None,
    insensitive: Annotated[
        bool, typer.Option("-i", "--insensitive", help="Case insensitive pattern matching")
    ] = False,
    seed: Annotated[int | None, typer.Option("-s", "--seed", help="Random seed")] = None,
) -> None:
    """Print a random fortune, or all fortunes matching a pattern."""
    with _output() as out:
        compiled = compile_fortune_pattern(pattern, insensitive=insensitive)
        run_fortune(
            sources,
            out,
            pattern=compiled,
            seed=settings().fortune.seed if seed is None else seed,
        )


@app.command("grep")
def grep_cmd(
    pattern: Annotated[str, typer.Argument(help="Search pattern")],
    files: Annotated[list[str] | None, typer.Argument(help="Input file(s)")] = None,
    recursive: Annotated[bool, typer.Option("-r", "--recursive", help="Recursive search")] = False,
    count: Annotated[bool, typer.Option("-c", "--count", help="Count occurrences")] = False,
    invert_match: Annotated[bool, typer.Option("-v", "--invert-match", help="Invert match")] = False,
    insensitive: Annotated[
        bool, typer.Option("-i", "--insensitive", help="Case-insensitive")
    ] = False,
) -> None:
    """Print lines that match a pattern."""
    with _output() as out:
        compiled = compile_grep_pattern(pattern, insensitive=insensitive)
        options = GrepOptions(recursive=recursive, count=count, invert_match=invert_match)
        run_grep(compiled, files or ["-"], options, out)


@app.command("head")
def head_cmd(
    files: Annotated[list[str] | None, typer.Argument(help="Input file(s)")] = None,
    lines: Annotated[
        str | None, typer.Option("-n", "--lines", help="Number of lines [default: 10]")
    ] = None,
    bytes_: Annotated[str | None, typer.Option("-c", "--bytes", help="Number of bytes")] = None,
) -> None:
    """Print the first lines (or bytes) of files."""
    with _output() as out:
        run_head(
            files or ["-"],
            out,
            lines=None if lines is None else parse_count(lines, unit="line"),
            bytes_=None if bytes_ is None else parse_count(bytes_, unit="byte"),
            default_lines=settings().head.lines,
        )


@app.command("tail")
def tail_cmd(
    files: Annotated[list[str], typer.Argument(help="Input file(s)")],
    lines: Annotated[
        str | None, typer.Option("-n", "--lines", help="Number of lines [default: 10]")
    ] = None,
    bytes_: Annotated[str | None, typer.Option("-c", "--bytes", help="Number of bytes")] = None,
    quiet: Annotated[bool, typer.Option("-q", "--quiet", help="Suppress headers")] = False,
) -> None:
    """Print the last lines (or bytes) of files; +N starts at position N."""
    with _output() as out:
        run_tail(
            files,
            out,
            lines=None if lines is None else parse_line_offset(lines),
            bytes_=None if bytes_ is None else parse_byte_offset(bytes_),
            default_lines=parse_line_offset(settings().tail.lines),
            quiet=quiet,
        )


@app.command("uniq")
def uniq_cmd(
    in_file: Annotated[str, typer.Argument(help="Input file")] = "-",
    out_file: Annotated[str | None, typer.Argument(help="Output file")] = None,
    count: Annotated[bool, typer.Option("-c", "--count", help="Show counts")] = False,
) -> None:
    """Report or omit repeated lines."""
    with _output() as out, open_input(in_file) as handle:
        if out_file is None:
            run_uniq(handle, out, count=count)
            return
        try:
            target = open(out_file, "w", encoding="utf-8")
        except OSError as exc:
            raise FileAccessError(out_file, exc.strerror or str(exc)) from exc
        with target:
            run_uniq(handle, target, count=count)


@app.command("wc")
def wc_cmd(
    files: Annotated[list[str] | None, typer.Argument(help="Input file(s)")] = None,
    lines: Annotated[bool, typer.Option("-l", "--lines", help="Show line count")] = False,
    words: Annotated[bool, typer.Option("-w", "--words", help="Show word count")] = False,
    bytes_: Annotated[bool, typer.Option("-c", "--bytes", help="Show byte count")] = False,
    chars: Annotated[bool, typer.Option("-m", "--chars", help="Show character count")] = False,
    json_out: Annotated[bool, typer.Option("--json", help="Emit JSON lines")] = False,
) -> None:
    """Print line, word and byte counts for each file."""
    with _output() as out:
        options = WcOptions(lines=lines, words=words, bytes=bytes_, chars=chars)
        run_wc(files or ["-"], options, out, json_out=json_out)


if __name__ == "__main__":  # pragma: no cover
    app()
