"""Logging & console helpers.

Features:
    * RichHandler based console logging (color, tracebacks) on stderr
    * Optional JSON logging mode (one orjson line per record, stderr)
    * Helper utilities (`get_console`, `get_err_console`, `report`) so services
        avoid importing rich directly, keeping presentation concerns centralized.

stdout is reserved for tool output; nothing in this module writes to it except
`get_console()` callers rendering tables.
"""

from __future__ import annotations

import logging
import os
import sys

import orjson
from rich.console import Console
from rich.logging import RichHandler

_INITIALIZED = False
_JSON_MODE = False
_CONSOLE: Console | None = None
_ERR_CONSOLE: Console | None = None

DEFAULT_LEVEL = "WARNING"


class _JsonHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            data = {
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
            }
            if record.exc_info:
                data["exc_info"] = logging.Formatter().formatException(record.exc_info)
            sys.stderr.write(orjson.dumps(data).decode("utf-8") + "\n")
        except Exception:  # pragma: no cover
            self.handleError(record)


def setup_logging(level: str | None = None, json_mode: bool | None = None, *, force: bool = False) -> None:
    global _INITIALIZED, _JSON_MODE
    if _INITIALIZED and not force:
        return
    if json_mode is not None:
        _JSON_MODE = json_mode
    lvl_name = (level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).upper()
    lvl = getattr(logging, lvl_name, None)
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    handler: logging.Handler
    if _JSON_MODE:
        handler = _JsonHandler()
    else:
        handler = RichHandler(
            console=get_err_console(), rich_tracebacks=True, show_path=False, markup=False
        )
    logging.basicConfig(level=lvl, handlers=[handler], force=True, format="%(message)s")
    _INITIALIZED = True


def enable_json_logging() -> None:
    """Switch to JSON logging."""
    setup_logging(json_mode=True, force=True)


def get_console() -> Console:
    """Return the shared stdout Console (tables, panels)."""
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console()
    return _CONSOLE


def get_err_console() -> Console:
    """Return the shared stderr Console used for diagnostics."""
    global _ERR_CONSOLE
    if _ERR_CONSOLE is None:
        _ERR_CONSOLE = Console(stderr=True)
    return _ERR_CONSOLE


def report(message: str) -> None:
    """Write one diagnostic line to stderr verbatim.

    Bypasses rich rendering: no markup, wrapping or tab expansion, since the
    message may carry user-supplied file names.
    """
    stream = get_err_console().file
    stream.write(message + "\n")
    stream.flush()


__all__ = [
    "enable_json_logging",
    "get_console",
    "get_err_console",
    "report",
    "setup_logging",
]
