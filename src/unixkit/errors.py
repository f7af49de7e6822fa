"""Error taxonomy shared by every utility.

Configuration errors are fatal and raised before any input is read. File
access errors are reported per file by the processing loops and only become
fatal where a tool cannot continue without the file (comm, uniq, fortune).
"""

from __future__ import annotations


class UnixkitError(Exception):
    """Base class for all unixkit errors."""


class ConfigurationError(UnixkitError):
    """Invalid flags, delimiters, counts or position lists."""


class IllegalListValue(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f'illegal list value: "{value}"')


class InvalidRangeOrder(ConfigurationError):
    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"First number in range ({start}) must be lower than second number ({end})"
        )


class InvalidDelimiter(ConfigurationError):
    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(f'--delim "{delimiter}" must be a single byte')


class FileAccessError(UnixkitError):
    """A file could not be opened or read; str() is ``<filename>: <reason>``."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")


__all__ = [
    "ConfigurationError",
    "FileAccessError",
    "IllegalListValue",
    "InvalidDelimiter",
    "InvalidRangeOrder",
    "UnixkitError",
]
