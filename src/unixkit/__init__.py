"""Classic Unix text utilities (cat, cut, comm, find, grep, head, tail, uniq, wc, ...)."""

__version__ = "0.1.0"

__all__ = [
    "cli",
]
