"""Domain models (Pydantic) for configuration defaults and structured results."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unixkit.core.offsets import parse_offset
from unixkit.core.records import parse_delimiter
from unixkit.errors import InvalidDelimiter

# -------------------- Configuration (unixkit.yaml) -------------------- #


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class CutSettings(_Section):
    delimiter: str = "\t"

    @field_validator("delimiter")
    @classmethod
    def _one_byte(cls, value: str) -> str:
        try:
            return parse_delimiter(value)
        except InvalidDelimiter as exc:
            raise ValueError(str(exc)) from exc


class HeadSettings(_Section):
    lines: int = Field(default=10, ge=0)


class TailSettings(_Section):
    lines: str = "10"

    @field_validator("lines", mode="before")
    @classmethod
    def _offset(cls, value: object) -> str:
        text = str(value)
        if parse_offset(text) is None:
            raise ValueError(f"illegal line count -- {text}")
        return text


class CommSettings(_Section):
    output_delimiter: str = "\t"


class FortuneSettings(_Section):
    seed: int | None = None


class Settings(_Section):
    """User defaults loaded from ``unixkit.yaml``; every section is optional."""

    cut: CutSettings = Field(default_factory=CutSettings)
    head: HeadSettings = Field(default_factory=HeadSettings)
    tail: TailSettings = Field(default_factory=TailSettings)
    comm: CommSettings = Field(default_factory=CommSettings)
    fortune: FortuneSettings = Field(default_factory=FortuneSettings)


# -------------------- Results -------------------- #


class FileCounts(BaseModel):
    """Counts reported by ``wc`` for one input (or the total)."""

    name: str
    lines: int = 0
    words: int = 0
    bytes: int = 0
    chars: int = 0

    def __add__(self, other: FileCounts) -> FileCounts:
        return FileCounts(
            name=self.name,
            lines=self.lines + other.lines,
            words=self.words + other.words,
            bytes=self.bytes + other.bytes,
            chars=self.chars + other.chars,
        )


class Fortune(BaseModel):
    source: str
    text: str


__all__ = [
    "CommSettings",
    "CutSettings",
    "FileCounts",
    "Fortune",
    "FortuneSettings",
    "HeadSettings",
    "Settings",
    "TailSettings",
]
