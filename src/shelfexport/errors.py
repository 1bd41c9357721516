"""Error taxonomy for export conversion. Every error is fatal to a run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ShelfExportError(Exception):
    """Base error for this package."""


class UsageError(ShelfExportError):
    """Raised for unsupported output formats or invalid configuration."""


@dataclass(slots=True)
class FileOpenError(ShelfExportError):
    """The export file could not be read."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


@dataclass(slots=True)
class RowDecodeError(ShelfExportError):
    """The export file is not a well-formed Goodreads CSV."""

    path: Path
    message: str
    line_no: int | None = None

    def __str__(self) -> str:
        if self.line_no is None:
            return f"{self.message} (path={self.path})"
        return f"{self.message} (path={self.path}, line={self.line_no})"


@dataclass(slots=True)
class DateParseError(ShelfExportError):
    """A date column does not follow the export's YYYY/DD/MM layout."""

    field: str
    value: str
    line_no: int | None = None

    def __str__(self) -> str:
        location = "" if self.line_no is None else f" on line {self.line_no}"
        return f"Invalid {self.field} {self.value!r}{location}: expected YYYY/DD/MM"
