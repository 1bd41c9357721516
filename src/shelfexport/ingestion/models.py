"""Canonical data structures shared by the reader, transformer and writers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class GoodreadsRow:
    """The consumed columns of one row of a Goodreads CSV export."""

    title: str
    author: str
    date_read: str
    date_added: str
    shelf: str
    line_no: int | None = None


@dataclass(frozen=True, slots=True)
class SeriesInfo:
    """Series name and the book's volume within it, always set together."""

    name: str
    volume: str


@dataclass(frozen=True, slots=True)
class Book:
    """Normalized book produced from one export row."""

    title: str
    author: str
    shelf: str
    added_at: date
    read_at: date | None = None
    series: SeriesInfo | None = None

    @property
    def series_name(self) -> str | None:
        return self.series.name if self.series is not None else None

    @property
    def series_volume(self) -> str | None:
        return self.series.volume if self.series is not None else None


@dataclass(slots=True)
class ShelfDocument:
    """Books partitioned by shelf, in read-date order."""

    read: list[Book] = field(default_factory=list)
    to_read: list[Book] = field(default_factory=list)
