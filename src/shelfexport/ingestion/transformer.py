"""Turn export rows into normalized books and a shelf-partitioned document."""

from __future__ import annotations

from datetime import date
import logging
from typing import Iterable, Sequence

from shelfexport.errors import DateParseError
from shelfexport.ingestion.dates import parse_export_date, parse_optional_date
from shelfexport.ingestion.models import Book, GoodreadsRow, ShelfDocument
from shelfexport.ingestion.titles import SeriesTitle, parse_title

logger = logging.getLogger(__name__)

READ_SHELF = "read"
TO_READ_SHELF = "to-read"


def book_from_row(row: GoodreadsRow) -> Book:
    """Normalize one export row.

    Raises:
        DateParseError: if either date column is malformed. The error carries
            the row's line number when the row has one.
    """

    parsed = parse_title(row.title)
    try:
        read_at = parse_optional_date(row.date_read, field="Date Read")
        added_at = parse_export_date(row.date_added, field="Date Added")
    except DateParseError as exc:
        if exc.line_no is not None or row.line_no is None:
            raise
        raise DateParseError(field=exc.field, value=exc.value, line_no=row.line_no) from exc

    return Book(
        title=parsed.title,
        author=row.author,
        shelf=row.shelf,
        added_at=added_at,
        read_at=read_at,
        series=parsed.series if isinstance(parsed, SeriesTitle) else None,
    )


def normalize_rows(rows: Iterable[GoodreadsRow]) -> list[Book]:
    """Normalize rows in input order, stopping at the first bad row."""

    return [book_from_row(row) for row in rows]


def _read_date_key(book: Book) -> tuple[bool, date]:
    # Unread books first; sorted() is stable so ties keep input order.
    return (book.read_at is not None, book.read_at or date.min)


def sort_books(books: Sequence[Book]) -> list[Book]:
    """Return books ordered by read date, books without one first."""

    return sorted(books, key=_read_date_key)


def partition_books(books: Iterable[Book]) -> ShelfDocument:
    """Bucket books by exact shelf name, dropping every other shelf."""

    document = ShelfDocument()
    dropped = 0
    for book in books:
        if book.shelf == READ_SHELF:
            document.read.append(book)
        elif book.shelf == TO_READ_SHELF:
            document.to_read.append(book)
        else:
            dropped += 1

    logger.debug(
        "Partitioned books: read=%d to_read=%d dropped=%d",
        len(document.read),
        len(document.to_read),
        dropped,
    )
    return document


def build_document(rows: Iterable[GoodreadsRow]) -> ShelfDocument:
    """Normalize, sort and partition export rows into a ShelfDocument."""

    books = normalize_rows(rows)
    return partition_books(sort_books(books))
