from __future__ import annotations

from datetime import date

import pytest

from shelfexport.errors import DateParseError
from shelfexport.ingestion.models import Book, GoodreadsRow, SeriesInfo
from shelfexport.ingestion.transformer import (
    book_from_row,
    build_document,
    normalize_rows,
    partition_books,
    sort_books,
)


def _row(
    title: str,
    *,
    date_read: str = "",
    date_added: str = "2020/01/01",
    shelf: str = "read",
    author: str = "Author",
    line_no: int | None = None,
) -> GoodreadsRow:
    return GoodreadsRow(
        title=title,
        author=author,
        date_read=date_read,
        date_added=date_added,
        shelf=shelf,
        line_no=line_no,
    )


def _book(title: str, *, read_at: date | None = None, shelf: str = "read") -> Book:
    return Book(title=title, author="Author", shelf=shelf, added_at=date(2020, 1, 1), read_at=read_at)


def test_book_from_row_normalizes_every_field() -> None:
    book = book_from_row(
        _row(
            "Mockingjay (The Hunger Games, #3)",
            author="Suzanne Collins",
            date_read="2021/15/06",
            date_added="2020/02/03",
        )
    )

    assert book.title == "Mockingjay"
    assert book.series == SeriesInfo(name="The Hunger Games", volume="3")
    assert book.series_name == "The Hunger Games"
    assert book.series_volume == "3"
    assert book.author == "Suzanne Collins"
    assert book.read_at == date(2021, 6, 15)
    assert book.added_at == date(2020, 3, 2)
    assert book.shelf == "read"


def test_book_without_series_or_read_date_has_absent_fields() -> None:
    book = book_from_row(_row("1984", shelf="to-read"))

    assert book.title == "1984"
    assert book.series is None
    assert book.series_name is None
    assert book.series_volume is None
    assert book.read_at is None


def test_date_errors_carry_the_row_line_number() -> None:
    with pytest.raises(DateParseError) as excinfo:
        book_from_row(_row("Dune", date_read="2021-06-15", line_no=7))

    assert excinfo.value.field == "Date Read"
    assert excinfo.value.line_no == 7
    assert "line 7" in str(excinfo.value)


def test_malformed_added_date_aborts_the_whole_batch() -> None:
    rows = [
        _row("First", date_read="2020/01/01"),
        _row("Second", date_added="not a date"),
        _row("Third", date_read="2020/02/01"),
    ]

    with pytest.raises(DateParseError, match="Date Added"):
        normalize_rows(rows)

    with pytest.raises(DateParseError):
        build_document(rows)


def test_unread_books_sort_first_and_dated_books_ascend() -> None:
    document = build_document(
        [
            _row("June", date_read="2021/15/06"),
            _row("Unread"),
            _row("January", date_read="2020/01/01"),
        ]
    )

    assert [book.title for book in document.read] == ["Unread", "January", "June"]
    assert document.to_read == []


def test_sort_keeps_input_order_for_ties() -> None:
    same_day = date(2021, 5, 5)
    books = [
        _book("a", read_at=same_day),
        _book("b"),
        _book("c", read_at=same_day),
        _book("d"),
        _book("e", read_at=date(2020, 1, 1)),
    ]

    assert [book.title for book in sort_books(books)] == ["b", "d", "e", "a", "c"]


def test_partition_routes_by_exact_shelf_and_drops_others() -> None:
    books = [
        _book("read-1", shelf="read"),
        _book("queued", shelf="to-read"),
        _book("current", shelf="currently-reading"),
        _book("custom", shelf="Read"),
        _book("read-2", shelf="read"),
    ]

    document = partition_books(books)

    assert [book.title for book in document.read] == ["read-1", "read-2"]
    assert [book.title for book in document.to_read] == ["queued"]
    assert all(book.shelf == "read" for book in document.read)
    assert all(book.shelf == "to-read" for book in document.to_read)


def test_partition_only_places_the_read_and_to_read_shelves() -> None:
    books = [_book("done", shelf="finished"), _book("next", shelf="wishlist"), _book("old", shelf="read")]

    document = partition_books(books)

    assert [book.title for book in document.read] == ["old"]
    assert document.to_read == []


def test_dropped_shelves_are_still_validated() -> None:
    with pytest.raises(DateParseError):
        build_document([_row("Abandoned", shelf="did-not-finish", date_added="2020-01-01")])
