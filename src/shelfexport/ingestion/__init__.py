"""Ingestion package interfaces."""

from .models import Book, GoodreadsRow, SeriesInfo, ShelfDocument
from .reader import GoodreadsCSVReader
from .transformer import build_document

__all__ = [
    "Book",
    "GoodreadsCSVReader",
    "GoodreadsRow",
    "SeriesInfo",
    "ShelfDocument",
    "build_document",
]
