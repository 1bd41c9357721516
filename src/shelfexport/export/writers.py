"""Serializers for ShelfDocument output."""

from __future__ import annotations

from datetime import date
from enum import Enum
import json
from typing import Any, Protocol, runtime_checkable

import tomli_w

from shelfexport.errors import UsageError
from shelfexport.ingestion.dates import format_date
from shelfexport.ingestion.models import Book, ShelfDocument


class OutputFormat(str, Enum):
    """Closed set of supported output formats."""

    TOML = "toml"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        supported = ", ".join(member.value for member in cls)
        raise UsageError(f"Unsupported output format {value!r} (options: {supported})")

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


def book_to_dict(book: Book) -> dict[str, Any]:
    """Map a book to output fields, omitting absent optional values."""

    payload: dict[str, Any] = {"title": book.title}
    if book.series is not None:
        payload["series"] = book.series.name
        payload["series_volume"] = book.series.volume
    payload["author"] = book.author
    if book.read_at is not None:
        payload["read_at"] = book.read_at
    payload["added_at"] = book.added_at
    return payload


def document_to_dict(document: ShelfDocument) -> dict[str, list[dict[str, Any]]]:
    return {
        "read": [book_to_dict(book) for book in document.read],
        "to_read": [book_to_dict(book) for book in document.to_read],
    }


@runtime_checkable
class DocumentWriter(Protocol):
    """Protocol that every output format writer implements."""

    def render(self, document: ShelfDocument) -> str:
        """Serialize the whole document to text."""


class TOMLWriter:
    """One array of book tables per shelf, with native TOML dates."""

    def render(self, document: ShelfDocument) -> str:
        return tomli_w.dumps(document_to_dict(document))


class JSONWriter:
    """Pretty-printed JSON with ISO date strings."""

    def render(self, document: ShelfDocument) -> str:
        payload = document_to_dict(document)
        return json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default) + "\n"


def _json_default(value: object) -> str:
    if isinstance(value, date):
        return format_date(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_default_writers() -> dict[OutputFormat, DocumentWriter]:
    """Return the writer map for every supported output format."""

    return {
        OutputFormat.TOML: TOMLWriter(),
        OutputFormat.JSON: JSONWriter(),
    }


def render_document(document: ShelfDocument, output_format: OutputFormat | str = OutputFormat.TOML) -> str:
    """Render a document in the requested format."""

    if not isinstance(output_format, OutputFormat):
        output_format = OutputFormat.parse(output_format)
    return build_default_writers()[output_format].render(document)
