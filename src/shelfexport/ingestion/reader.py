"""CSV reader for Goodreads library exports with charset detection."""

from __future__ import annotations

import codecs
import csv
import io
import logging
from pathlib import Path

from charset_normalizer import from_bytes

from shelfexport.errors import FileOpenError, RowDecodeError
from shelfexport.ingestion.models import GoodreadsRow

logger = logging.getLogger(__name__)

# Export column -> GoodreadsRow attribute.
REQUIRED_COLUMNS = {
    "Title": "title",
    "Author": "author",
    "Date Read": "date_read",
    "Date Added": "date_added",
    "Exclusive Shelf": "shelf",
}


class GoodreadsCSVReader:
    """Read a Goodreads export file into ordered GoodreadsRow values."""

    def __init__(self, encoding: str | None = None) -> None:
        self._encoding = encoding

    def read(self, path: str | Path) -> list[GoodreadsRow]:
        source = Path(path)
        raw = self._read_bytes(source)
        text = self._decode(source, raw)
        rows = self._parse_rows(source, text)
        logger.info("Read %d rows from %s", len(rows), source)
        return rows

    def _read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileOpenError(path, f"Failed to read export file: {exc}") from exc

    def _decode(self, path: Path, raw: bytes) -> str:
        encoding = self._encoding or self._detect_encoding(raw)
        logger.debug("Decoding %s as %s", path, encoding)
        try:
            text = raw.decode(encoding)
        except LookupError as exc:
            raise RowDecodeError(path, f"Unknown encoding {encoding!r}") from exc
        except UnicodeDecodeError as exc:
            raise RowDecodeError(path, f"Could not decode export as {encoding}: {exc}") from exc
        # An explicit utf-8 encoding leaves the BOM in place.
        return text.removeprefix("\ufeff")

    def _detect_encoding(self, raw: bytes) -> str:
        if raw.startswith(codecs.BOM_UTF8):
            return "utf-8-sig"

        try:
            raw.decode("utf-8")
            return "utf-8"
        except UnicodeDecodeError:
            pass

        best = from_bytes(raw).best()
        if best and best.encoding:
            name = best.encoding.lower()
            if name in {"windows-1251", "cp1251"}:
                return "cp1251"
            return best.encoding
        return "cp1251"

    def _parse_rows(self, path: Path, text: str) -> list[GoodreadsRow]:
        reader = csv.DictReader(io.StringIO(text, newline=""), strict=True)
        rows: list[GoodreadsRow] = []
        try:
            header = reader.fieldnames
            if header is None:
                raise RowDecodeError(path, "Export file is empty")

            missing = [column for column in REQUIRED_COLUMNS if column not in header]
            if missing:
                raise RowDecodeError(path, f"Missing required columns: {', '.join(missing)}", line_no=1)

            for record in reader:
                line_no = reader.line_num
                values: dict[str, str] = {}
                for column, attribute in REQUIRED_COLUMNS.items():
                    value = record.get(column)
                    if value is None:
                        raise RowDecodeError(path, f"Row has no value for column {column!r}", line_no=line_no)
                    values[attribute] = value
                rows.append(GoodreadsRow(line_no=line_no, **values))
        except csv.Error as exc:
            raise RowDecodeError(path, f"Malformed CSV: {exc}", line_no=reader.line_num) from exc

        return rows
