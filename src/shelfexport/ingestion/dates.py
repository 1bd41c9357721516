"""Date handling for the export's ``YYYY/DD/MM`` columns."""

from __future__ import annotations

from datetime import date, datetime
import re

from shelfexport.errors import DateParseError

# Goodreads exports put the day before the month.
EXPORT_DATE_FORMAT = "%Y/%d/%m"
_EXPORT_DATE_RE = re.compile(r"\d{4}/\d{2}/\d{2}", re.ASCII)


def parse_export_date(value: str, *, field: str) -> date:
    """Parse a required export date or raise DateParseError."""

    if _EXPORT_DATE_RE.fullmatch(value) is None:
        raise DateParseError(field=field, value=value)
    try:
        return datetime.strptime(value, EXPORT_DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(field=field, value=value) from exc


def parse_optional_date(value: str, *, field: str) -> date | None:
    """Parse an export date, treating an empty column as absent."""

    if value == "":
        return None
    return parse_export_date(value, field=field)


def format_date(value: date) -> str:
    """Render a date as ISO ``YYYY-MM-DD``."""

    return value.isoformat()
