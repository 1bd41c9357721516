"""Runtime configuration for export conversion."""

from __future__ import annotations

from dataclasses import dataclass
import codecs
import os
from typing import Mapping

from shelfexport.errors import UsageError
from shelfexport.export.writers import OutputFormat


DEFAULT_OUTPUT_FORMAT = OutputFormat.TOML
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_log_level(*, name: str, raw_value: str) -> str:
    level = raw_value.strip().upper()
    if level not in LOG_LEVELS:
        raise UsageError(f"{name} must be one of: {', '.join(LOG_LEVELS)}")
    return level


def _parse_encoding(*, name: str, raw_value: str) -> str:
    try:
        return codecs.lookup(raw_value).name
    except LookupError as exc:
        raise UsageError(f"{name} names an unknown encoding: {raw_value!r}") from exc


@dataclass(frozen=True, slots=True)
class ExportSettings:
    """Validated conversion settings."""

    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    encoding: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExportSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        format_raw = source.get("SHELFEXPORT_FORMAT", "").strip()
        encoding_raw = source.get("SHELFEXPORT_ENCODING", "").strip()
        log_level_raw = source.get("SHELFEXPORT_LOG_LEVEL", "").strip()

        output_format = DEFAULT_OUTPUT_FORMAT
        if format_raw:
            try:
                output_format = OutputFormat.parse(format_raw)
            except UsageError as exc:
                raise UsageError(f"SHELFEXPORT_FORMAT: {exc}") from exc

        encoding = _parse_encoding(name="SHELFEXPORT_ENCODING", raw_value=encoding_raw) if encoding_raw else None
        log_level = (
            _parse_log_level(name="SHELFEXPORT_LOG_LEVEL", raw_value=log_level_raw)
            if log_level_raw
            else DEFAULT_LOG_LEVEL
        )

        return cls(
            output_format=output_format,
            encoding=encoding,
            log_level=log_level,
        )
