"""CLI command converting a Goodreads CSV export into a shelf document."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from shelfexport.config import LOG_LEVELS, ExportSettings
from shelfexport.errors import ShelfExportError
from shelfexport.export.writers import OutputFormat, render_document
from shelfexport.ingestion.reader import GoodreadsCSVReader
from shelfexport.ingestion.transformer import build_document

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level, stream=sys.stderr)


def _build_parser(settings: ExportSettings) -> argparse.ArgumentParser:
    formats = OutputFormat.choices()
    parser = argparse.ArgumentParser(
        prog="shelfexport",
        description="Convert a Goodreads library export into read / to_read collections",
    )
    parser.add_argument("path", help="Goodreads CSV export file")
    parser.add_argument(
        "--format",
        choices=formats,
        type=str.lower,
        default=settings.output_format.value,
        help=f"export format (options: {', '.join(formats)}; default: %(default)s)",
    )
    parser.add_argument(
        "--encoding",
        default=settings.encoding,
        help="Input encoding; detected from the file content when omitted",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=settings.log_level,
        help="Logging level for messages written to stderr (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    try:
        settings = ExportSettings.from_env()
    except ShelfExportError as exc:
        _configure_logging("WARNING")
        logger.error("Configuration error: %s", exc)
        return 1

    args = _build_parser(settings).parse_args(argv)
    _configure_logging(args.log_level)

    try:
        rows = GoodreadsCSVReader(encoding=args.encoding).read(args.path)
        document = build_document(rows)
        output = render_document(document, OutputFormat.parse(args.format))
    except ShelfExportError as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    logger.info(
        "Converted %d rows: read=%d to_read=%d",
        len(rows),
        len(document.read),
        len(document.to_read),
    )
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
