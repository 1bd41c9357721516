"""Split Goodreads series annotations out of book titles.

Goodreads appends the series to the title, e.g.
``"Mockingjay (The Hunger Games, #3)"``. The leading capture is greedy, so
when a title holds several parenthesized groups only the last one that fits
``(<name>, #<volume>)`` is treated as the series.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from shelfexport.ingestion.models import SeriesInfo

_SERIES_SUFFIX_RE = re.compile(r"(.+)\((.+), #(.+)\)$")


@dataclass(frozen=True, slots=True)
class PlainTitle:
    """Title without a series annotation, kept exactly as exported."""

    title: str


@dataclass(frozen=True, slots=True)
class SeriesTitle:
    """Title with its trailing series annotation split off."""

    title: str
    series: SeriesInfo


ParsedTitle = PlainTitle | SeriesTitle


def parse_title(raw: str) -> ParsedTitle:
    """Return the title with any trailing ``(<series>, #<volume>)`` extracted.

    Only the leading title is trimmed; series name and volume are returned as
    captured. A title that does not match is returned untouched.
    """

    match = _SERIES_SUFFIX_RE.search(raw)
    if match is None:
        return PlainTitle(title=raw)

    title, name, volume = match.groups()
    return SeriesTitle(title=title.strip(), series=SeriesInfo(name=name, volume=volume))
