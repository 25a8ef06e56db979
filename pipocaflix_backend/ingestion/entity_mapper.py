"""
Row -> record mapping for the catalog sheets.

Each sheet has a fixed column layout, described once in the `*_COLUMNS`
tables below. Mapping never raises: missing or malformed cells fall back to
the record's defaults.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from pipocaflix_backend.models.catalog import MOVIE_KIND, Episode, Movie, Series

# Column 10 of the movie/series sheets is not read by the catalog.
_SHARED_COLUMNS: Mapping[str, int] = {
    "title": 0,
    "link": 1,
    "synopsis": 2,
    "cover": 3,
    "category": 4,
    "year": 5,
    "duration": 6,
    "trailer": 7,
    "cast_names": 8,
    "cast_photos": 9,
    "audio": 12,
}

MOVIE_COLUMNS: Mapping[str, int] = {**_SHARED_COLUMNS, "kind": 11}
SERIES_COLUMNS: Mapping[str, int] = {**_SHARED_COLUMNS, "total_seasons": 13}
EPISODE_COLUMNS: Mapping[str, int] = {
    "series": 0,
    "link": 1,
    "season": 2,
    "episode": 3,
}

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def _cell(row: Sequence[str], columns: Mapping[str, int], name: str) -> str:
    index = columns[name]
    if index >= len(row):
        return ""
    value = row[index]
    return value.strip() if isinstance(value, str) else ""


def parse_int_or_default(value: str | None, default: int) -> int:
    """
    Parse the leading integer of `value` ("3 temporadas" -> 3).

    Missing, unparseable and zero values resolve to `default`. Only ASCII digits count.
    """

    if value is None:
        return default
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return default
    parsed = int(match.group(1))
    return parsed if parsed != 0 else default


def split_pipe_list(value: str | None) -> tuple[str, ...]:
    if not value or not value.strip():
        return ()
    # Keep empty entries so name/photo lists stay aligned.
    return tuple(part.strip() for part in value.split("|"))


def is_blank_row(row: Sequence[str]) -> bool:
    if not row:
        return True
    first = row[0]
    return not (first.strip() if isinstance(first, str) else first)


def map_movie(row: Sequence[str]) -> Movie:
    def cell(name: str) -> str:
        return _cell(row, MOVIE_COLUMNS, name)

    return Movie(
        title=cell("title"),
        link=cell("link"),
        synopsis=cell("synopsis"),
        cover=cell("cover"),
        category=cell("category"),
        year=cell("year"),
        duration=cell("duration"),
        trailer=cell("trailer"),
        cast_names=split_pipe_list(cell("cast_names")),
        cast_photos=split_pipe_list(cell("cast_photos")),
        kind=cell("kind") or MOVIE_KIND,
        audio=cell("audio"),
    )


def map_series(row: Sequence[str]) -> Series:
    def cell(name: str) -> str:
        return _cell(row, SERIES_COLUMNS, name)

    return Series(
        title=cell("title"),
        link=cell("link"),
        synopsis=cell("synopsis"),
        cover=cell("cover"),
        category=cell("category"),
        year=cell("year"),
        duration=cell("duration"),
        trailer=cell("trailer"),
        cast_names=split_pipe_list(cell("cast_names")),
        cast_photos=split_pipe_list(cell("cast_photos")),
        audio=cell("audio"),
        total_seasons=parse_int_or_default(cell("total_seasons"), 1),
    )


def map_episode(row: Sequence[str]) -> Episode:
    def cell(name: str) -> str:
        return _cell(row, EPISODE_COLUMNS, name)

    return Episode(
        series=cell("series"),
        link=cell("link"),
        season=parse_int_or_default(cell("season"), 1),
        episode=parse_int_or_default(cell("episode"), 1),
    )
