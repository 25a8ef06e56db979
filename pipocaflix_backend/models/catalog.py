from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

MOVIE_KIND = "movie"
SERIES_KIND = "series"


@dataclass(frozen=True)
class Movie:
    """
    A single catalog movie.

    `cast_names` and `cast_photos` are positionally aligned: photo `i` belongs to name `i`.
    """

    title: str
    link: str = ""
    synopsis: str = ""
    cover: str = ""
    category: str = ""
    year: str = ""
    duration: str = ""
    trailer: str = ""
    cast_names: tuple[str, ...] = ()
    cast_photos: tuple[str, ...] = ()
    kind: str = MOVIE_KIND
    audio: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["cast_names"] = list(self.cast_names)
        payload["cast_photos"] = list(self.cast_photos)
        return payload


@dataclass(frozen=True)
class Series:
    title: str
    link: str = ""
    synopsis: str = ""
    cover: str = ""
    category: str = ""
    year: str = ""
    duration: str = ""
    trailer: str = ""
    cast_names: tuple[str, ...] = ()
    cast_photos: tuple[str, ...] = ()
    kind: str = SERIES_KIND
    audio: str = ""
    total_seasons: int = 1

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["cast_names"] = list(self.cast_names)
        payload["cast_photos"] = list(self.cast_photos)
        return payload


@dataclass(frozen=True)
class Episode:
    series: str
    link: str = ""
    season: int = 1
    episode: int = 1

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
