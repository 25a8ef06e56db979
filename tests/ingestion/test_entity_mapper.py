from __future__ import annotations

import pytest

from pipocaflix_backend.ingestion.entity_mapper import (
    is_blank_row,
    map_episode,
    map_movie,
    map_series,
    parse_int_or_default,
    split_pipe_list,
)


def _movie_row(**overrides: str) -> tuple[str, ...]:
    row = [
        "Cidade de Deus",
        "https://cdn.example/cdd.mp4",
        "Sinopse",
        "https://img.example/cdd.jpg",
        "Drama",
        "2002",
        "2h 10min",
        "https://yt.example/cdd",
        "Alexandre Rodrigues|Leandro Firmino",
        "https://img.example/a.jpg|https://img.example/l.jpg",
        "",
        "filme",
        "Dublado",
        "3",
    ]
    positions = {"kind": 11, "audio": 12, "seasons": 13, "cast_names": 8}
    for name, value in overrides.items():
        row[positions[name]] = value
    return tuple(row)


def test_map_movie_reads_named_columns() -> None:
    movie = map_movie(_movie_row())

    assert movie.title == "Cidade de Deus"
    assert movie.link == "https://cdn.example/cdd.mp4"
    assert movie.year == "2002"
    assert movie.duration == "2h 10min"
    assert movie.cast_names == ("Alexandre Rodrigues", "Leandro Firmino")
    assert movie.cast_photos == ("https://img.example/a.jpg", "https://img.example/l.jpg")
    assert movie.kind == "filme"
    assert movie.audio == "Dublado"


def test_map_movie_defaults_kind_and_empty_cast() -> None:
    movie = map_movie(_movie_row(kind="", cast_names=""))
    assert movie.kind == "movie"
    assert movie.cast_names == ()


def test_short_row_yields_defaults_for_missing_positions() -> None:
    movie = map_movie(("Só Título",))
    assert movie.title == "Só Título"
    assert movie.link == ""
    assert movie.cast_names == ()
    assert movie.cast_photos == ()
    assert movie.kind == "movie"
    assert movie.audio == ""


def test_map_series_fixes_kind_and_parses_total_seasons() -> None:
    series = map_series(_movie_row())
    assert series.kind == "series"
    assert series.total_seasons == 3
    assert series.audio == "Dublado"


@pytest.mark.parametrize("raw", ["", "abc", "0", "٣"])
def test_map_series_total_seasons_defaults_to_one(raw: str) -> None:
    assert map_series(_movie_row(seasons=raw)).total_seasons == 1


def test_map_series_row_without_seasons_column() -> None:
    assert map_series(("Sintonia", "https://cdn.example/s")).total_seasons == 1


def test_map_episode_defaults_non_numeric_numbers() -> None:
    episode = map_episode(("3%", "https://cdn.example/3", "dois", ""))
    assert episode.series == "3%"
    assert episode.season == 1
    assert episode.episode == 1


def test_map_episode_parses_numbers() -> None:
    episode = map_episode(("Sintonia", "https://cdn.example/s2e7", "2", "7"))
    assert (episode.season, episode.episode) == (2, 7)


def test_parse_int_or_default_honors_leading_integer() -> None:
    assert parse_int_or_default("4 temporadas", 1) == 4
    assert parse_int_or_default(" 12", 1) == 12
    assert parse_int_or_default(None, 7) == 7


def test_split_pipe_list_keeps_alignment() -> None:
    assert split_pipe_list("a| |c") == ("a", "", "c")
    assert split_pipe_list("   ") == ()


def test_is_blank_row() -> None:
    assert is_blank_row(())
    assert is_blank_row(("", "https://x"))
    assert is_blank_row(("   ", "Filme"))
    assert not is_blank_row(("Filme",))


def test_to_dict_serializes_cast_as_lists() -> None:
    payload = map_movie(_movie_row()).to_dict()
    assert payload["cast_names"] == ["Alexandre Rodrigues", "Leandro Firmino"]
    assert payload["kind"] == "filme"


def test_parse_int_or_default_keeps_negative_values() -> None:
    assert parse_int_or_default("-2", 1) == -2
    assert parse_int_or_default("+3", 1) == 3
    assert map_series(_movie_row(seasons="-2")).total_seasons == -2


def test_non_ascii_digits_resolve_to_default() -> None:
    assert parse_int_or_default("٣", 1) == 1
    assert map_episode(("Sintonia", "https://cdn.example/s", "٣", "1")).season == 1


def test_episode_to_dict_matches_api_fields() -> None:
    payload = map_episode(("Sintonia", "https://cdn.example/s2e7", "2", "7")).to_dict()
    assert payload == {"series": "Sintonia", "link": "https://cdn.example/s2e7", "season": 2, "episode": 7}
