from __future__ import annotations

from pathlib import Path

from pipocaflix_backend.integrations.sheets.csv_parser import parse_csv_line, parse_sheet_csv


def _fixture(name: str) -> str:
    repo_root = Path(__file__).resolve().parents[3]
    return (repo_root / "tests" / "fixtures" / "sheets" / name).read_text(encoding="utf-8")


def test_quoted_field_keeps_comma_and_escaped_quote() -> None:
    assert parse_csv_line('x,"A, ""B""",y') == ("x", 'A, "B"', "y")


def test_parse_sheet_csv_skips_header_and_blank_lines() -> None:
    text = "name,link\n\nFilme A,https://a\n   \nFilme B,https://b\n"
    assert parse_sheet_csv(text) == [("Filme A", "https://a"), ("Filme B", "https://b")]


def test_parse_sheet_csv_drops_first_line_even_when_it_looks_like_data() -> None:
    assert parse_sheet_csv("Filme A,https://a\nFilme B,https://b") == [("Filme B", "https://b")]


def test_fields_are_trimmed_and_trailing_empty_field_is_emitted() -> None:
    assert parse_csv_line("  a , b ,") == ("a", "b", "")


def test_crlf_line_endings_are_trimmed() -> None:
    assert parse_sheet_csv("h1,h2\r\nx,y\r\n") == [("x", "y")]


def test_rows_keep_ragged_lengths_and_order() -> None:
    rows = parse_sheet_csv("h\n1\n2,3,4\n5,6")
    assert rows == [("1",), ("2", "3", "4"), ("5", "6")]


def test_unbalanced_quote_swallows_rest_of_line_without_raising() -> None:
    assert parse_csv_line('a,"b,c') == ("a", "b,c")


def test_header_only_and_empty_input_yield_no_rows() -> None:
    assert parse_sheet_csv("") == []
    assert parse_sheet_csv("Nome,Link") == []


def test_parse_movies_fixture() -> None:
    rows = parse_sheet_csv(_fixture("movies_sample.csv"))

    assert len(rows) == 3
    first = rows[0]
    assert first[0] == "Cidade de Deus"
    assert first[2] == 'Buscapé cresce na favela, "entre" dois mundos'
    assert first[8] == "Alexandre Rodrigues|Leandro Firmino"
    assert first[12] == "Dublado"
    assert rows[1][0] == ""
    assert rows[2][12] == "Legendado"
