"""
Parser for the CSV export of a published spreadsheet.

The export is line oriented: quoted fields may contain commas and doubled
quotes, but never line breaks. Malformed input degrades to odd-looking rows
rather than raising.
"""

from __future__ import annotations

Row = tuple[str, ...]


def parse_csv_line(line: str) -> Row:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    length = len(line)
    while i < length:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < length and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    # The last field has no trailing delimiter.
    fields.append("".join(current).strip())
    return tuple(fields)


def parse_sheet_csv(text: str) -> list[Row]:
    """
    Parse a CSV export into rows of trimmed string fields.

    The first line is always treated as a header and dropped. Blank lines are
    skipped. Row order and column order are preserved; rows may have
    different lengths.
    """

    rows: list[Row] = []
    for raw_line in text.split("\n")[1:]:
        line = raw_line.strip()
        if not line:
            continue
        rows.append(parse_csv_line(line))
    return rows
