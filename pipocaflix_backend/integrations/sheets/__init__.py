"""
Spreadsheet CSV export helpers.
"""

from pipocaflix_backend.integrations.sheets.csv_parser import Row, parse_csv_line, parse_sheet_csv

__all__ = [
    "Row",
    "parse_csv_line",
    "parse_sheet_csv",
]
