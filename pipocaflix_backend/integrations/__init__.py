"""
External system integrations (spreadsheet relay, CSV exports, etc.).

New external clients should live under this namespace so they remain
decoupled from app entrypoints (`api/`) and CLI scripts (`scripts/`).
"""
