"""
Catalog ingestion settings.

The defaults below are the production values. The library never reads the
environment on its own; entrypoints call `CatalogSettings.from_env()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from pipocaflix_backend.utils.env import env_str, load_env

RELAY_BASE_URL = "https://autumn-pine-50da.slacarambafdsosobrenome.workers.dev/"
SHEETS_EXPORT_BASE_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vS9sXjpyoG6N147QcYeh50AIXF6-Bmp0sCt4fqDblpjw466UBvTWXW8AZr4_PzUTWdRxYb5kUa0uOi4"
    "/pub?output=csv"
)

CACHE_TTL_SECONDS = 5 * 60
REQUEST_TIMEOUT_SECONDS = 12.0
MAX_ATTEMPTS = 3
BACKOFF_UNIT_SECONDS = 0.8


class SheetId(str, Enum):
    """Logical sheets published by the catalog spreadsheet."""

    MOVIES = "movies"
    SERIES = "series"
    EPISODES = "episodes"


DEFAULT_SHEET_GIDS: Mapping[SheetId, int] = {
    SheetId.MOVIES: 300449936,
    SheetId.SERIES: 413183487,
    SheetId.EPISODES: 1394045118,
}


@dataclass(frozen=True)
class CatalogSettings:
    relay_base_url: str = RELAY_BASE_URL
    sheets_base_url: str = SHEETS_EXPORT_BASE_URL
    sheet_gids: Mapping[SheetId, int] = field(default_factory=lambda: dict(DEFAULT_SHEET_GIDS))
    cache_ttl_seconds: float = CACHE_TTL_SECONDS
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    max_attempts: int = MAX_ATTEMPTS
    backoff_unit_seconds: float = BACKOFF_UNIT_SECONDS

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """
        Build settings from `.env` / process environment.

        Only the two endpoint URLs can be overridden; blank values keep the defaults.
        """

        load_env()
        return cls(
            relay_base_url=env_str("PIPOCAFLIX_RELAY_URL", RELAY_BASE_URL),
            sheets_base_url=env_str("PIPOCAFLIX_SHEETS_URL", SHEETS_EXPORT_BASE_URL),
        )

    def sheet_gid(self, sheet: SheetId) -> int:
        return int(self.sheet_gids[sheet])

    def sheet_url(self, sheet: SheetId) -> str:
        return f"{self.sheets_base_url}&gid={self.sheet_gid(sheet)}"

    def cache_key(self, sheet: SheetId) -> str:
        return f"sheet_{self.sheet_gid(sheet)}"
