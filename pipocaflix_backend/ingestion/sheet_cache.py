"""
Time-bounded in-memory cache of parsed sheet rows.

Entries older than the TTL are ignored on read but left in place; the next
`put` for the same key overwrites them. Nothing is evicted automatically.
"""
from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from pipocaflix_backend.config import CACHE_TTL_SECONDS
from pipocaflix_backend.integrations.sheets.csv_parser import Row


@dataclass(frozen=True)
class CacheEntry:
    rows: tuple[Row, ...]
    captured_at: float


class SheetCache:
    def __init__(
        self,
        *,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.captured_at >= self.ttl_seconds:
            return None
        return entry

    def put(self, key: str, rows: Iterable[Sequence[str]]) -> CacheEntry:
        entry = CacheEntry(rows=tuple(tuple(row) for row in rows), captured_at=self._clock())
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()
