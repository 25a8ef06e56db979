"""
Catalog facade: cache check -> relay fetch -> CSV parse -> cache store -> map.

Failures never escape the public `list_*` methods. Each load produces a
`CatalogResult`; a failed load carries its exception in `error` and an empty
`items` list, so callers (and tests) can tell "empty sheet" from "upstream
outage" without relying on exceptions.

Concurrent loads of the same sheet during a cache miss share one in-flight
fetch. `clear_cache()` forgets both cached rows and in-flight loads, so the
next call always goes back to the relay.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import TracebackType
from typing import Generic, TypeVar

from pipocaflix_backend.config import CatalogSettings, SheetId
from pipocaflix_backend.ingestion.entity_mapper import is_blank_row, map_episode, map_movie, map_series
from pipocaflix_backend.ingestion.sheet_cache import SheetCache
from pipocaflix_backend.integrations.relay.client import RelayClient
from pipocaflix_backend.integrations.sheets.csv_parser import Row, parse_sheet_csv
from pipocaflix_backend.models.catalog import Episode, Movie, Series

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CatalogResult(Generic[T]):
    sheet: SheetId
    items: list[T] = field(default_factory=list)
    error: BaseException | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CatalogSnapshot:
    movies: list[Movie] = field(default_factory=list)
    series: list[Series] = field(default_factory=list)
    errors: Mapping[SheetId, BaseException] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class CatalogService:
    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        relay: RelayClient | None = None,
        cache: SheetCache | None = None,
    ) -> None:
        self.settings = settings or CatalogSettings()
        self._owns_relay = relay is None
        self.relay = relay if relay is not None else RelayClient.from_settings(self.settings)
        # SheetCache defines __len__, so an empty injected cache is falsy.
        self.cache = cache if cache is not None else SheetCache(ttl_seconds=self.settings.cache_ttl_seconds)
        self._inflight: dict[str, asyncio.Task[tuple[Row, ...]]] = {}
        self._generation = 0

    async def __aenter__(self) -> "CatalogService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_relay:
            await self.relay.aclose()

    # --- Rows ---

    async def _load_sheet(self, sheet: SheetId, key: str, generation: int) -> tuple[Row, ...]:
        logger.info(f"Fetching {sheet.value} sheet through relay")
        text = await self.relay.fetch(self.settings.sheet_url(sheet))
        rows = tuple(parse_sheet_csv(text))
        if generation == self._generation:
            self.cache.put(key, rows)
        else:
            logger.info(f"Discarding {sheet.value} rows fetched before cache was cleared")
        return rows

    def _forget_inflight(self, key: str, task: asyncio.Task[tuple[Row, ...]]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    async def _fetch_rows(self, sheet: SheetId) -> tuple[tuple[Row, ...], bool]:
        key = self.settings.cache_key(sheet)
        entry = self.cache.get(key)
        if entry is not None:
            logger.debug(f"Cache hit for {sheet.value} sheet ({len(entry.rows)} rows)")
            return entry.rows, True

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.create_task(self._load_sheet(sheet, key, self._generation))
            self._inflight[key] = task
            task.add_done_callback(lambda done, key=key: self._forget_inflight(key, done))
        else:
            logger.debug(f"Joining in-flight fetch for {sheet.value} sheet")

        # Shielded so one cancelled caller does not cancel the shared load.
        rows = await asyncio.shield(task)
        return rows, False

    async def _load(self, sheet: SheetId, mapper: Callable[[Sequence[str]], T]) -> CatalogResult[T]:
        try:
            rows, from_cache = await self._fetch_rows(sheet)
            items = [mapper(row) for row in rows if not is_blank_row(row)]
        except Exception as exc:
            logger.error(f"Failed to load {sheet.value} catalog: {exc}")
            return CatalogResult(sheet=sheet, error=exc)
        return CatalogResult(sheet=sheet, items=items, from_cache=from_cache)

    # --- Explicit results ---

    async def load_movies(self) -> CatalogResult[Movie]:
        return await self._load(SheetId.MOVIES, map_movie)

    async def load_series(self) -> CatalogResult[Series]:
        return await self._load(SheetId.SERIES, map_series)

    async def load_episodes(self) -> CatalogResult[Episode]:
        return await self._load(SheetId.EPISODES, map_episode)

    # --- Public read surface ---

    async def list_movies(self) -> list[Movie]:
        return (await self.load_movies()).items

    async def list_series(self) -> list[Series]:
        return (await self.load_series()).items

    async def list_episodes(self) -> list[Episode]:
        return (await self.load_episodes()).items

    async def list_all(self) -> CatalogSnapshot:
        """
        Load movies and series concurrently; a failure on one side yields an empty list
        for that side only.
        """

        outcomes = await asyncio.gather(self.load_movies(), self.load_series(), return_exceptions=True)

        results: list[CatalogResult] = []
        for sheet, outcome in zip((SheetId.MOVIES, SheetId.SERIES), outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    # Cancellation and interpreter exits are never absorbed.
                    raise outcome
                logger.error(f"Failed to load {sheet.value} catalog: {outcome}")
                outcome = CatalogResult(sheet=sheet, error=outcome)
            results.append(outcome)

        movies, series = results
        errors = {result.sheet: result.error for result in results if result.error is not None}
        return CatalogSnapshot(movies=movies.items, series=series.items, errors=errors)

    async def clear_cache(self) -> None:
        self._generation += 1
        self._inflight.clear()
        self.cache.clear()
        logger.info("Catalog cache cleared")
