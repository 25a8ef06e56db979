"""
Ingestion pipeline turning the published catalog sheets into records.
"""

from pipocaflix_backend.ingestion.catalog_service import CatalogResult, CatalogService, CatalogSnapshot
from pipocaflix_backend.ingestion.entity_mapper import map_episode, map_movie, map_series
from pipocaflix_backend.ingestion.sheet_cache import CacheEntry, SheetCache

__all__ = [
    "CacheEntry",
    "CatalogResult",
    "CatalogService",
    "CatalogSnapshot",
    "SheetCache",
    "map_episode",
    "map_movie",
    "map_series",
]
