"""
Catalog records shared across the API and scripts.
"""

from pipocaflix_backend.models.catalog import Episode, Movie, Series

__all__ = [
    "Episode",
    "Movie",
    "Series",
]
