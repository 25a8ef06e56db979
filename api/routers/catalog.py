"""
Catalog read endpoints for movies, series, and episodes.

Upstream outages never surface as errors here: the catalog service degrades a
failed sheet to an empty list.
"""
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from api.deps import Catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])


# --- Pydantic models ---

class Movie(BaseModel):
    title: str
    link: str
    synopsis: str
    cover: str
    category: str
    year: str
    duration: str
    trailer: str
    cast_names: list[str]
    cast_photos: list[str]
    kind: str
    audio: str


class Series(BaseModel):
    title: str
    link: str
    synopsis: str
    cover: str
    category: str
    year: str
    duration: str
    trailer: str
    cast_names: list[str]
    cast_photos: list[str]
    kind: str
    audio: str
    total_seasons: int


class Episode(BaseModel):
    series: str
    link: str
    season: int
    episode: int


class CatalogOverview(BaseModel):
    movies: list[Movie]
    series: list[Series]


class CacheCleared(BaseModel):
    cleared: bool


# --- Endpoints ---

@router.get("", response_model=CatalogOverview)
async def get_catalog(catalog: Catalog) -> dict:
    """Movies and series, loaded concurrently."""
    snapshot = await catalog.list_all()
    return {
        "movies": [movie.to_dict() for movie in snapshot.movies],
        "series": [series.to_dict() for series in snapshot.series],
    }


@router.get("/movies", response_model=list[Movie])
async def list_movies(catalog: Catalog) -> list[dict]:
    return [movie.to_dict() for movie in await catalog.list_movies()]


@router.get("/series", response_model=list[Series])
async def list_series(catalog: Catalog) -> list[dict]:
    return [series.to_dict() for series in await catalog.list_series()]


@router.get("/episodes", response_model=list[Episode])
async def list_episodes(catalog: Catalog) -> list[dict]:
    return [episode.to_dict() for episode in await catalog.list_episodes()]


@router.post("/cache/clear", response_model=CacheCleared)
async def clear_cache(catalog: Catalog) -> dict:
    """Drop cached sheet rows so the next read goes back to the relay."""
    await catalog.clear_cache()
    return {"cleared": True}
