"""
PipocaFlix Backend API - FastAPI application.

Provides read endpoints for the movie, series, and episode catalog published
through the spreadsheet relay, plus a cache invalidation endpoint.
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import catalog
from pipocaflix_backend.config import CatalogSettings
from pipocaflix_backend.ingestion.catalog_service import CatalogService

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://pipocaflix.example,https://www.pipocaflix.example
    """
    origins_str = os.getenv("CORS_ALLOW_ORIGINS", "")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting up PipocaFlix Backend API...")
    service = CatalogService(CatalogSettings.from_env())
    app.state.catalog_service = service
    yield
    # Shutdown
    logger.info("Shutting down PipocaFlix Backend API...")
    await service.aclose()
    app.state.catalog_service = None


app = FastAPI(
    title="PipocaFlix API",
    description="Catalog API for PipocaFlix - movies, series and episodes",
    version="0.1.0",
    lifespan=lifespan,
)

# If no origins configured, allows all origins but disables credentials
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(catalog.router, prefix="/api/v1")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "pipocaflix-backend"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
