"""
Dependency injection for the catalog service and other shared resources.
"""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from pipocaflix_backend.ingestion.catalog_service import CatalogService

logger = logging.getLogger(__name__)


def get_catalog_service(request: Request) -> CatalogService:
    """
    Returns the process-wide CatalogService created during app startup.
    """
    service = getattr(request.app.state, "catalog_service", None)
    if service is None:
        logger.error("Catalog service requested before application startup")
        raise HTTPException(status_code=503, detail="Catalog service is not ready")
    return service


# Type alias for dependency injection
Catalog = Annotated[CatalogService, Depends(get_catalog_service)]
