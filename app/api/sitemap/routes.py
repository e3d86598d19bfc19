from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.metadata.routes import get_service
from app.models.metadata.sitemap import SitemapEntry
from app.services.metadata.service import MetadataService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sitemap", tags=["sitemap"])


@router.get(
    "",
    response_model=list[SitemapEntry],
    response_model_exclude_none=True,
    summary="Sitemap entries for every page",
)
async def get_sitemap(
    service: MetadataService = Depends(get_service),
) -> list[SitemapEntry]:
    try:
        return service.sitemap_entries()
    except Exception as exc:
        logger.exception("GET /sitemap failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
