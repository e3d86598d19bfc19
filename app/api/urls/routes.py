from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.metadata.routes import get_builder
from app.models.common import UrlResponse
from app.models.metadata.sitemap import SanitizedUrl
from app.services.metadata.builder import MetadataBuilder

router = APIRouter(prefix="/urls", tags=["urls"])


@router.get("/og-image", response_model=UrlResponse, summary="Social image URL")
async def og_image_url(
    path: str,
    builder: MetadataBuilder = Depends(get_builder),
) -> UrlResponse:
    return UrlResponse(url=builder.og_image_url(path))


@router.get("/canonical", response_model=UrlResponse, summary="Canonical page URL")
async def canonical_url(
    path: str,
    builder: MetadataBuilder = Depends(get_builder),
) -> UrlResponse:
    return UrlResponse(url=builder.canonical_url(path))


@router.get("/sanitize", response_model=SanitizedUrl, summary="Sanitise a URL")
async def sanitize_url(
    url: str,
    builder: MetadataBuilder = Depends(get_builder),
) -> SanitizedUrl:
    """Normalise *url*; unparsable input yields the site URL with ``fellBack``.

    Always **200** once the ``url`` parameter is present.
    """
    return builder.check_url(url)
