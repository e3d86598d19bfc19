from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.models.common import ErrorResponse
from app.models.metadata.schemas import (
    MergeRequest,
    NormalizedMetadata,
    PageMetadata,
    ResolvedPage,
)
from app.repositories.pages.repository import PageRepository
from app.services.metadata.builder import MetadataBuilder, metadata_builder
from app.services.metadata.service import MetadataService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/metadata", tags=["metadata"])


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_builder() -> MetadataBuilder:
    """FastAPI dependency returning the process-wide ``MetadataBuilder``."""
    return metadata_builder


def get_service(builder: MetadataBuilder = Depends(get_builder)) -> MetadataService:
    """FastAPI dependency that builds a ``MetadataService`` for each request."""
    return MetadataService(PageRepository.default(), builder)


# ---------------------------------------------------------------------------
# POST /metadata/build
# ---------------------------------------------------------------------------


@router.post(
    "/build",
    response_model=NormalizedMetadata,
    response_model_exclude_none=True,
    summary="Normalise a partial metadata record",
)
async def build_metadata(
    request: PageMetadata,
    builder: MetadataBuilder = Depends(get_builder),
) -> NormalizedMetadata:
    """Fill defaults into a partial page metadata record.

    - **200** — normalised record
    - **422** — body does not match the metadata shape
    """
    return builder.build(request)


# ---------------------------------------------------------------------------
# POST /metadata/merge
# ---------------------------------------------------------------------------


@router.post(
    "/merge",
    response_model=NormalizedMetadata,
    response_model_exclude_none=True,
    summary="Merge base metadata with page metadata",
)
async def merge_metadata(
    request: MergeRequest,
    builder: MetadataBuilder = Depends(get_builder),
) -> NormalizedMetadata:
    """Lay page metadata over base metadata, then normalise the result.

    - **200** — merged, normalised record
    - **422** — body does not match the merge shape
    """
    return builder.merge(request.base, request.page)


# ---------------------------------------------------------------------------
# GET /metadata/pages
# ---------------------------------------------------------------------------


@router.get(
    "/pages",
    response_model=list[ResolvedPage],
    response_model_exclude_none=True,
    summary="List resolved metadata for every page",
)
async def list_pages(
    service: MetadataService = Depends(get_service),
) -> list[ResolvedPage]:
    try:
        return service.list_pages()
    except Exception as exc:
        logger.exception("GET /metadata/pages failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))


@router.get(
    "/pages/{slug}",
    response_model=ResolvedPage,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
    summary="Resolved metadata for one page",
)
async def get_page(
    slug: str,
    service: MetadataService = Depends(get_service),
) -> ResolvedPage:
    """Return the site-wide metadata merged with the page's own.

    - **200** — page found
    - **404** — no page registered under ``slug``
    - **500** — metadata could not be resolved
    """
    try:
        page = service.get_page_metadata(slug)
    except Exception as exc:
        logger.exception("GET /metadata/pages/%s failed: %s", slug, exc)
        raise HTTPException(status_code=500, detail=str(exc))
    if page is None:
        raise HTTPException(status_code=404, detail=f"Unknown page: {slug}")
    return page
