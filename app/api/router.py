from fastapi import APIRouter

from app.api.metadata.routes import router as metadata_router
from app.api.sitemap.routes import router as sitemap_router
from app.api.urls.routes import router as urls_router

router = APIRouter()
router.include_router(metadata_router)
router.include_router(urls_router)
router.include_router(sitemap_router)
