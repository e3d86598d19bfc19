from __future__ import annotations

import logging

from fastapi import FastAPI

from app.api.router import router
from app.core.config import settings


def _configure_logging() -> None:
    """Send ``app.*`` log records to stdout at ``settings.log_level``."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )
    app_log = logging.getLogger("app")
    app_log.setLevel(level)
    if not app_log.handlers:
        app_log.addHandler(handler)
    app_log.propagate = False


_configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Metadata",
    description="Builds and merges SEO and social-preview metadata for site pages.",
    version="1.0.0",
)

app.include_router(router)

logger.info("Serving metadata for %s (%s).", settings.site_name, settings.site_url)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
