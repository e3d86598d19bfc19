from __future__ import annotations

import logging

from app.models.metadata.schemas import ResolvedPage
from app.models.metadata.sitemap import SitemapEntry
from app.repositories.pages.repository import PageEntry, PageRepository
from app.services.metadata.builder import MetadataBuilder

logger = logging.getLogger(__name__)


class MetadataService:
    """Resolves catalogued pages into final metadata and sitemap entries."""

    def __init__(self, repo: PageRepository, builder: MetadataBuilder) -> None:
        self._repo = repo
        self._builder = builder

    def get_page_metadata(self, slug: str) -> ResolvedPage | None:
        """Return the resolved metadata for *slug*, or ``None`` if unknown."""
        page = self._repo.find_by_slug(slug)
        if page is None:
            return None
        return self._resolve(page)

    def list_pages(self) -> list[ResolvedPage]:
        return [self._resolve(page) for page in self._repo.list_pages()]

    def sitemap_entries(self) -> list[SitemapEntry]:
        """One sitemap entry per catalogued page, in navigation order.

        Page URLs pass through ``sanitize_url``; a page whose URL fell back
        to the site root is still listed, and the fallback is logged by the
        builder.
        """
        return [
            SitemapEntry(
                url=self._builder.sanitize_url(self._builder.canonical_url(page.path)),
                last_modified=page.last_modified,
                change_frequency=page.change_frequency,
                priority=page.priority,
            )
            for page in self._repo.list_pages()
        ]

    def _resolve(self, page: PageEntry) -> ResolvedPage:
        site = self._repo.site
        return ResolvedPage(
            slug=page.slug,
            path=page.path,
            document_title=site.document_title(page.metadata.title),
            canonical_url=self._builder.canonical_url(page.path),
            metadata=self._builder.merge(site.base, page.metadata),
            authors=list(site.authors),
            creator=site.creator,
            publisher=site.publisher,
        )
