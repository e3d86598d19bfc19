from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

from app.models.metadata.schemas import PageMetadata
from app.models.metadata.sitemap import SitemapEntry
from app.repositories.pages.repository import PageEntry, PageRepository
from app.services.metadata.service import MetadataService


@pytest.fixture
def service(repo, builder):
    return MetadataService(repo, builder)


# ---------------------------------------------------------------------------
# PageRepository tests
# ---------------------------------------------------------------------------


class TestPageRepository:
    def test_default_catalogue_order(self, repo):
        assert [page.slug for page in repo.list_pages()] == ["home", "blog", "contacto"]

    def test_find_by_slug(self, repo):
        page = repo.find_by_slug("blog")
        assert page is not None
        assert page.path == "/blog"
        assert page.metadata.title == "Blog"

    def test_find_unknown_slug_returns_none(self, repo):
        assert repo.find_by_slug("missing") is None

    def test_site_profile_title_template(self, repo):
        assert repo.site.document_title("Blog") == "Blog | Mi Sitio Optimizado"
        assert (
            repo.site.document_title(None)
            == "Mi Sitio Optimizado - SEO y Rendimiento"
        )

    def test_list_pages_returns_copy(self, repo):
        repo.list_pages().clear()
        assert len(repo.list_pages()) == 3


# ---------------------------------------------------------------------------
# MetadataService tests
# ---------------------------------------------------------------------------


class TestMetadataService:
    def test_get_page_metadata_merges_site_base(self, service, builder):
        page = service.get_page_metadata("blog")
        assert page is not None
        assert page.slug == "blog"
        assert page.document_title == "Blog | Mi Sitio Optimizado"
        assert page.canonical_url == f"{builder.site_url}/blog"

        metadata = page.metadata
        assert metadata.title == "Blog"
        assert metadata.keywords[:6] == [
            "Next.js",
            "SEO",
            "optimización web",
            "rendimiento",
            "React",
            "TypeScript",
        ]
        assert metadata.keywords[6:] == [
            "blog",
            "Next.js",
            "SEO",
            "tutoriales",
            "optimización web",
            "rendimiento",
        ]

    def test_page_open_graph_laid_over_site(self, service):
        og = service.get_page_metadata("contacto").metadata.open_graph
        assert og.title == "Contacto - Mi Sitio Optimizado"
        assert og.images[0].url == "/og-image-contacto.png"
        assert og.locale == "es_ES"
        assert og.site_name == "Mi Sitio Optimizado"

    def test_site_twitter_and_robots_inherited(self, service):
        metadata = service.get_page_metadata("home").metadata
        assert metadata.twitter.card == "summary_large_image"
        assert metadata.twitter.images == ["/og-image.png"]
        assert metadata.robots.index is True
        assert metadata.robots.follow is True

    def test_catalogued_pages_are_complete(self, service, builder):
        with patch("app.services.metadata.builder.logger") as mock_logger:
            pages = service.list_pages()
        assert len(pages) == 3
        for page in pages:
            assert builder.missing_display_fields(page.metadata) == []
        mock_logger.warning.assert_not_called()

    def test_site_attribution_attached(self, service):
        page = service.get_page_metadata("home")
        assert page.authors == ["Tu Nombre"]
        assert page.creator == "Tu Nombre"
        assert page.publisher == "Mi Sitio Optimizado"

    def test_get_unknown_page_returns_none(self, service):
        assert service.get_page_metadata("missing") is None

    def test_page_without_title_uses_default_document_title(self, builder):
        repo = PageRepository(
            site=PageRepository.default().site,
            pages=[PageEntry(slug="bare", path="bare", metadata=PageMetadata())],
        )
        page = MetadataService(repo, builder).get_page_metadata("bare")
        assert page.document_title == "Mi Sitio Optimizado - SEO y Rendimiento"
        assert page.canonical_url == f"{builder.site_url}/bare"
        assert page.metadata.title == builder.site_name


class TestSitemap:
    def test_one_entry_per_page(self, service, builder):
        entries = service.sitemap_entries()
        assert [entry.url for entry in entries] == [
            f"{builder.site_url}/",
            f"{builder.site_url}/blog",
            f"{builder.site_url}/contacto",
        ]

    def test_entries_carry_page_hints(self, service):
        blog = service.sitemap_entries()[1]
        assert blog.change_frequency == "weekly"
        assert blog.priority == 0.8
        assert blog.last_modified == date(2024, 11, 1)

    def test_home_has_no_last_modified(self, service):
        assert service.sitemap_entries()[0].last_modified is None

    def test_unparsable_page_url_falls_back_to_site(self, builder):
        builder.site_url = "not a url"
        repo = PageRepository(
            site=PageRepository.default().site,
            pages=[PageEntry(slug="x", path="/x", metadata=PageMetadata())],
        )
        entries = MetadataService(repo, builder).sitemap_entries()
        assert entries[0].url == "not a url"

    def test_priority_not_range_checked_and_string_timestamp_kept(self):
        entry = SitemapEntry(
            url="https://www.example.com/x",
            priority=1.5,
            last_modified="2024-01-01T00:00:00",
        )
        assert entry.priority == 1.5
        assert entry.last_modified == "2024-01-01T00:00:00"
        assert entry.model_dump(by_alias=True, exclude_none=True) == {
            "url": "https://www.example.com/x",
            "priority": 1.5,
            "lastModified": "2024-01-01T00:00:00",
        }
