"""In-memory catalogue of the site's pages and site-wide metadata.

The site has no database; its pages and their metadata are fixed at deploy
time.  ``PageRepository`` keeps the repository seam so services stay
independent of where the records come from.
"""

from __future__ import annotations

import logging
from datetime import date

from pydantic import BaseModel

from app.models.metadata.schemas import (
    ImageDescriptor,
    OpenGraph,
    PageMetadata,
    Robots,
    TwitterCard,
)
from app.models.metadata.sitemap import ChangeFrequency

logger = logging.getLogger(__name__)

_OG_WIDTH = 1200
_OG_HEIGHT = 630


class SiteProfile(BaseModel):
    """Site-wide metadata shared by every page."""

    name: str
    title_default: str
    title_template: str
    base: PageMetadata
    authors: list[str] = []
    creator: str | None = None
    publisher: str | None = None

    def document_title(self, page_title: str | None) -> str:
        """Title shown in the browser tab for a page titled *page_title*."""
        if page_title is None:
            return self.title_default
        return self.title_template % page_title


class PageEntry(BaseModel):
    """One page of the site with its metadata and sitemap hints."""

    slug: str
    path: str
    metadata: PageMetadata
    change_frequency: ChangeFrequency | None = None
    priority: float | None = None
    last_modified: date | None = None


def _og_image(url: str, alt: str) -> ImageDescriptor:
    return ImageDescriptor(url=url, width=_OG_WIDTH, height=_OG_HEIGHT, alt=alt)


def _default_site() -> SiteProfile:
    name = "Mi Sitio Optimizado"
    headline = f"{name} - SEO y Rendimiento"
    social_description = "Descubre técnicas avanzadas para mejorar tu web con Next.js"
    return SiteProfile(
        name=name,
        title_default=headline,
        title_template=f"%s | {name}",
        authors=["Tu Nombre"],
        creator="Tu Nombre",
        publisher=name,
        base=PageMetadata(
            description=(
                "Aprende sobre optimización SEO y rendimiento en Next.js con "
                "técnicas avanzadas para mejorar tu web."
            ),
            keywords=[
                "Next.js",
                "SEO",
                "optimización web",
                "rendimiento",
                "React",
                "TypeScript",
            ],
            open_graph=OpenGraph(
                title=headline,
                description=social_description,
                site_name=name,
                images=[_og_image("/og-image.png", headline)],
                locale="es_ES",
                type="website",
            ),
            twitter=TwitterCard(
                card="summary_large_image",
                title=headline,
                description=social_description,
                images=["/og-image.png"],
            ),
            robots=Robots(index=True, follow=True),
        ),
    )


def _default_pages() -> list[PageEntry]:
    return [
        PageEntry(
            slug="home",
            path="/",
            change_frequency="monthly",
            priority=1.0,
            metadata=PageMetadata(
                title="Home",
                description=(
                    "Bienvenido a Mi Sitio Optimizado. Aprende cómo mejorar el "
                    "rendimiento y SEO en Next.js con técnicas avanzadas."
                ),
                keywords=[
                    "Next.js",
                    "SEO",
                    "optimización",
                    "rendimiento web",
                    "React",
                    "desarrollo web",
                ],
                open_graph=OpenGraph(
                    title="Home - Mi Sitio Optimizado",
                    description=(
                        "Aprende cómo mejorar el rendimiento y SEO en Next.js "
                        "con técnicas avanzadas"
                    ),
                    type="website",
                    images=[_og_image("/og-image.png", "Mi Sitio Optimizado - Home")],
                ),
            ),
        ),
        PageEntry(
            slug="blog",
            path="/blog",
            change_frequency="weekly",
            priority=0.8,
            last_modified=date(2024, 11, 1),
            metadata=PageMetadata(
                title="Blog",
                description=(
                    "Artículos sobre optimización SEO, rendimiento web y mejores "
                    "prácticas en Next.js"
                ),
                keywords=[
                    "blog",
                    "Next.js",
                    "SEO",
                    "tutoriales",
                    "optimización web",
                    "rendimiento",
                ],
                open_graph=OpenGraph(
                    title="Blog - Mi Sitio Optimizado",
                    description=(
                        "Artículos sobre optimización SEO, rendimiento web y "
                        "mejores prácticas en Next.js"
                    ),
                    type="website",
                    images=[
                        _og_image("/og-image-blog.png", "Blog - Mi Sitio Optimizado")
                    ],
                ),
            ),
        ),
        PageEntry(
            slug="contacto",
            path="/contacto",
            change_frequency="yearly",
            priority=0.5,
            metadata=PageMetadata(
                title="Contacto",
                description=(
                    "Ponte en contacto con nosotros. Estamos aquí para ayudarte "
                    "con tus proyectos de optimización SEO y rendimiento web."
                ),
                keywords=["contacto", "soporte", "ayuda", "consultoría SEO", "Next.js"],
                open_graph=OpenGraph(
                    title="Contacto - Mi Sitio Optimizado",
                    description=(
                        "Ponte en contacto con nosotros para consultas sobre SEO "
                        "y optimización web"
                    ),
                    type="website",
                    images=[
                        _og_image(
                            "/og-image-contacto.png", "Contacto - Mi Sitio Optimizado"
                        )
                    ],
                ),
            ),
        ),
    ]


class PageRepository:
    """Read-only access to the site profile and its pages."""

    def __init__(self, site: SiteProfile, pages: list[PageEntry]) -> None:
        self._site = site
        self._pages = {page.slug: page for page in pages}

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> PageRepository:
        """Catalogue of the live site.

        Usage::

            repo = PageRepository.default()
        """
        return cls(site=_default_site(), pages=_default_pages())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def site(self) -> SiteProfile:
        return self._site

    def list_pages(self) -> list[PageEntry]:
        """Return every page in navigation order."""
        return list(self._pages.values())

    def find_by_slug(self, slug: str) -> PageEntry | None:
        """Return the page registered under *slug*, or ``None`` if unknown."""
        page = self._pages.get(slug)
        if page is not None:
            return page
        logger.info("No page registered for slug=%s", slug)
        return None
