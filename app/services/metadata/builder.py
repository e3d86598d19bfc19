"""Metadata builder.

Pure helpers that turn partial page metadata into the complete record the
rendering layer injects into the document head, plus the URL helpers used
for canonical links, social images and sitemap entries.

The builder carries its site configuration explicitly; use
``MetadataBuilder.from_settings`` or the module-level ``metadata_builder``.
Every method is synchronous and side-effect free apart from logging.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import AnyUrl, BaseModel, ValidationError

from app.core.config import Settings, settings
from app.models.metadata.schemas import (
    NormalizedMetadata,
    OpenGraph,
    PageMetadata,
    Robots,
    TwitterCard,
)
from app.models.metadata.sitemap import SanitizedUrl

logger = logging.getLogger(__name__)

_OPEN_GRAPH_DISPLAY_FIELDS = ("title", "description", "images", "type")
_TWITTER_DISPLAY_FIELDS = ("card", "title", "description", "images")

_S = TypeVar("_S", bound=BaseModel)


class MetadataBuilder:
    """Builds, merges and post-processes page metadata for one site."""

    def __init__(
        self,
        site_url: str,
        site_name: str,
        default_description: str,
        default_locale: str,
    ) -> None:
        self.site_url = site_url
        self.site_name = site_name
        self.default_description = default_description
        self.default_locale = default_locale

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_settings(cls, config: Settings) -> MetadataBuilder:
        return cls(
            site_url=config.site_url,
            site_name=config.site_name,
            default_description=config.default_description,
            default_locale=config.default_locale,
        )

    # ------------------------------------------------------------------
    # Metadata records
    # ------------------------------------------------------------------

    def build(self, config: PageMetadata) -> NormalizedMetadata:
        """Return a complete metadata record for *config*.

        - ``title``, ``description`` and ``keywords`` fall back to the site
          name, the default description and ``[]`` when missing.
        - ``open_graph``, ``twitter`` and ``robots`` stay ``None`` when the
          input lacks them.
        - OpenGraph ``locale`` and ``site_name`` default when missing or
          empty; the remaining OpenGraph and Twitter fields pass through.
        - Robots ``index``/``follow`` default to ``True`` only when unset,
          so an explicit ``False`` survives.
        """
        og = config.open_graph
        twitter = config.twitter
        robots = config.robots

        return NormalizedMetadata(
            title=config.title if config.title is not None else self.site_name,
            description=(
                config.description
                if config.description is not None
                else self.default_description
            ),
            keywords=list(config.keywords) if config.keywords is not None else [],
            open_graph=(
                OpenGraph(
                    title=og.title,
                    description=og.description,
                    images=og.images,
                    type=og.type,
                    locale=og.locale or self.default_locale,
                    site_name=og.site_name or self.site_name,
                )
                if og is not None
                else None
            ),
            twitter=(
                TwitterCard(
                    card=twitter.card,
                    title=twitter.title,
                    description=twitter.description,
                    images=twitter.images,
                )
                if twitter is not None
                else None
            ),
            robots=(
                Robots(
                    index=robots.index if robots.index is not None else True,
                    follow=robots.follow if robots.follow is not None else True,
                )
                if robots is not None
                else None
            ),
        )

    def merge(self, base: PageMetadata, page: PageMetadata) -> NormalizedMetadata:
        """Merge site-wide *base* metadata with page-specific *page* metadata.

        Fields the page explicitly sets replace the base's.  Keywords
        accumulate (base first, duplicates kept).  When the page supplies an
        ``open_graph`` or ``twitter`` section it is laid field-by-field over
        the base's section; otherwise the base's section is used as is.  The
        result goes through :meth:`build`.

        Incomplete OpenGraph/Twitter sections are logged, not rejected.
        """
        overrides = {name: getattr(page, name) for name in page.model_fields_set}
        overrides["keywords"] = [*(base.keywords or []), *(page.keywords or [])]
        overrides["open_graph"] = (
            _overlay(base.open_graph or OpenGraph(), page.open_graph)
            if page.open_graph is not None
            else base.open_graph
        )
        overrides["twitter"] = (
            _overlay(base.twitter or TwitterCard(), page.twitter)
            if page.twitter is not None
            else base.twitter
        )

        merged = self.build(base.model_copy(update=overrides))

        missing = self.missing_display_fields(merged)
        if missing:
            logger.warning(
                "Merged metadata %r is missing display fields: %s",
                merged.title,
                ", ".join(missing),
            )
        return merged

    @staticmethod
    def missing_display_fields(metadata: NormalizedMetadata) -> list[str]:
        """Return the ``openGraph.*``/``twitter.*`` display fields left unset."""
        missing: list[str] = []
        if metadata.open_graph is not None:
            missing.extend(
                f"openGraph.{name}"
                for name in _OPEN_GRAPH_DISPLAY_FIELDS
                if getattr(metadata.open_graph, name) is None
            )
        if metadata.twitter is not None:
            missing.extend(
                f"twitter.{name}"
                for name in _TWITTER_DISPLAY_FIELDS
                if getattr(metadata.twitter, name) is None
            )
        return missing

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def og_image_url(self, path: str) -> str:
        """Absolute URL of a social-preview image served by the site."""
        return f"{self.site_url}{_leading_slash(path)}"

    def canonical_url(self, path: str) -> str:
        """Absolute canonical URL for the page at *path*."""
        return f"{self.site_url}{_leading_slash(path)}"

    def check_url(self, url: str) -> SanitizedUrl:
        """Parse *url* as an absolute URL and report whether it was usable.

        A valid URL comes back in its serialised form (default port dropped,
        empty path turned into ``/``).  Anything else yields the site URL
        with ``fell_back=True``.
        """
        try:
            parsed = AnyUrl(url)
        except ValidationError:
            logger.warning("Invalid URL %r; falling back to %s", url, self.site_url)
            # site_url is the configured URL with its trailing slash stripped.
            return SanitizedUrl(url=self.site_url, fell_back=True)
        return SanitizedUrl(url=str(parsed), fell_back=False)

    def sanitize_url(self, url: str) -> str:
        """Return *url* normalised, or the site URL when it does not parse."""
        return self.check_url(url).url


def _leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def _overlay(base_section: _S, page_section: _S) -> _S:
    """Copy of *base_section* with the fields *page_section* explicitly set."""
    return base_section.model_copy(
        update={
            name: getattr(page_section, name)
            for name in page_section.model_fields_set
        }
    )


#: Module-level builder configured from the process settings.
metadata_builder: MetadataBuilder = MetadataBuilder.from_settings(settings)
