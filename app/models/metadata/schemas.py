from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, PositiveInt
from pydantic.alias_generators import to_camel

OpenGraphType = Literal["website", "article", "profile"]
TwitterCardType = Literal["summary", "summary_large_image"]


class _CamelModel(BaseModel):
    """Base for records serialised with the head-tag convention's camelCase keys.

    Python code uses snake_case attributes; input accepts either form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageDescriptor(_CamelModel):
    url: str
    width: PositiveInt | None = None
    height: PositiveInt | None = None
    alt: str | None = None


class OpenGraph(_CamelModel):
    """OpenGraph block.

    title/description/images/type are expected from the caller but are not
    enforced, so a partial section can travel through ``merge``.
    """

    title: str | None = None
    description: str | None = None
    images: list[ImageDescriptor] | None = None
    type: OpenGraphType | None = None
    locale: str | None = None
    site_name: str | None = None


class TwitterCard(_CamelModel):
    card: TwitterCardType | None = None
    title: str | None = None
    description: str | None = None
    images: list[str] | None = None


class Robots(_CamelModel):
    index: bool | None = None
    follow: bool | None = None


class PageMetadata(_CamelModel):
    """Partial metadata description for one page.

    Every field may be omitted.  ``model_fields_set`` records which fields the
    caller supplied; ``MetadataBuilder.merge`` relies on it for page-over-base
    overrides.
    """

    title: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    open_graph: OpenGraph | None = None
    twitter: TwitterCard | None = None
    robots: Robots | None = None


class NormalizedMetadata(_CamelModel):
    """Builder output: scalar fields always filled, sections ``None`` when absent."""

    title: str
    description: str
    keywords: list[str]
    open_graph: OpenGraph | None = None
    twitter: TwitterCard | None = None
    robots: Robots | None = None


class MergeRequest(BaseModel):
    """Request body for POST /metadata/merge."""

    base: PageMetadata = PageMetadata()
    page: PageMetadata = PageMetadata()


class ResolvedPage(_CamelModel):
    """A catalogued page with its final metadata."""

    slug: str
    path: str
    document_title: str
    canonical_url: str
    metadata: NormalizedMetadata
    authors: list[str] = []
    creator: str | None = None
    publisher: str | None = None
