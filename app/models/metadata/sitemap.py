from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ChangeFrequency = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never"
]


class SitemapEntry(BaseModel):
    """One sitemap record.

    ``priority`` is conventionally 0.0–1.0 but is not range-checked.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str
    last_modified: datetime | date | str | None = None
    change_frequency: ChangeFrequency | None = None
    priority: float | None = None


class SanitizedUrl(BaseModel):
    """Outcome of URL sanitisation.

    ``fell_back`` is ``True`` when the input could not be parsed and ``url``
    holds the configured site URL instead.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str
    fell_back: bool
