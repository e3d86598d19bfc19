from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api.metadata.routes import get_builder
from app.main import app
from app.repositories.pages.repository import PageRepository
from app.services.metadata.builder import MetadataBuilder

SITE_URL = "https://www.example.com"
SITE_NAME = "Example Site"
DEFAULT_DESCRIPTION = "Default description"
DEFAULT_LOCALE = "es_ES"


@pytest.fixture
def builder() -> MetadataBuilder:
    """Builder with an explicit site configuration, independent of the env."""
    return MetadataBuilder(
        site_url=SITE_URL,
        site_name=SITE_NAME,
        default_description=DEFAULT_DESCRIPTION,
        default_locale=DEFAULT_LOCALE,
    )


@pytest.fixture
def repo() -> PageRepository:
    return PageRepository.default()


@pytest.fixture
def client(builder):
    """TestClient whose routes use the test ``builder``."""
    app.dependency_overrides[get_builder] = lambda: builder
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
