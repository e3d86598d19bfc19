from __future__ import annotations

import pytest

from app.core.config import DEFAULT_SITE_URL, Settings


@pytest.fixture(autouse=True)
def _clear_site_env(monkeypatch):
    monkeypatch.delenv("NEXT_PUBLIC_SITE_URL", raising=False)
    monkeypatch.delenv("SITE_URL", raising=False)


def test_site_url_defaults_to_localhost():
    assert Settings(_env_file=None).site_url == DEFAULT_SITE_URL


def test_site_url_read_from_public_env(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "https://mi-sitio.example")
    assert Settings(_env_file=None).site_url == "https://mi-sitio.example"


def test_empty_site_url_falls_back(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "")
    assert Settings(_env_file=None).site_url == DEFAULT_SITE_URL


def test_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "https://mi-sitio.example/")
    assert Settings(_env_file=None).site_url == "https://mi-sitio.example"


def test_site_defaults():
    config = Settings(_env_file=None)
    assert config.site_name == "Mi Sitio Optimizado"
    assert config.default_locale == "es_ES"
    assert config.default_description == (
        "Aprende sobre optimización SEO y rendimiento en Next.js"
    )
