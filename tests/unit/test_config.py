"""Unit tests for environment-driven settings."""

from restcraft.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.api_prefix == "/api/v1"
    assert settings.hateoas_links is True


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("RESTCRAFT_HATEOAS_LINKS", "false")
    monkeypatch.setenv("RESTCRAFT_API_PREFIX", "/v2")

    settings = Settings()

    assert settings.hateoas_links is False
    assert settings.api_prefix == "/v2"


def test_database_defaults():
    settings = Settings()

    assert settings.db_pool_size == 10
    assert settings.create_schema is False
