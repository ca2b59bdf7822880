"""
Tests for configuration, database URL handling and error types.
"""

from uuid import uuid4

from catalog_api.core.config import Settings
from catalog_api.core.errors import CatalogApiError, DomainError, ProductNotFoundError
from catalog_api.infrastructure.persistence.database import to_async_url


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CATALOG_API__DB_URL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.db_url == "sqlite:///data/catalog.db"
    assert settings.log_level == "INFO"
    assert settings.is_development


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CATALOG_API__DB_URL", "postgresql://catalog:secret@db:5432/catalog")
    monkeypatch.setenv("CATALOG_API__ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.db_url == "postgresql://catalog:secret@db:5432/catalog"
    assert not settings.is_development


def test_to_async_url():
    assert to_async_url("sqlite:///data/catalog.db") == "sqlite+aiosqlite:///data/catalog.db"
    assert to_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert to_async_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"


def test_product_not_found_error():
    product_id = uuid4()

    error = ProductNotFoundError(product_id)

    assert isinstance(error, DomainError)
    assert isinstance(error, CatalogApiError)
    assert error.to_dict() == {
        "error_code": "PRODUCT_NOT_FOUND",
        "message": f"Product '{product_id}' not found",
        "details": {"product_id": str(product_id)},
    }


def test_error_str_without_details():
    assert str(CatalogApiError("boom")) == "boom"
    assert CatalogApiError("boom").error_code == "CatalogApiError"
