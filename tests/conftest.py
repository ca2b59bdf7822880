"""
Pytest configuration and fixtures.
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.core.config import Settings
from catalog_api.infrastructure.persistence.models import Base
from catalog_api.main import create_app


@pytest_asyncio.fixture
async def session_factory():
    """
    Фикстура in-memory БД.

    StaticPool держит одно соединение, поэтому все сессии теста
    видят одну и ту же БД в памяти.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def settings(tmp_path):
    """Настройки с временной файловой БД"""
    return Settings(
        db_url=f"sqlite:///{tmp_path / 'catalog.db'}",
        environment="test",
        version="9.9.9",
    )


@pytest.fixture
def client(settings):
    """Test client fixture (lifespan запускается внутри with)"""
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
