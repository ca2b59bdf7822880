"""
Catalog API Service - Main application entry point.

FastAPI application for the product catalog (CQRS over a document store).
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from catalog_api.api.error_handlers import register_exception_handlers
from catalog_api.api.v1.routers import health_router, products_router
from catalog_api.core.config import Settings, logger, settings as default_settings
from catalog_api.core.mediator import build_mediator
from catalog_api.infrastructure.persistence.database import close_db, init_database, init_db
from catalog_api.middleware import StructuredLoggingMiddleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings (defaults to environment settings)
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info("Starting Catalog API...")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Version: {settings.version}")

        try:
            init_database(settings.db_url)
            await init_db()
            logger.info("✓ Database initialized")
        except Exception as e:
            logger.error(f"Failed to initialize: {e}")
            raise

        yield

        logger.info("Shutting down Catalog API...")
        await close_db()

    app = FastAPI(
        title="Catalog API",
        description="Product catalog service",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.mediator = build_mediator()

    app.add_middleware(StructuredLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host="0.0.0.0",
        port=default_settings.port,
        reload=default_settings.is_development,
        log_level=default_settings.log_level.lower(),
    )
