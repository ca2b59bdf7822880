"""
Health check роутер.
"""

import logging

from fastapi import APIRouter, Depends

from ..schemas.health_schemas import HealthResponse
from ....core.config import Settings
from ....core.dependencies import get_settings

logger = logging.getLogger("catalog-api.api.health")

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint.

    Пример ответа:
        {
            "status": "healthy",
            "service": "catalog-api",
            "version": "0.1.0"
        }
    """
    logger.debug("Health check called")

    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.version
    )
