"""
API схемы для health check.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Ответ health check.

    Пример:
        {
            "status": "healthy",
            "service": "catalog-api",
            "version": "0.1.0"
        }
    """

    status: str = Field(description="Статус сервиса")
    service: str = Field(description="Имя сервиса")
    version: str = Field(description="Версия сервиса")
