"""
Общие настройки API схем.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


class ApiSchema(BaseModel):
    """
    Базовая схема API.

    JSON использует camelCase (imageFile, pageNumber),
    Python-код работает с snake_case именами полей.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProblemDetails(BaseModel):
    """
    Тело ответа для ошибок привязки запроса (400).

    Пример:
        {
            "title": "Bad Request",
            "status": 400,
            "detail": "Request validation failed",
            "errors": [...]
        }
    """

    title: str = Field(description="Краткое описание ошибки")
    status: int = Field(description="HTTP статус")
    detail: str = Field(description="Подробности")
    errors: List[Dict[str, Any]] = Field(default_factory=list, description="Ошибки валидации")


# Decimal в JSON ответах отдается числом, как и принимается в запросах
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
