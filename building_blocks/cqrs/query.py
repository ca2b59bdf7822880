"""
Базовые классы для запросов (Queries).

Запрос представляет намерение получить данные без изменения состояния.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict


TResponse = TypeVar("TResponse")
TQuery = TypeVar("TQuery", bound="Query")


class Query(BaseModel, Generic[TResponse]):
    """
    Базовый класс для запросов.

    Важно: Запросы НЕ должны изменять состояние системы!

    Пример:
        >>> class GetUserQuery(Query[GetUserResult]):
        ...     user_id: str
    """

    # Запросы неизменяемы
    model_config = ConfigDict(frozen=True)


class QueryHandler(ABC, Generic[TQuery, TResponse]):
    """
    Базовый класс для обработчиков запросов.

    Query Handler читает данные и возвращает результат;
    он не сохраняет изменения.
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResponse:
        """
        Обработать запрос.

        Args:
            query: Запрос для обработки

        Returns:
            Результат выполнения запроса
        """
        pass
