"""
Медиатор (dispatcher) для команд и запросов.

Регистрация явная: при старте процесса для каждого типа команды или
запроса регистрируется ровно одна фабрика обработчика. Никакого
сканирования модулей во время выполнения.

Зависимости, живущие в рамках одного HTTP запроса (например, сессия БД),
передаются через Sender:

    >>> mediator = Mediator()
    >>> mediator.register(CreateProductCommand, CreateProductHandler)
    >>> sender = mediator.sender(session=session)
    >>> result = await sender.send(CreateProductCommand(...))
"""

import logging
from typing import Any, Callable, Dict, Type, TypeVar, Union

from .command import Command, CommandHandler
from .query import Query, QueryHandler

logger = logging.getLogger("building-blocks.cqrs.mediator")

TResponse = TypeVar("TResponse")

Handler = Union[CommandHandler[Any, Any], QueryHandler[Any, Any]]
HandlerFactory = Callable[..., Handler]


class MediatorError(Exception):
    """Базовое исключение медиатора."""


class HandlerNotFoundError(MediatorError):
    """Для типа запроса не зарегистрирован обработчик."""

    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class HandlerAlreadyRegisteredError(MediatorError):
    """Для типа запроса уже зарегистрирован обработчик."""

    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(f"Handler for {request_type.__name__} is already registered")


class Mediator:
    """
    Таблица маршрутизации: тип команды/запроса -> фабрика обработчика.

    Фабрика вызывается с request-scoped зависимостями (именованными
    аргументами) и должна вернуть обработчик. Обычно фабрикой служит
    сам класс обработчика.

    Атрибуты:
        _factories: Зарегистрированные фабрики по точному типу запроса
    """

    def __init__(self) -> None:
        self._factories: Dict[type, HandlerFactory] = {}

    def register(
        self,
        request_type: Type[Union[Command[Any], Query[Any]]],
        factory: HandlerFactory,
    ) -> None:
        """
        Зарегистрировать обработчик для типа запроса.

        Args:
            request_type: Класс команды или запроса
            factory: Callable, создающий обработчик

        Raises:
            HandlerAlreadyRegisteredError: Если тип уже зарегистрирован
            TypeError: Если request_type не команда и не запрос
        """
        if not (issubclass(request_type, Command) or issubclass(request_type, Query)):
            raise TypeError(f"{request_type!r} is neither a Command nor a Query")
        if request_type in self._factories:
            raise HandlerAlreadyRegisteredError(request_type)

        self._factories[request_type] = factory
        logger.debug(f"Registered handler for {request_type.__name__}")

    def resolve(self, request_type: type, **scope: Any) -> Handler:
        """
        Создать обработчик для типа запроса.

        Поиск идет по точному типу, без учета наследования.

        Raises:
            HandlerNotFoundError: Если обработчик не зарегистрирован
        """
        factory = self._factories.get(request_type)
        if factory is None:
            raise HandlerNotFoundError(request_type)
        return factory(**scope)

    def sender(self, **scope: Any) -> "Sender":
        """Получить Sender, привязанный к зависимостям текущего запроса."""
        return Sender(self, scope)


class Sender:
    """
    Отправитель команд и запросов в рамках одного scope.

    Создается на каждый HTTP запрос, поэтому два конкурентных запроса
    никогда не делят зависимости (сессию БД).
    """

    def __init__(self, mediator: Mediator, scope: Dict[str, Any]):
        self._mediator = mediator
        self._scope = scope

    async def send(self, request: Union[Command[TResponse], Query[TResponse]]) -> TResponse:
        """
        Отправить команду или запрос обработчику и дождаться результата.

        Исключения обработчика пробрасываются без изменений.
        """
        handler = self._mediator.resolve(type(request), **self._scope)
        logger.debug(f"Dispatching {type(request).__name__} to {type(handler).__name__}")
        return await handler.handle(request)
