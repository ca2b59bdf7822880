"""
Базовые классы для команд (Commands).

Команда представляет намерение изменить состояние системы.
Command Handler обрабатывает команду и возвращает результат,
тип которого команда объявляет своим generic-параметром.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict


# Тип переменная для результата команды
TResponse = TypeVar("TResponse")
TCommand = TypeVar("TCommand", bound="Command")


class Command(BaseModel, Generic[TResponse]):
    """
    Базовый класс для команд.

    Команда - это объект, который представляет намерение
    изменить состояние системы. Команды именуются в повелительном
    наклонении (CreateProduct, UpdateProduct и т.д.).

    Generic-параметр задает тип результата, который обязан вернуть
    обработчик этой команды.

    Пример:
        >>> class CreateUserResult(BaseModel):
        ...     id: str
        >>> class CreateUserCommand(Command[CreateUserResult]):
        ...     name: str
        >>>
        >>> command = CreateUserCommand(name="John")
    """

    # Команды неизменяемы
    model_config = ConfigDict(frozen=True)


class CommandHandler(ABC, Generic[TCommand, TResponse]):
    """
    Базовый класс для обработчиков команд.

    Type Parameters:
        TCommand: Тип обрабатываемой команды
        TResponse: Тип результата выполнения команды

    Пример:
        >>> class CreateUserHandler(CommandHandler[CreateUserCommand, CreateUserResult]):
        ...     async def handle(self, command: CreateUserCommand) -> CreateUserResult:
        ...         ...
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResponse:
        """
        Обработать команду.

        Args:
            command: Команда для обработки

        Returns:
            Результат выполнения команды
        """
        pass


class Unit(BaseModel):
    """
    Пустой результат команды без ответа.

    Все экземпляры равны между собой, поэтому можно
    сравнивать с Unit() в тестах.
    """

    model_config = ConfigDict(frozen=True)


class VoidCommand(Command[Unit]):
    """
    Команда без ответа.

    Обработчик такой команды только меняет состояние,
    медиатор возвращает вызывающему Unit().
    """


TVoidCommand = TypeVar("TVoidCommand", bound=VoidCommand)


class VoidCommandHandler(CommandHandler[TVoidCommand, Unit]):
    """
    Базовый класс для обработчиков команд без ответа.

    Наследник реализует execute(); handle() вызывает его
    и возвращает Unit().

    Пример:
        >>> class ArchiveUserCommand(VoidCommand):
        ...     user_id: str
        >>>
        >>> class ArchiveUserHandler(VoidCommandHandler[ArchiveUserCommand]):
        ...     async def execute(self, command: ArchiveUserCommand) -> None:
        ...         ...
    """

    @abstractmethod
    async def execute(self, command: TVoidCommand) -> None:
        """Выполнить команду."""

    async def handle(self, command: TVoidCommand) -> Unit:
        await self.execute(command)
        return Unit()
